"""Art piece persistence.

All queries go through the Database port with `?` placeholders so the same
SQL runs on SQLite and Postgres.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from marfa_gallery.database.ports import Database, UniqueViolation

logger = logging.getLogger(__name__)

_PIECE_COLUMNS = """
    ap.id, ap.title, ap.description, ap.identification_word,
    ap.ipfs_metadata_url, ap.ipfs_image_url, ap.is_minted,
    ap.minted_at, ap.minted_by, ap.token_id, ap.created_at,
    ap.metadata_json, up.name AS minter_name
"""

_PROFILE_JOIN = "LEFT JOIN user_profiles up ON LOWER(ap.minted_by) = LOWER(up.wallet_address)"


def _decode_piece(row: Any) -> dict[str, Any]:
    """Turn a stored row into the API shape with parsed metadata and traits."""
    piece = dict(row)
    piece["is_minted"] = bool(piece.get("is_minted"))
    raw = piece.pop("metadata_json", None)
    metadata = None
    if raw:
        try:
            metadata = json.loads(raw) if isinstance(raw, str) else raw
        except ValueError as e:
            logger.error(f"Error parsing metadata for piece {piece.get('id')}: {e}")
    piece["metadata"] = metadata
    attributes = metadata.get("attributes") if isinstance(metadata, dict) else None
    piece["traits"] = attributes or []
    return piece


class ArtPieceRepository:
    """CRUD and gallery queries over the `art_pieces` table."""

    def __init__(self, db: Database):
        self.db = db

    def create(
        self,
        *,
        ipfs_metadata_url: str,
        ipfs_image_url: str,
        title: str,
        description: str,
        identification_word: str,
        metadata: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Insert a new art piece.

        Raises:
            UniqueViolation: If the metadata URL or identification word is taken.
        """
        try:
            self.db.execute(
                """
                INSERT INTO art_pieces (
                    ipfs_metadata_url, ipfs_image_url, title, description,
                    identification_word, metadata_json
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    ipfs_metadata_url,
                    ipfs_image_url,
                    title,
                    description,
                    identification_word,
                    json.dumps(metadata) if metadata is not None else None,
                ],
            )
            self.db.commit()
        except UniqueViolation:
            self.db.rollback()
            raise

        piece = self.get_by_metadata_url(ipfs_metadata_url)
        if piece is None:  # pragma: no cover - insert just committed
            raise RuntimeError(f"Art piece {ipfs_metadata_url} vanished after insert")
        return piece

    def get_by_identifier(self, identifier: str) -> dict[str, Any] | None:
        row = self.db.fetchone(
            f"""
            SELECT {_PIECE_COLUMNS}
            FROM art_pieces ap
            {_PROFILE_JOIN}
            WHERE ap.identification_word = ?
            """,
            [identifier],
        )
        return _decode_piece(row) if row else None

    def get_by_metadata_url(self, ipfs_metadata_url: str) -> dict[str, Any] | None:
        row = self.db.fetchone(
            f"""
            SELECT {_PIECE_COLUMNS}
            FROM art_pieces ap
            {_PROFILE_JOIN}
            WHERE ap.ipfs_metadata_url = ?
            """,
            [ipfs_metadata_url],
        )
        return _decode_piece(row) if row else None

    def list_pieces(
        self,
        limit: int = 50,
        offset: int = 0,
        minted_only: bool = False,
        search: str = "",
        random: bool = False,
    ) -> tuple[list[dict[str, Any]], int]:
        """Gallery listing.

        Returns:
            The requested page of pieces and the total number of matches.
        """
        clauses: list[str] = []
        params: list[Any] = []
        if minted_only:
            clauses.append("ap.is_minted = ?")
            params.append(True)
        if search:
            pattern = f"%{search.lower()}%"
            clauses.append(
                "(LOWER(ap.title) LIKE ? OR LOWER(ap.description) LIKE ?"
                " OR LOWER(ap.identification_word) LIKE ?)"
            )
            params.extend([pattern, pattern, pattern])

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        order = "RANDOM()" if random else "ap.created_at DESC, ap.id DESC"

        rows = self.db.fetchall(
            f"""
            SELECT {_PIECE_COLUMNS}
            FROM art_pieces ap
            {_PROFILE_JOIN}
            {where}
            ORDER BY {order}
            LIMIT ? OFFSET ?
            """,
            [*params, limit, offset],
        )
        count_row = self.db.fetchone(f"SELECT COUNT(*) AS total FROM art_pieces ap {where}", params)
        total = int(dict(count_row)["total"]) if count_row else 0
        return [_decode_piece(row) for row in rows], total

    def recent_unminted(self, limit: int = 6) -> list[dict[str, Any]]:
        rows = self.db.fetchall(
            f"""
            SELECT {_PIECE_COLUMNS}
            FROM art_pieces ap
            {_PROFILE_JOIN}
            WHERE ap.is_minted = ?
            ORDER BY ap.created_at DESC, ap.id DESC
            LIMIT ?
            """,
            [False, limit],
        )
        return [_decode_piece(row) for row in rows]

    def mark_minted(
        self, identifier: str, wallet_address: str, token_id: str | None = None
    ) -> dict[str, Any] | None:
        """Record a completed mint.

        Only an unminted piece is updated. Returns ``None`` when no row
        changed, i.e. the piece is unknown or someone already minted it.
        """
        updated = self.db.execute(
            """
            UPDATE art_pieces
            SET is_minted = ?, minted_at = CURRENT_TIMESTAMP, minted_by = ?, token_id = ?
            WHERE identification_word = ? AND is_minted = ?
            """,
            [True, wallet_address, token_id, identifier, False],
        )
        self.db.commit()
        if updated == 0:
            return None
        return self.get_by_identifier(identifier)

    def existing_identifiers(self, is_valid: Callable[[str], bool] | None = None) -> set[str]:
        """Identifiers currently stored, optionally only those passing ``is_valid``."""
        rows = self.db.fetchall(
            """
            SELECT DISTINCT identification_word
            FROM art_pieces
            WHERE identification_word IS NOT NULL AND identification_word != ''
            """
        )
        words = {dict(row)["identification_word"] for row in rows}
        if is_valid is None:
            return words
        return {word for word in words if is_valid(word)}

    def pieces_needing_identifiers(self, is_valid: Callable[[str], bool]) -> list[dict[str, Any]]:
        """Rows whose stored identifier is missing or fails ``is_valid``, oldest first."""
        rows = self.db.fetchall("SELECT id, identification_word FROM art_pieces ORDER BY id")
        return [dict(row) for row in rows if not is_valid(dict(row)["identification_word"])]

    def set_identifier(self, piece_id: int, identifier: str) -> None:
        self.db.execute(
            "UPDATE art_pieces SET identification_word = ? WHERE id = ?",
            [identifier, piece_id],
        )

    def top_collectors(self, limit: int = 7) -> list[dict[str, Any]]:
        rows = self.db.fetchall(
            f"""
            SELECT
                ap.minted_by AS wallet_address,
                up.name AS name,
                COUNT(*) AS minted_count,
                MIN(ap.minted_at) AS first_mint_date,
                MAX(ap.minted_at) AS last_mint_date
            FROM art_pieces ap
            {_PROFILE_JOIN}
            WHERE ap.is_minted = ? AND ap.minted_by IS NOT NULL
            GROUP BY ap.minted_by, up.name
            ORDER BY minted_count DESC, first_mint_date ASC
            LIMIT ?
            """,
            [True, limit],
        )
        collectors = []
        for row in rows:
            collector = dict(row)
            collector["minted_count"] = int(collector["minted_count"])
            collectors.append(collector)
        return collectors
