"""Collector profile persistence. Wallet addresses compare case-insensitively."""

from __future__ import annotations

from typing import Any

from marfa_gallery.database.ports import Database

_PROFILE_COLUMNS = (
    "id, wallet_address, name, x_handle, farcaster_handle, instagram_handle, "
    "is_admin, created_at, updated_at"
)


def _decode_profile(row: Any) -> dict[str, Any]:
    profile = dict(row)
    profile["is_admin"] = bool(profile.get("is_admin"))
    return profile


class ProfileRepository:
    def __init__(self, db: Database):
        self.db = db

    def get_by_wallet(self, wallet_address: str) -> dict[str, Any] | None:
        row = self.db.fetchone(
            f"""
            SELECT {_PROFILE_COLUMNS}
            FROM user_profiles
            WHERE LOWER(wallet_address) = LOWER(?)
            LIMIT 1
            """,
            [wallet_address],
        )
        return _decode_profile(row) if row else None

    def list_all(self) -> list[dict[str, Any]]:
        rows = self.db.fetchall(
            f"SELECT {_PROFILE_COLUMNS} FROM user_profiles ORDER BY created_at DESC, id DESC"
        )
        return [_decode_profile(row) for row in rows]

    def is_admin(self, wallet_address: str) -> bool:
        profile = self.get_by_wallet(wallet_address)
        return bool(profile and profile["is_admin"])

    def upsert(
        self,
        wallet_address: str,
        name: str,
        x_handle: str | None = None,
        farcaster_handle: str | None = None,
        instagram_handle: str | None = None,
    ) -> dict[str, Any]:
        """Create the profile for ``wallet_address`` or overwrite its editable fields."""
        existing = self.get_by_wallet(wallet_address)
        if existing:
            self.db.execute(
                """
                UPDATE user_profiles
                SET name = ?, x_handle = ?, farcaster_handle = ?, instagram_handle = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                [name, x_handle, farcaster_handle, instagram_handle, existing["id"]],
            )
        else:
            self.db.execute(
                """
                INSERT INTO user_profiles (wallet_address, name, x_handle, farcaster_handle, instagram_handle)
                VALUES (?, ?, ?, ?, ?)
                """,
                [wallet_address, name, x_handle, farcaster_handle, instagram_handle],
            )
        self.db.commit()

        profile = self.get_by_wallet(wallet_address)
        if profile is None:  # pragma: no cover - write just committed
            raise RuntimeError(f"Profile {wallet_address} vanished after upsert")
        return profile

    def set_admin(self, wallet_address: str, is_admin: bool = True) -> None:
        self.db.execute(
            "UPDATE user_profiles SET is_admin = ? WHERE LOWER(wallet_address) = LOWER(?)",
            [is_admin, wallet_address],
        )
        self.db.commit()
