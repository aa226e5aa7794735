"""Art piece API endpoints.

Endpoints:
- POST /api/art - Submit a new art piece
- GET /api/art - Gallery listing with search and pagination
- GET /api/art/recent-unminted - Latest pieces still available to mint
- GET /api/art/{identifier} - Single piece by two-word identifier
- POST /api/art/{identifier}/mint - Record a completed mint
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from marfa_gallery.config import Settings
from marfa_gallery.database import UniqueViolation
from marfa_gallery.identifiers import TwoWordIDGenerator, insert_with_unique_identifier
from marfa_gallery.store import ArtPieceRepository

from .deps import get_app_settings, get_art_repo, get_id_generator
from .errors import GalleryAPIError
from .security import is_valid_wallet_address, sanitize_input

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/art", tags=["art"])


# === Models ===

class ArtMetadata(BaseModel):
    """Token metadata document as published alongside the artwork."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, description="Artwork title")
    description: str | None = Field(default=None, description="Artwork description")
    image: str | None = Field(default=None, description="Image URL (ipfs:// or http)")
    identification_word: str | None = Field(
        default=None, description="Optional two-word identifier to claim"
    )
    attributes: list[dict[str, Any]] = Field(default_factory=list, description="Token traits")


class SubmitArtRequest(BaseModel):
    """Request to submit an art piece."""

    ipfs_metadata_url: str = Field(..., description="IPFS URL of the metadata document")
    metadata: ArtMetadata = Field(..., description="Contents of the metadata document")


class MintRequest(BaseModel):
    """Outcome of a wallet mint transaction."""

    model_config = ConfigDict(populate_by_name=True)

    wallet_address: str | None = Field(default=None, alias="walletAddress")
    transaction_hash: str | None = Field(default=None, alias="transactionHash")
    token_id: str | int | None = Field(default=None, alias="tokenId")
    mint_cost: str | float | None = Field(default=None, alias="mintCost")


# === Helpers ===

def _gateway_url(url: str, gateway: str) -> str:
    if url.startswith("ipfs://"):
        return gateway + url[len("ipfs://"):]
    return url


def _require_valid_identifier(identifier: str, generator: TwoWordIDGenerator) -> None:
    if not generator.is_valid(identifier):
        raise GalleryAPIError(400, "Invalid art piece identifier format", "INVALID_IDENTIFIER")


# === Endpoints ===

@router.post("", status_code=201)
def submit_art(
    request: SubmitArtRequest,
    repo: ArtPieceRepository = Depends(get_art_repo),
    generator: TwoWordIDGenerator = Depends(get_id_generator),
    settings: Settings = Depends(get_app_settings),
):
    """Create an art piece, assigning a two-word identifier when none is given."""
    metadata_url = request.ipfs_metadata_url.strip()
    if not metadata_url.startswith("ipfs://") and "ipfs" not in metadata_url:
        raise GalleryAPIError(
            400,
            "Invalid IPFS URL format. Must start with ipfs:// or contain ipfs",
            "INVALID_IPFS_FORMAT",
        )

    metadata = request.metadata
    if not metadata.name or not metadata.image:
        raise GalleryAPIError(
            400,
            "Metadata must include required fields: name, image",
            "MISSING_REQUIRED_FIELDS",
            received_fields=sorted(metadata.model_dump(exclude_none=True)),
        )

    existing = repo.get_by_metadata_url(metadata_url)
    if existing:
        raise GalleryAPIError(
            409,
            "Art piece with this IPFS URL already exists",
            "DUPLICATE_ARTWORK",
            existing_id=existing["id"],
            existing_title=existing["title"],
        )

    fields = {
        "ipfs_metadata_url": metadata_url,
        "ipfs_image_url": _gateway_url(metadata.image, settings.ipfs_gateway_url),
        "title": sanitize_input(metadata.name),
        "description": sanitize_input(metadata.description or ""),
        "metadata": metadata.model_dump(),
    }

    requested_word = (metadata.identification_word or "").strip()
    try:
        if requested_word:
            if not generator.is_valid(requested_word):
                raise GalleryAPIError(
                    400,
                    "identification_word must be an adjective-noun pair from the word lists",
                    "INVALID_IDENTIFICATION_WORD",
                )
            taken = repo.get_by_identifier(requested_word)
            if taken:
                raise GalleryAPIError(
                    409,
                    "An art piece with this identification word already exists",
                    "DUPLICATE_IDENTIFICATION_WORD",
                    existing_id=taken["id"],
                )
            piece = repo.create(identification_word=requested_word, **fields)
        else:
            _, piece = insert_with_unique_identifier(
                lambda word: repo.create(identification_word=word, **fields),
                lambda: repo.existing_identifiers(generator.is_valid),
                generator=generator,
                max_attempts=settings.id_reserve_max_attempts,
                context=metadata_url,
            )
    except UniqueViolation as e:
        # Lost a race with a concurrent submission of the same artwork or identifier
        logger.warning(f"Concurrent duplicate submission for {metadata_url}: {e}")
        raise GalleryAPIError(
            409, "Art piece conflicts with an existing submission", "DUPLICATE_ARTWORK"
        ) from e

    logger.info(f"Created art piece {piece['identification_word']} from {metadata_url}")
    return {
        "success": True,
        "message": "Art piece successfully created",
        "art_piece": {**piece, "mint_url": f"/art/{piece['identification_word']}"},
    }


@router.get("")
def list_art(
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    minted_only: bool = False,
    search: str = "",
    random: bool = False,
    repo: ArtPieceRepository = Depends(get_art_repo),
):
    """Gallery listing."""
    search = search.strip()
    pieces, total = repo.list_pieces(
        limit=limit, offset=offset, minted_only=minted_only, search=search, random=random
    )
    return {
        "success": True,
        "art_pieces": pieces,
        "pagination": {
            "total": total,
            "limit": limit,
            "offset": offset,
            "has_more": offset + limit < total,
        },
        "filters": {"minted_only": minted_only, "search": search, "random": random},
    }


@router.get("/recent-unminted")
def recent_unminted(
    limit: int = Query(default=6, ge=1, le=50),
    repo: ArtPieceRepository = Depends(get_art_repo),
):
    return {"success": True, "art_pieces": repo.recent_unminted(limit)}


@router.get("/{identifier}")
def get_art(
    identifier: str,
    repo: ArtPieceRepository = Depends(get_art_repo),
    generator: TwoWordIDGenerator = Depends(get_id_generator),
):
    _require_valid_identifier(identifier, generator)
    piece = repo.get_by_identifier(identifier)
    if piece is None:
        raise GalleryAPIError(404, "Art piece not found", "NOT_FOUND")
    return {"art_piece": piece}


@router.post("/{identifier}/mint")
def mint_art(
    identifier: str,
    request: MintRequest,
    repo: ArtPieceRepository = Depends(get_art_repo),
    generator: TwoWordIDGenerator = Depends(get_id_generator),
    settings: Settings = Depends(get_app_settings),
):
    """Mark an art piece as minted by the given wallet."""
    _require_valid_identifier(identifier, generator)

    if not request.wallet_address or not request.transaction_hash:
        raise GalleryAPIError(
            400, "Wallet address and transaction hash are required", "MISSING_MINT_FIELDS"
        )
    if not is_valid_wallet_address(request.wallet_address):
        raise GalleryAPIError(400, "Invalid wallet address", "INVALID_WALLET_ADDRESS")

    piece = repo.get_by_identifier(identifier)
    if piece is None:
        raise GalleryAPIError(404, "Art piece not found", "NOT_FOUND")
    if piece["is_minted"]:
        raise GalleryAPIError(409, "Art piece is already minted", "ALREADY_MINTED")

    token_id = str(request.token_id) if request.token_id is not None else None
    minted = repo.mark_minted(identifier, request.wallet_address, token_id)
    if minted is None:
        raise GalleryAPIError(409, "Art piece is already minted", "ALREADY_MINTED")

    logger.info(f"Art piece {identifier} minted by {request.wallet_address}")
    return {
        "success": True,
        "message": "NFT minted successfully!",
        "data": {
            "artPiece": minted,
            "transactionHash": request.transaction_hash,
            "tokenId": request.token_id,
            "mintCost": request.mint_cost,
            "explorerUrl": f"{settings.explorer_tx_url}{request.transaction_hash}",
        },
    }
