"""Identifier maintenance endpoints.

Endpoints:
- POST /api/update-identifiers - Backfill identifiers for legacy rows
- POST /api/identifiers/generate - Preview unused identifiers
- GET /api/identifiers/capacity - Size of the identifier space
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from marfa_gallery.config import Settings
from marfa_gallery.database import Database, UniqueViolation
from marfa_gallery.identifiers import IdentifierReservationError, TwoWordIDGenerator
from marfa_gallery.store import ArtPieceRepository

from .deps import get_app_settings, get_art_repo, get_db, get_id_generator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["identifiers"])


class GenerateIdentifiersRequest(BaseModel):
    count: int = Field(default=1, ge=0, le=100, description="Number of identifiers to draw")


class GenerateIdentifiersResponse(BaseModel):
    identifiers: list[str] = Field(..., description="Identifiers not currently assigned")
    capacity: int = Field(..., description="Total identifiers the word lists can form")


@router.post("/update-identifiers")
def update_identifiers(
    db: Database = Depends(get_db),
    repo: ArtPieceRepository = Depends(get_art_repo),
    generator: TwoWordIDGenerator = Depends(get_id_generator),
    settings: Settings = Depends(get_app_settings),
):
    """Assign fresh identifiers to every row whose identifier is missing or invalid.

    The whole backfill is one transaction; a collision with a concurrent
    submission rolls it back and the backfill is recomputed from a fresh
    snapshot.
    """
    for attempt in range(1, settings.id_reserve_max_attempts + 1):
        needing = repo.pieces_needing_identifiers(generator.is_valid)
        if not needing:
            return {
                "success": True,
                "message": "All art pieces already have valid two-word identifiers",
                "updated": 0,
                "newIdentifiers": [],
            }

        existing = repo.existing_identifiers(generator.is_valid)
        new_ids = generator.generate_unique_batch(len(needing), existing)

        try:
            for piece, word in zip(needing, new_ids):
                repo.set_identifier(piece["id"], word)
            db.commit()
        except UniqueViolation as e:
            db.rollback()
            logger.warning(
                f"Identifier backfill collided (attempt {attempt}/"
                f"{settings.id_reserve_max_attempts}): {e}"
            )
            continue

        logger.info(f"Backfilled identifiers for {len(needing)} art pieces")
        return {
            "success": True,
            "message": f"Updated {len(needing)} art pieces with two-word identifiers",
            "updated": len(needing),
            "newIdentifiers": new_ids,
        }

    raise IdentifierReservationError(
        f"Identifier backfill failed after {settings.id_reserve_max_attempts} attempts"
    )


@router.post("/identifiers/generate", response_model=GenerateIdentifiersResponse)
def generate_identifiers(
    request: GenerateIdentifiersRequest,
    repo: ArtPieceRepository = Depends(get_art_repo),
    generator: TwoWordIDGenerator = Depends(get_id_generator),
):
    """Draw identifiers that are free right now. Nothing is reserved."""
    identifiers = generator.generate_unique_batch(
        request.count, repo.existing_identifiers(generator.is_valid)
    )
    return GenerateIdentifiersResponse(identifiers=identifiers, capacity=generator.capacity)


@router.get("/identifiers/capacity")
def identifier_capacity(
    repo: ArtPieceRepository = Depends(get_art_repo),
    generator: TwoWordIDGenerator = Depends(get_id_generator),
):
    assigned = len(repo.existing_identifiers(generator.is_valid))
    return {
        "capacity": generator.capacity,
        "adjectives": len(generator.adjectives),
        "nouns": len(generator.nouns),
        "assigned": assigned,
        "remaining": generator.capacity - assigned,
    }
