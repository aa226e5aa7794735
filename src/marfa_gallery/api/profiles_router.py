"""Collector profile and leaderboard endpoints.

Endpoints:
- GET /api/profiles - All profiles, or one with ?wallet=
- POST /api/profiles - Create or update a profile
- GET /api/collectors/top - Collectors ranked by minted pieces
"""

import logging

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from marfa_gallery.store import ArtPieceRepository, ProfileRepository

from .deps import get_art_repo, get_profile_repo
from .errors import GalleryAPIError
from .security import is_valid_wallet_address, sanitize_input

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["profiles"])


class ProfileRequest(BaseModel):
    """Create/update payload. ``requestorWallet`` is the wallet making the change."""

    model_config = ConfigDict(populate_by_name=True)

    wallet_address: str | None = Field(default=None, alias="walletAddress")
    name: str | None = None
    x_handle: str | None = Field(default=None, alias="xHandle")
    farcaster_handle: str | None = Field(default=None, alias="farcasterHandle")
    instagram_handle: str | None = Field(default=None, alias="instagramHandle")
    requestor_wallet: str | None = Field(default=None, alias="requestorWallet")


def _clean_handle(value: str | None) -> str | None:
    if value is None:
        return None
    return sanitize_input(value) or None


@router.get("/profiles")
def get_profiles(
    wallet: str | None = None,
    profiles: ProfileRepository = Depends(get_profile_repo),
):
    if wallet:
        return {"profile": profiles.get_by_wallet(wallet)}
    return {"profiles": profiles.list_all()}


@router.post("/profiles")
def upsert_profile(
    request: ProfileRequest,
    profiles: ProfileRepository = Depends(get_profile_repo),
):
    """Users may edit their own profile; admins may edit anyone's."""
    name = sanitize_input(request.name or "")
    if not request.wallet_address or not name:
        raise GalleryAPIError(400, "Wallet address and name are required", "MISSING_PROFILE_FIELDS")
    if not is_valid_wallet_address(request.wallet_address):
        raise GalleryAPIError(400, "Invalid wallet address", "INVALID_WALLET_ADDRESS")
    if not request.requestor_wallet:
        raise GalleryAPIError(
            401, "Requestor wallet is required for authorization", "MISSING_REQUESTOR"
        )

    is_own_profile = request.requestor_wallet.lower() == request.wallet_address.lower()
    if not is_own_profile and not profiles.is_admin(request.requestor_wallet):
        logger.warning(
            f"Rejected profile update of {request.wallet_address} by {request.requestor_wallet}"
        )
        raise GalleryAPIError(
            403,
            "Unauthorized: You can only update your own profile or must be an admin to update others",
            "FORBIDDEN",
        )

    profile = profiles.upsert(
        request.wallet_address,
        name,
        x_handle=_clean_handle(request.x_handle),
        farcaster_handle=_clean_handle(request.farcaster_handle),
        instagram_handle=_clean_handle(request.instagram_handle),
    )
    return {"success": True, "profile": profile}


@router.get("/collectors/top")
def top_collectors(
    limit: int = Query(default=7, ge=1, le=100),
    repo: ArtPieceRepository = Depends(get_art_repo),
):
    return {"success": True, "collectors": repo.top_collectors(limit)}
