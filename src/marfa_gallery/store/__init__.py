"""Repositories over the gallery tables."""

from marfa_gallery.store.art_pieces import ArtPieceRepository
from marfa_gallery.store.profiles import ProfileRepository

__all__ = ["ArtPieceRepository", "ProfileRepository"]
