"""FastAPI dependencies shared by the routers."""

from collections.abc import Iterator

from fastapi import Depends, Request

from marfa_gallery.config import Settings
from marfa_gallery.database import Database, get_database
from marfa_gallery.identifiers import TwoWordIDGenerator
from marfa_gallery.store import ArtPieceRepository, ProfileRepository


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Iterator[Database]:
    """One connection per request, closed when the response is sent."""
    db = get_database(request.app.state.settings.database_url)
    try:
        yield db
    finally:
        db.close()


def get_id_generator(request: Request) -> TwoWordIDGenerator:
    return request.app.state.id_generator


def get_art_repo(db: Database = Depends(get_db)) -> ArtPieceRepository:
    return ArtPieceRepository(db)


def get_profile_repo(db: Database = Depends(get_db)) -> ProfileRepository:
    return ProfileRepository(db)
