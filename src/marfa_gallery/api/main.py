"""
FastAPI server for the Marfa Gallery backend.
Serves the art gallery, minting records, collector profiles and identifier maintenance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marfa_gallery import __version__
from marfa_gallery.config import Settings, get_settings
from marfa_gallery.database import get_database, run_migrations
from marfa_gallery.identifiers import TwoWordIDGenerator

from . import art_router, identifiers_router, profiles_router
from .errors import install_exception_handlers
from .security import InMemoryRateLimitStore, RateLimitMiddleware, SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = get_database(app.state.settings.database_url)
    try:
        applied = run_migrations(db)
    finally:
        db.close()
    if applied:
        logger.info(f"Applied migrations: {', '.join(applied)}")
    yield


def create_app(
    settings: Settings | None = None,
    id_generator: TwoWordIDGenerator | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Marfa Gallery API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.id_generator = id_generator or TwoWordIDGenerator()
    app.state.rate_limit_store = InMemoryRateLimitStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.rate_limit_enabled:
        app.add_middleware(
            RateLimitMiddleware,
            store=app.state.rate_limit_store,
            max_requests=settings.rate_limit_max_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )
    # Added last so it wraps everything, including 429 responses
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(art_router.router)
    app.include_router(identifiers_router.router)
    app.include_router(profiles_router.router)
    install_exception_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "marfa_gallery.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().is_development,
    )
