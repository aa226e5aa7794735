"""API error type and exception handlers.

Every error body carries a human-readable ``error`` and a machine ``code``.
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from marfa_gallery.identifiers import ExhaustedCapacityError, IdentifierReservationError

logger = logging.getLogger(__name__)


class GalleryAPIError(Exception):
    """Raised by route handlers to produce a structured error response."""

    def __init__(self, status_code: int, error: str, code: str, **extra: Any):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.code = code
        self.extra = extra

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content={"error": self.error, "code": self.code, **self.extra},
        )


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(GalleryAPIError)
    async def gallery_error_handler(request: Request, exc: GalleryAPIError):
        return exc.to_response()

    @app.exception_handler(ExhaustedCapacityError)
    async def exhausted_capacity_handler(request: Request, exc: ExhaustedCapacityError):
        logger.error(f"Identifier space exhausted on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=503,
            content={
                "error": str(exc),
                "code": "IDENTIFIERS_EXHAUSTED",
                "requested": exc.requested,
                "capacity": exc.capacity,
            },
        )

    @app.exception_handler(IdentifierReservationError)
    async def reservation_error_handler(request: Request, exc: IdentifierReservationError):
        logger.error(f"Identifier reservation failed on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=503,
            content={"error": str(exc), "code": "IDENTIFIER_RESERVATION_FAILED"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Global exception on {request.url.path}: {exc}")
        logger.debug(traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "code": "SERVER_ERROR", "type": type(exc).__name__},
        )
