"""Security helpers and middleware for the gallery API.

- Security headers on every response
- Free-text input sanitizing and wallet address validation
- Fixed-window rate limiting per client IP, backed by an injected store
"""

from __future__ import annotations

import logging
import re
import threading
import time
from collections.abc import Awaitable, Callable
from typing import Protocol

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}

_SCRIPT_TAG_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_JS_PROTOCOL_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+\s*=", re.IGNORECASE)
_WALLET_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


def sanitize_input(value: str) -> str:
    """Strip script blocks, `javascript:` URLs and inline event handlers."""
    value = _SCRIPT_TAG_RE.sub("", value)
    value = _JS_PROTOCOL_RE.sub("", value)
    value = _EVENT_HANDLER_RE.sub("", value)
    return value.strip()


def is_valid_wallet_address(address: object) -> bool:
    if not address or not isinstance(address, str):
        return False
    return bool(_WALLET_RE.match(address))


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add the standard security headers to every response."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:  # type: ignore[override]
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class RateLimitStore(Protocol):
    def increment(self, key: str, window: int, window_seconds: int) -> int:
        """Count one hit for ``key`` in ``window`` and return the new total."""
        ...


class InMemoryRateLimitStore:
    """Process-local fixed-window counters.

    Owned by the application instance; windows older than the previous one
    are discarded on each increment.
    """

    def __init__(self) -> None:
        self._counts: dict[tuple[str, int], int] = {}
        self._lock = threading.Lock()

    def increment(self, key: str, window: int, window_seconds: int) -> int:
        with self._lock:
            stale = [k for k in self._counts if k[1] < window - 1]
            for k in stale:
                del self._counts[k]
            count = self._counts.get((key, window), 0) + 1
            self._counts[(key, window)] = count
            return count

    def __len__(self) -> int:
        return len(self._counts)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject clients exceeding ``max_requests`` per ``window_seconds`` with 429."""

    def __init__(
        self,
        app,
        *,
        store: RateLimitStore,
        max_requests: int,
        window_seconds: int,
        clock: Callable[[], float] = time.time,
        exempt_paths: tuple[str, ...] = ("/health",),
    ) -> None:
        super().__init__(app)
        self._store = store
        self._max_requests = max(1, int(max_requests))
        self._window_seconds = max(1, int(window_seconds))
        self._clock = clock
        self._exempt_paths = exempt_paths

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:  # type: ignore[override]
        if request.url.path in self._exempt_paths:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        window = int(self._clock() // self._window_seconds)
        count = self._store.increment(client_ip, window, self._window_seconds)
        remaining = max(self._max_requests - count, 0)

        if count > self._max_requests:
            logger.warning(f"Rate limit exceeded for {client_ip} ({count} requests)")
            return JSONResponse(
                status_code=429,
                content={"error": "Too many requests", "code": "RATE_LIMITED"},
                headers={
                    "Retry-After": str(self._window_seconds),
                    "X-RateLimit-Limit": str(self._max_requests),
                    "X-RateLimit-Remaining": "0",
                },
            )

        response = await call_next(request)
        response.headers.setdefault("X-RateLimit-Limit", str(self._max_requests))
        response.headers.setdefault("X-RateLimit-Remaining", str(remaining))
        return response
