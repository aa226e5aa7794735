"""Tests for security helpers and middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from marfa_gallery.api.security import (
    SECURITY_HEADERS,
    InMemoryRateLimitStore,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
    is_valid_wallet_address,
    sanitize_input,
)


class FakeClock:
    def __init__(self, now=1_000.0):
        self.now = now

    def __call__(self):
        return self.now


def _limited_app(store, clock, max_requests=2):
    app = FastAPI()
    app.add_middleware(
        RateLimitMiddleware, store=store, max_requests=max_requests, window_seconds=60, clock=clock
    )
    app.add_middleware(SecurityHeadersMiddleware)

    @app.get("/api/ping")
    def ping():
        return {"ok": True}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Bleached Skull  ", "Bleached Skull"),
        ("Sky<script>alert('x')</script>", "Sky"),
        ("<SCRIPT src=x></SCRIPT>Mesa", "Mesa"),
        ("javascript:alert(1)", "alert(1)"),
        ('<img onerror="x">', '<img "x">'),
    ],
)
def test_sanitize_input(raw, expected):
    assert sanitize_input(raw) == expected


@pytest.mark.parametrize(
    "address, expected",
    [
        ("0x742d35Cc6639C0532fEb42387b22e3f0a1dd9527", True),
        ("0x742d35cc6639c0532feb42387b22e3f0a1dd9527", True),
        ("742d35Cc6639C0532fEb42387b22e3f0a1dd9527", False),
        ("0x742d35Cc6639C0532fEb42387b22e3f0a1dd952", False),
        ("0x8ba1f109551bD432803012645Hac136c4c0a5070", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_wallet_address(address, expected):
    assert is_valid_wallet_address(address) is expected


def test_store_counts_per_key_and_window():
    store = InMemoryRateLimitStore()

    assert store.increment("1.2.3.4", 10, 60) == 1
    assert store.increment("1.2.3.4", 10, 60) == 2
    assert store.increment("5.6.7.8", 10, 60) == 1
    assert store.increment("1.2.3.4", 11, 60) == 1


def test_store_discards_old_windows():
    store = InMemoryRateLimitStore()
    store.increment("a", 1, 60)
    store.increment("b", 2, 60)

    store.increment("c", 5, 60)

    assert len(store) == 1


def test_rate_limit_rejects_after_max_requests():
    store = InMemoryRateLimitStore()
    clock = FakeClock()
    client = TestClient(_limited_app(store, clock))

    first = client.get("/api/ping")
    assert first.status_code == 200
    assert first.headers["X-RateLimit-Remaining"] == "1"
    assert client.get("/api/ping").status_code == 200

    blocked = client.get("/api/ping")
    assert blocked.status_code == 429
    assert blocked.json()["code"] == "RATE_LIMITED"
    assert blocked.headers["Retry-After"] == "60"
    assert blocked.headers["X-Frame-Options"] == SECURITY_HEADERS["X-Frame-Options"]

    clock.now += 60
    assert client.get("/api/ping").status_code == 200


def test_rate_limit_exempts_health():
    client = TestClient(_limited_app(InMemoryRateLimitStore(), FakeClock(), max_requests=1))

    for _ in range(3):
        assert client.get("/health").status_code == 200


def test_rate_limit_stores_are_independent_per_app():
    clock = FakeClock()
    first = TestClient(_limited_app(InMemoryRateLimitStore(), clock, max_requests=1))
    second = TestClient(_limited_app(InMemoryRateLimitStore(), clock, max_requests=1))

    assert first.get("/api/ping").status_code == 200
    assert first.get("/api/ping").status_code == 429
    assert second.get("/api/ping").status_code == 200
