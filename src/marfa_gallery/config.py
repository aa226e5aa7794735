"""
Lightweight config loader.

- Loads environment variables from .env at module import.
- Provides a simple Settings wrapper around os.environ with sane defaults.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env once (working directory .env)
load_dotenv()


def _env(key: str, default: str | None = None) -> str | None:
    return os.environ.get(key, default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in {"1", "true", "yes", "on"}


def _env_int(key: str, default: int) -> int:
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        return default


def _env_list(key: str, default: list[str] | None = None, sep: str = ",") -> list[str]:
    val = os.environ.get(key)
    if val is None:
        return default or []
    return [item.strip() for item in val.split(sep) if item.strip()]


class Settings:
    """Thin wrapper over os.environ with defaults and helpers."""

    def __init__(self) -> None:
        # App
        self.app_name: str = _env("APP_NAME", "marfa-gallery") or "marfa-gallery"
        self.environment: str = _env("ENVIRONMENT", "development") or "development"
        self.debug: bool = _env_bool("DEBUG", False)
        self.log_level: str = _env("LOG_LEVEL", "INFO") or "INFO"
        self.allowed_origins: list[str] = _env_list("ALLOWED_ORIGINS", ["*"])

        # Database
        self.database_url: str = (
            _env("DATABASE_URL", "sqlite:///./data/gallery.db") or "sqlite:///./data/gallery.db"
        )

        # Links handed back to clients
        self.ipfs_gateway_url: str = (
            _env("IPFS_GATEWAY_URL", "https://ipfs.io/ipfs/") or "https://ipfs.io/ipfs/"
        )
        self.explorer_tx_url: str = (
            _env("EXPLORER_TX_URL", "https://shapescan.xyz/tx/") or "https://shapescan.xyz/tx/"
        )

        # Rate limiting
        self.rate_limit_max_requests: int = _env_int("RATE_LIMIT_MAX_REQUESTS", 100)
        self.rate_limit_window_seconds: int = _env_int("RATE_LIMIT_WINDOW_SECONDS", 60)

        # Identifier reservation retries on unique-constraint violations
        self.id_reserve_max_attempts: int = _env_int("ID_RESERVE_MAX_ATTEMPTS", 5)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def rate_limit_enabled(self) -> bool:
        return self.rate_limit_max_requests > 0


def get_settings() -> Settings:
    return Settings()
