"""Database dependency resolver.

Selects the proper adapter based on `DATABASE_URL`.
Supported schemes:
- sqlite:///path/to.db
- postgres://... or postgresql://...
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

from marfa_gallery.config import get_settings
from marfa_gallery.database.ports import Database


def _sqlite_path_from_url(url: str) -> Path:
    # sqlite:///absolute/or/relative
    path = url.replace("sqlite:///", "", 1)
    return Path(path)


def dialect_for_url(url: str) -> str:
    scheme = urlparse(url).scheme.lower()
    if scheme == "sqlite":
        return "sqlite"
    if scheme in ("postgres", "postgresql"):
        return "postgres"
    raise ValueError(f"Unsupported DATABASE_URL scheme: {scheme}")


def get_database(url: str | None = None) -> Database:
    url = url or get_settings().database_url
    dialect = dialect_for_url(url)

    if dialect == "sqlite":
        from marfa_gallery.database.adapters.sqlite_adapter import SQLiteDatabase

        return SQLiteDatabase(_sqlite_path_from_url(url))

    from marfa_gallery.database.adapters.postgres_adapter import PostgresDatabase

    return PostgresDatabase(url)
