"""Database module for Marfa Gallery.

Provides the DB port, adapter resolution and the migrations runner.
"""

from __future__ import annotations

from marfa_gallery.database.di import dialect_for_url, get_database
from marfa_gallery.database.migrator import run_migrations
from marfa_gallery.database.ports import Database, UniqueViolation

__all__ = ["Database", "UniqueViolation", "dialect_for_url", "get_database", "run_migrations"]
