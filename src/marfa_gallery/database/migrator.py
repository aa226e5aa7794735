"""Simple SQL migrations runner (SQLite/Postgres).

Keeps a `schema_migrations` table with applied versions and executes
ordered SQL files from `marfa_gallery/migrations/{dialect}`.
"""

from __future__ import annotations

import logging
from importlib.resources import files

from marfa_gallery.database.ports import Database

logger = logging.getLogger(__name__)

_PACKAGES = {
    "sqlite": "marfa_gallery.migrations.sqlite",
    "postgres": "marfa_gallery.migrations.postgres",
}


def _list_migrations(package: str) -> list[str]:
    resources = files(package)
    names = [e.name for e in resources.iterdir() if e.name.endswith(".sql")]
    names.sort()
    return names


def _read_migration(package: str, name: str) -> str:
    return (files(package) / name).read_text(encoding="utf-8")


def _exec_sql_script(db: Database, sql: str) -> None:
    # naive split by ';' that are statement terminators; skip empty
    statements = [s.strip() for s in sql.split(";")]
    for stmt in statements:
        if stmt:
            db.execute(stmt)


def run_migrations(db: Database, dialect: str | None = None) -> list[str]:
    """Apply pending migrations for a dialect.

    Args:
        db: Database adapter
        dialect: "sqlite" or "postgres". Defaults to the adapter's dialect.

    Returns:
        List of applied migration filenames
    """
    dialect = dialect or db.dialect
    package = _PACKAGES.get(dialect)
    if package is None:
        raise ValueError(f"Unsupported dialect: {dialect}")

    db.execute("CREATE TABLE IF NOT EXISTS schema_migrations (version TEXT PRIMARY KEY)")
    db.commit()

    applied = {dict(row)["version"] for row in db.fetchall("SELECT version FROM schema_migrations")}

    applied_now: list[str] = []
    for name in _list_migrations(package):
        if name in applied:
            continue
        _exec_sql_script(db, _read_migration(package, name))
        db.execute("INSERT INTO schema_migrations(version) VALUES (?)", (name,))
        db.commit()
        logger.info(f"Applied migration {dialect}/{name}")
        applied_now.append(name)

    return applied_now
