"""SQLite adapter implementing the Database port."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from marfa_gallery.database.ports import CursorLike, Database, UniqueViolation


def _is_unique_error(exc: sqlite3.IntegrityError) -> bool:
    return "UNIQUE constraint failed" in str(exc)


class _SQLiteCursorWrapper:
    def __init__(self, cursor: sqlite3.Cursor):
        self._cursor = cursor

    def execute(self, query: str, params: Sequence[Any] | None = None) -> Any:  # noqa: D401
        return self._cursor.execute(query, params or [])

    def executemany(self, query: str, seq_of_params: Iterable[Sequence[Any]]) -> Any:
        return self._cursor.executemany(query, seq_of_params)

    def fetchone(self) -> Any:
        return self._cursor.fetchone()

    def fetchall(self) -> list[Any]:
        return self._cursor.fetchall()


class SQLiteDatabase(Database):
    dialect = "sqlite"

    def __init__(self, path: Path):
        if str(path) != ":memory:":
            path.parent.mkdir(parents=True, exist_ok=True)
        # Request handlers may run on a worker thread other than the creator
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row

    def cursor(self) -> CursorLike:  # noqa: D401
        return _SQLiteCursorWrapper(self._conn.cursor())

    def execute(self, query: str, params: Sequence[Any] | None = None) -> int:
        cur = self._conn.cursor()
        try:
            cur.execute(query, params or [])
        except sqlite3.IntegrityError as e:
            if _is_unique_error(e):
                raise UniqueViolation(str(e)) from e
            raise
        return cur.rowcount

    def executemany(self, query: str, seq_of_params: Iterable[Sequence[Any]]) -> None:
        cur = self._conn.cursor()
        try:
            cur.executemany(query, seq_of_params)
        except sqlite3.IntegrityError as e:
            if _is_unique_error(e):
                raise UniqueViolation(str(e)) from e
            raise

    def fetchone(self, query: str, params: Sequence[Any] | None = None) -> Any:
        cur = self._conn.cursor()
        cur.execute(query, params or [])
        return cur.fetchone()

    def fetchall(self, query: str, params: Sequence[Any] | None = None) -> list[Any]:
        cur = self._conn.cursor()
        cur.execute(query, params or [])
        return list(cur.fetchall())

    def commit(self) -> None:
        self._conn.commit()

    def rollback(self) -> None:
        self._conn.rollback()

    def close(self) -> None:
        self._conn.close()
