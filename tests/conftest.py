"""Shared test fixtures."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from typing import Any

import pytest

from row_collect.core.exceptions import CursorReadError


class FakeCursor:
    """In-memory Cursor over a list of row dicts.

    Args:
        rows: Row dicts in cursor order.
        fail_on_advance: 1-based advance call that raises instead.
        error: Exception raised on the failing advance.
    """

    def __init__(
        self,
        rows: list[dict[str, Any]],
        *,
        fail_on_advance: int | None = None,
        error: Exception | None = None,
    ) -> None:
        self._rows = rows
        self._position = -1
        self._fail_on_advance = fail_on_advance
        self._error = error if error is not None else CursorReadError("connection lost")
        self.advance_calls = 0

    @property
    def column_labels(self) -> list[str]:
        return list(self._rows[0]) if self._rows else []

    def advance(self) -> bool:
        self.advance_calls += 1
        if self.advance_calls == self._fail_on_advance:
            raise self._error
        self._position += 1
        return self._position < len(self._rows)

    def read_column(self, label: str) -> Any:
        if not 0 <= self._position < len(self._rows):
            raise CursorReadError("cursor is not positioned on a row", column=label)
        try:
            return self._rows[self._position][label]
        except KeyError as e:
            raise CursorReadError("no such column in result", column=label) from e


@pytest.fixture
def make_cursor():
    """Factory for FakeCursor instances.

    Usage:
        cursor = make_cursor([{"id": 1}], fail_on_advance=2)
    """

    def _make(rows: list[dict[str, Any]], **kwargs: Any) -> FakeCursor:
        return FakeCursor(rows, **kwargs)

    return _make


@pytest.fixture
def users_db() -> Iterator[sqlite3.Connection]:
    """SQLite in-memory database with a populated users table."""
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL, "
        "email TEXT NOT NULL, score REAL, active INTEGER, created_at TEXT)"
    )
    conn.executemany(
        "INSERT INTO users (id, name, email, score, active, created_at) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        [
            (1, "Alice", "alice@example.com", 9.5, 1, "2024-01-15T10:30:00+02:00"),
            (2, "Bob", "bob@example.com", None, 0, "2024-02-01T00:00:00"),
            (3, "Charlie", "charlie@example.com", 7.25, 1, None),
        ],
    )
    conn.commit()
    yield conn
    conn.close()
