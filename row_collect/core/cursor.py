"""Result cursor protocol and DB-API adapter.

The collector consumes anything implementing ``Cursor``. ``ResultCursor``
exposes a DB-API 2.0 cursor through that protocol and translates driver
failures into ``CursorReadError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from row_collect.core.exceptions import CursorReadError

_NO_ROW = object()


@runtime_checkable
class Cursor(Protocol):
    """Forward-only result cursor protocol."""

    def advance(self) -> bool:
        """Move to the next row. Returns False once the rows are exhausted."""
        ...

    def read_column(self, label: str) -> Any:
        """Read a column value of the current row by label."""
        ...


class ResultCursor:
    """Adapter from a DB-API 2.0 cursor to the Cursor protocol.

    Handles both tuple-like rows (resolved through ``cursor.description``)
    and mapping-like rows (e.g. psycopg ``dict_row``). ``sqlite3.Row`` is
    indexed positionally like a tuple.

    Args:
        dbapi_cursor: An executed DB-API cursor.
    """

    def __init__(self, dbapi_cursor: Any) -> None:
        self._cursor = dbapi_cursor
        self._row: Any = _NO_ROW
        self._labels: list[str] = [desc[0] for desc in (dbapi_cursor.description or ())]
        self._index: dict[str, int] = {}
        for position, label in enumerate(self._labels):
            # first occurrence wins for duplicate labels
            self._index.setdefault(label, position)

    @classmethod
    def wrap(cls, cursor: Any) -> Cursor:
        """Return cursor unchanged if it is already a Cursor, else wrap it."""
        if isinstance(cursor, Cursor):
            return cursor
        return cls(cursor)

    @property
    def column_labels(self) -> list[str]:
        """Result column labels in select-list order."""
        return list(self._labels)

    @property
    def raw(self) -> Any:
        """The wrapped DB-API cursor."""
        return self._cursor

    def advance(self) -> bool:
        try:
            row = self._cursor.fetchone()
        except Exception as e:
            raise CursorReadError(str(e)) from e
        if row is None:
            self._row = _NO_ROW
            return False
        self._row = row
        return True

    def read_column(self, label: str) -> Any:
        if self._row is _NO_ROW:
            raise CursorReadError("cursor is not positioned on a row", column=label)

        row = self._row
        try:
            if isinstance(row, Mapping):
                return row[label]
            return row[self._index[label]]
        except (KeyError, IndexError) as e:
            raise CursorReadError("no such column in result", column=label) from e

    def row_as_dict(self) -> dict[str, Any]:
        """Return the current row as a label -> value dict."""
        if self._row is _NO_ROW:
            raise CursorReadError("cursor is not positioned on a row")
        if isinstance(self._row, Mapping):
            return dict(self._row)
        return {label: self._row[position] for label, position in self._index.items()}
