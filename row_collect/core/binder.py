"""Column binder - per-column reader registry.

A binder maps column names to reader functions ``(cursor, label) -> value``.
Binders are plain caller-owned objects: there is no process-wide table.
Sharing is explicit through the ``fallback`` binder, which is consulted for
columns the binder itself does not bind.

Example:
    shared = ColumnBinder().bind("created_at", read_datetime)
    binder = ColumnBinder({"id": read_int}, fallback=shared)
    users = collect_all(cursor, binder.row_converter())
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from row_collect.core.cursor import Cursor

ColumnReader = Callable[[Cursor, str], Any]


class ColumnBinder:
    """Caller-owned mapping of column name to reader function.

    Args:
        bindings: Initial column -> reader mapping.
        fallback: Binder consulted for columns not bound here.
    """

    def __init__(
        self,
        bindings: Mapping[str, ColumnReader] | None = None,
        *,
        fallback: ColumnBinder | None = None,
    ) -> None:
        self._bindings: dict[str, ColumnReader] = dict(bindings or {})
        self._fallback = fallback

    @property
    def fallback(self) -> ColumnBinder | None:
        return self._fallback

    def bind(self, column: str, reader: ColumnReader) -> ColumnBinder:
        """Bind a reader to a column, replacing any previous binding."""
        self._bindings[column] = reader
        return self

    def unbind(self, column: str) -> None:
        """Remove this binder's own binding for column, if any."""
        self._bindings.pop(column, None)

    def reader_for(self, column: str, default: ColumnReader | None = None) -> ColumnReader | None:
        """Look up the reader for column, falling back to the fallback binder."""
        reader = self._bindings.get(column)
        if reader is not None:
            return reader
        if self._fallback is not None:
            return self._fallback.reader_for(column, default)
        return default

    def read(self, cursor: Cursor, column: str) -> Any:
        """Read column through its bound reader, or raw if unbound."""
        reader = self.reader_for(column)
        if reader is None:
            return cursor.read_column(column)
        return reader(cursor, column)

    def read_row(self, cursor: Cursor, columns: Iterable[str] | None = None) -> dict[str, Any]:
        """Read a set of columns of the current row into a dict.

        Defaults to the cursor's ``column_labels`` when it has them, and to
        every bound column otherwise.
        """
        if columns is None:
            columns = getattr(cursor, "column_labels", None)
        if columns is None:
            columns = self.columns
        return {column: self.read(cursor, column) for column in columns}

    def row_converter(
        self, columns: Iterable[str] | None = None
    ) -> Callable[[Cursor], dict[str, Any]]:
        """Return a conversion function producing ``read_row`` dicts."""
        selected = list(columns) if columns is not None else None

        def _convert(cursor: Cursor) -> dict[str, Any]:
            return self.read_row(cursor, selected)

        return _convert

    @property
    def columns(self) -> list[str]:
        """All bound column names, own bindings first, fallback after."""
        names = list(self._bindings)
        if self._fallback is not None:
            names.extend(c for c in self._fallback.columns if c not in self._bindings)
        return names

    def copy(self) -> ColumnBinder:
        """Shallow copy sharing the same fallback binder."""
        return ColumnBinder(self._bindings, fallback=self._fallback)

    def __contains__(self, column: object) -> bool:
        return isinstance(column, str) and self.reader_for(column) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)
