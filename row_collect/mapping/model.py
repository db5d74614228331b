"""Row-to-model conversion.

Supports dataclasses, Pydantic models, and plain classes.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from row_collect.core.binder import ColumnBinder
from row_collect.core.cursor import Cursor
from row_collect.core.exceptions import ColumnMismatchError, CursorReadError

T = TypeVar("T")


def _is_pydantic_model(cls: type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    return isinstance(cls, type) and issubclass(cls, BaseModel)


class ModelRowConverter(Generic[T]):
    """Conversion function building a target_class instance per row.

    Detection order:
    1. Pydantic BaseModel -> model_validate(row)
    2. dataclass -> target_class(**row)
    3. Plain class -> target_class(**row)

    Columns are read through ``binder`` when given, raw otherwise.

    Args:
        target_class: The class to construct from row data.
        binder: Optional column binder for typed reads.
        aliases: Optional column-name to field-name mapping.
    """

    def __init__(
        self,
        target_class: type[T],
        *,
        binder: ColumnBinder | None = None,
        aliases: dict[str, str] | None = None,
    ) -> None:
        self._target_class = target_class
        self._binder = binder if binder is not None else ColumnBinder()
        self._aliases = aliases
        self._is_pydantic = _is_pydantic_model(target_class)

    def _apply_aliases(self, row: dict[str, Any]) -> dict[str, Any]:
        """Apply column aliases to the row."""
        if not self._aliases:
            return row
        return {self._aliases.get(key, key): value for key, value in row.items()}

    def _read_row(self, cursor: Cursor) -> dict[str, Any]:
        labels = getattr(cursor, "column_labels", None)
        if labels is None:
            raise CursorReadError(
                f"{type(cursor).__name__} does not expose column_labels; "
                "wrap DB-API cursors in ResultCursor"
            )
        return self._binder.read_row(cursor, labels)

    def map_row(self, row: dict[str, Any]) -> T:
        """Build a target_class instance from a column -> value dict."""
        row = self._apply_aliases(row)

        if self._is_pydantic:
            try:
                return self._target_class.model_validate(row)  # type: ignore[attr-defined, no-any-return]
            except ValidationError as e:
                raise ColumnMismatchError(
                    self._target_class.__name__,
                    [".".join(str(loc) for loc in err["loc"]) for err in e.errors()],
                ) from e

        try:
            return self._target_class(**row)
        except TypeError as e:
            raise ColumnMismatchError(self._target_class.__name__, [str(e)]) from e

    def __call__(self, cursor: Cursor) -> T:
        return self.map_row(self._read_row(cursor))
