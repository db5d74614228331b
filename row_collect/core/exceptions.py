"""RowCollect exception hierarchy.

All exceptions are RowCollect-specific. Raw driver exceptions are never
exposed to callers; they are chained as ``__cause__`` instead.
"""

from __future__ import annotations


class RowCollectError(Exception):
    """Base exception for all RowCollect errors."""


# --- Cursor ---


class CursorError(RowCollectError):
    """Base for result cursor errors."""


class CursorReadError(CursorError):
    """Raised when a cursor fails to advance or a column cannot be read."""

    def __init__(self, detail: str, column: str | None = None) -> None:
        self.detail = detail
        self.column = column
        if column is None:
            super().__init__(f"Cursor read failed: {detail}")
        else:
            super().__init__(f"Cursor read failed for column '{column}': {detail}")


class NoValuePresentError(RowCollectError):
    """Raised when the value of an empty Maybe is requested."""

    def __init__(self) -> None:
        super().__init__("No value present")


# --- Mapping ---


class MappingError(RowCollectError):
    """Base for mapping errors."""


class ColumnMismatchError(MappingError):
    """Raised when required fields cannot be mapped from row columns."""

    def __init__(self, target_class: str, missing_fields: list[str]) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        super().__init__(f"Cannot map to {target_class}: missing fields {missing_fields}")


# --- Execution ---


class ExecutionError(RowCollectError):
    """Base for statement execution errors."""


class StatementExecutionError(ExecutionError):
    """Raised when the driver rejects a statement."""

    def __init__(self, sql: str, detail: str) -> None:
        self.sql = sql
        self.detail = detail
        super().__init__(f"Statement execution failed for '{sql}': {detail}")
