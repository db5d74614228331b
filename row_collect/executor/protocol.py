"""Statement executor protocols.

Executors run a statement on a caller-owned DB-API connection. They never
open, commit, roll back or close connections.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from row_collect.core.cursor import Cursor


@runtime_checkable
class StatementExecutor(Protocol):
    """Executes a write statement."""

    def execute_statement(self) -> int:
        """Execute and return the affected row count (-1 if unknown)."""
        ...


@runtime_checkable
class QueryExecutor(Protocol):
    """Executes a query producing result rows."""

    def execute_query(self) -> Cursor:
        """Execute and return a cursor over the result rows."""
        ...
