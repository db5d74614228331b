"""Statement executors over caller-owned DB-API connections."""

from __future__ import annotations

from row_collect.executor.batch import BatchConfig, BatchStatementExecutor
from row_collect.executor.protocol import QueryExecutor, StatementExecutor
from row_collect.executor.statement import SingleStatementExecutor

__all__ = [
    "StatementExecutor",
    "QueryExecutor",
    "SingleStatementExecutor",
    "BatchStatementExecutor",
    "BatchConfig",
]
