"""Batched statement execution.

Parameter sets are buffered and sent to the driver with ``executemany`` in
chunks of ``BatchConfig.batch_size``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from row_collect.core.exceptions import StatementExecutionError
from row_collect.executor.statement import Params

logger = logging.getLogger(__name__)


class BatchConfig(BaseModel):
    """Configuration for batched execution."""

    batch_size: int = Field(default=100, gt=0)


class BatchStatementExecutor:
    """Executes one statement over many parameter sets.

    A full buffer is flushed as soon as it reaches ``batch_size``;
    ``execute_statement`` flushes the remainder. A failed flush leaves the
    buffer untouched so the caller can inspect or retry it.

    Args:
        connection: An open DB-API connection, owned by the caller.
        sql: Statement text in the driver's parameter style.
        config: Batch configuration. Defaults to ``BatchConfig()``.
    """

    def __init__(self, connection: Any, sql: str, config: BatchConfig | None = None) -> None:
        self._connection = connection
        self._sql = sql
        self.config = config if config is not None else BatchConfig()
        self._pending: list[Params] = []
        self._affected = 0

    @property
    def sql(self) -> str:
        return self._sql

    @property
    def pending(self) -> int:
        """Number of buffered parameter sets not yet sent."""
        return len(self._pending)

    def add(self, params: Params) -> None:
        """Buffer one parameter set, flushing when the batch is full."""
        self._pending.append(params)
        if len(self._pending) >= self.config.batch_size:
            self._flush()

    def add_all(self, param_sets: Iterable[Params]) -> None:
        for params in param_sets:
            self.add(params)

    def execute_statement(self) -> int:
        """Flush remaining parameter sets and return the affected row count.

        The count covers every batch flushed since the previous call.
        """
        if self._pending:
            self._flush()
        affected, self._affected = self._affected, 0
        return affected

    def _flush(self) -> None:
        batch = self._pending
        try:
            cursor = self._connection.cursor()
        except Exception as e:
            raise StatementExecutionError(self._sql, str(e)) from e
        try:
            cursor.executemany(self._sql, batch)
            rowcount = int(cursor.rowcount)
        except Exception as e:
            raise StatementExecutionError(self._sql, str(e)) from e
        finally:
            cursor.close()

        if rowcount > 0:
            self._affected += rowcount
        self._pending = []
        logger.debug("Flushed batch of %d parameter set(s): %.60s", len(batch), self._sql)
