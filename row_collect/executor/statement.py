"""Single statement execution."""

from __future__ import annotations

import logging
from typing import Any

from row_collect.core.cursor import ResultCursor
from row_collect.core.exceptions import StatementExecutionError

logger = logging.getLogger(__name__)

Params = dict[str, Any] | tuple[Any, ...] | list[Any]


def _run(connection: Any, sql: str, params: Params | None = None) -> Any:
    """Execute sql on a new cursor of connection and return the cursor.

    Driver exceptions are raised as StatementExecutionError; the cursor is
    closed before raising.
    """
    try:
        cursor = connection.cursor()
    except Exception as e:
        raise StatementExecutionError(sql, str(e)) from e
    try:
        if params is None:
            cursor.execute(sql)
        else:
            cursor.execute(sql, params)
    except Exception as e:
        cursor.close()
        raise StatementExecutionError(sql, str(e)) from e
    logger.debug("Executed statement: %.60s", sql)
    return cursor


class SingleStatementExecutor:
    """Executes one SQL statement with one parameter set.

    Implements both StatementExecutor and QueryExecutor.

    Args:
        connection: An open DB-API connection, owned by the caller.
        sql: Statement text in the driver's parameter style.
        params: Optional parameters bound on every execution.
    """

    def __init__(self, connection: Any, sql: str, params: Params | None = None) -> None:
        self._connection = connection
        self._sql = sql
        self._params = params

    @property
    def sql(self) -> str:
        return self._sql

    def execute_statement(self) -> int:
        """Execute and return the driver's rowcount."""
        cursor = _run(self._connection, self._sql, self._params)
        try:
            return int(cursor.rowcount)
        finally:
            cursor.close()

    def execute_query(self) -> ResultCursor:
        """Execute and return a ResultCursor ready for collection."""
        return ResultCursor(_run(self._connection, self._sql, self._params))
