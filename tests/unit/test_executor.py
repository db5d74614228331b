"""Unit tests for statement executors."""

from __future__ import annotations

import sqlite3
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from row_collect.core.collector import collect_all
from row_collect.core.cursor import ResultCursor
from row_collect.core.exceptions import StatementExecutionError
from row_collect.executor.batch import BatchConfig, BatchStatementExecutor
from row_collect.executor.statement import SingleStatementExecutor

INSERT_USER = "INSERT INTO users (id, name, email) VALUES (:id, :name, :email)"


def _user(user_id: int) -> dict:
    return {"id": user_id, "name": f"user{user_id}", "email": f"u{user_id}@ex.com"}


def _count(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]


class TestSingleStatementExecutor:
    def test_execute_statement_returns_rowcount(self, users_db: sqlite3.Connection) -> None:
        executor = SingleStatementExecutor(
            users_db, "UPDATE users SET active = 1 WHERE active = :active", {"active": 1}
        )
        assert executor.execute_statement() == 2

    def test_execute_query_returns_result_cursor(self, users_db: sqlite3.Connection) -> None:
        executor = SingleStatementExecutor(users_db, "SELECT name FROM users ORDER BY id")
        cursor = executor.execute_query()
        assert isinstance(cursor, ResultCursor)
        names = collect_all(cursor, lambda c: c.read_column("name"))
        assert names == ["Alice", "Bob", "Charlie"]

    def test_positional_params(self, users_db: sqlite3.Connection) -> None:
        executor = SingleStatementExecutor(users_db, "SELECT name FROM users WHERE id = ?", (2,))
        assert collect_all(executor.execute_query(), lambda c: c.read_column("name")) == ["Bob"]

    def test_driver_error_wrapped(self, users_db: sqlite3.Connection) -> None:
        executor = SingleStatementExecutor(users_db, "SELECT * FROM missing_table")
        with pytest.raises(StatementExecutionError, match="missing_table") as exc_info:
            executor.execute_query()
        assert isinstance(exc_info.value.__cause__, sqlite3.OperationalError)

    def test_does_not_commit(self) -> None:
        connection = MagicMock()
        connection.cursor.return_value.rowcount = 1
        SingleStatementExecutor(connection, INSERT_USER, _user(9)).execute_statement()
        connection.commit.assert_not_called()

    def test_execute_statement_closes_cursor(self) -> None:
        connection = MagicMock()
        connection.cursor.return_value.rowcount = 1
        SingleStatementExecutor(connection, INSERT_USER, _user(9)).execute_statement()
        connection.cursor.return_value.close.assert_called_once()

    def test_failed_execute_closes_cursor(self) -> None:
        connection = MagicMock()
        connection.cursor.return_value.execute.side_effect = sqlite3.OperationalError("boom")
        with pytest.raises(StatementExecutionError):
            SingleStatementExecutor(connection, INSERT_USER, _user(9)).execute_statement()
        connection.cursor.return_value.close.assert_called_once()

    def test_execute_query_leaves_cursor_open(self) -> None:
        connection = MagicMock()
        connection.cursor.return_value.description = [("id",)]
        SingleStatementExecutor(connection, "SELECT id FROM users").execute_query()
        connection.cursor.return_value.close.assert_not_called()


class TestBatchConfig:
    def test_default_batch_size(self) -> None:
        assert BatchConfig().batch_size == 100

    def test_rejects_non_positive_batch_size(self) -> None:
        with pytest.raises(ValidationError):
            BatchConfig(batch_size=0)


class TestBatchStatementExecutor:
    def test_flushes_every_batch_size(self) -> None:
        connection = MagicMock()
        connection.cursor.return_value.rowcount = 2
        executor = BatchStatementExecutor(connection, INSERT_USER, BatchConfig(batch_size=2))

        executor.add_all(_user(i) for i in range(10, 15))

        executemany = connection.cursor.return_value.executemany
        assert executemany.call_count == 2
        assert executor.pending == 1

        connection.cursor.return_value.rowcount = 1
        assert executor.execute_statement() == 5
        assert executemany.call_count == 3
        assert executor.pending == 0

    def test_inserts_all_rows(self, users_db: sqlite3.Connection) -> None:
        executor = BatchStatementExecutor(users_db, INSERT_USER, BatchConfig(batch_size=2))
        executor.add_all(_user(i) for i in range(10, 15))
        assert executor.execute_statement() == 5
        assert _count(users_db) == 8

    def test_count_resets_between_calls(self, users_db: sqlite3.Connection) -> None:
        executor = BatchStatementExecutor(users_db, INSERT_USER)
        executor.add(_user(10))
        assert executor.execute_statement() == 1
        assert executor.execute_statement() == 0

    def test_unknown_rowcount_not_summed(self) -> None:
        connection = MagicMock()
        connection.cursor.return_value.rowcount = -1
        executor = BatchStatementExecutor(connection, INSERT_USER)
        executor.add(_user(10))
        assert executor.execute_statement() == 0

    def test_flush_closes_cursor(self) -> None:
        connection = MagicMock()
        connection.cursor.return_value.rowcount = 1
        executor = BatchStatementExecutor(connection, INSERT_USER)
        executor.add(_user(10))
        executor.execute_statement()
        connection.cursor.return_value.close.assert_called_once()

    def test_failed_flush_closes_cursor(self) -> None:
        connection = MagicMock()
        connection.cursor.return_value.executemany.side_effect = sqlite3.IntegrityError("dup")
        executor = BatchStatementExecutor(connection, INSERT_USER)
        executor.add(_user(10))
        with pytest.raises(StatementExecutionError):
            executor.execute_statement()
        connection.cursor.return_value.close.assert_called_once()
        assert executor.pending == 1

    def test_failed_flush_keeps_pending(self, users_db: sqlite3.Connection) -> None:
        executor = BatchStatementExecutor(users_db, INSERT_USER)
        executor.add(_user(1))  # id 1 already exists
        with pytest.raises(StatementExecutionError) as exc_info:
            executor.execute_statement()
        assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)
        assert executor.pending == 1
