"""
Example 02: Typed Columns and Model Mapping

This example demonstrates column binders, typed readers and model conversion.
"""

from dataclasses import dataclass
from datetime import datetime
import sqlite3

from pydantic import BaseModel

from row_collect import (
    BatchConfig,
    BatchStatementExecutor,
    ColumnBinder,
    ModelRowConverter,
    SingleStatementExecutor,
    collect_all,
    read_bool,
    read_datetime,
)


@dataclass
class User:
    id: int
    name: str
    active: bool
    created_at: datetime


class UserSummary(BaseModel):
    id: int
    name: str


def main():
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, active INTEGER, created_at TEXT)"
    )

    # Batch insert, flushed every 2 parameter sets
    insert = BatchStatementExecutor(
        conn,
        "INSERT INTO users (id, name, active, created_at) VALUES (:id, :name, :active, :created_at)",
        BatchConfig(batch_size=2),
    )
    insert.add_all([
        {"id": 1, "name": "Alice", "active": 1, "created_at": "2024-01-15T10:30:00+02:00"},
        {"id": 2, "name": "Bob", "active": 0, "created_at": "2024-02-01T09:00:00"},
        {"id": 3, "name": "Charlie", "active": 1, "created_at": "2024-03-10T18:45:00"},
    ])
    print(f"Inserted {insert.execute_statement()} rows\n")
    conn.commit()

    # Shared bindings are an ordinary object passed where needed
    shared = ColumnBinder({"created_at": read_datetime})
    binder = ColumnBinder({"active": read_bool}, fallback=shared)

    print("=== Dataclass mapping ===")
    cursor = SingleStatementExecutor(conn, "SELECT * FROM users ORDER BY id").execute_query()
    for user in collect_all(cursor, ModelRowConverter(User, binder=binder)):
        print(f"  - {user.name} active={user.active} created_at={user.created_at.isoformat()}")

    print("\n=== Pydantic mapping with aliases ===")
    cursor = SingleStatementExecutor(conn, "SELECT id, name AS user_name FROM users").execute_query()
    converter = ModelRowConverter(UserSummary, aliases={"user_name": "name"})
    for summary in collect_all(cursor, converter):
        print(f"  - {summary.model_dump()}")

    conn.close()


if __name__ == "__main__":
    main()
