"""
Example 01: Collecting Rows

This example demonstrates the RowCollect collection shapes over a DB-API cursor.
"""

from collections import deque
import sqlite3

from row_collect import (
    Maybe,
    SingleStatementExecutor,
    collect_all,
    collect_all_into,
    collect_all_via,
    collect_map,
    collect_one,
    collect_optional,
)


def name_of(cursor):
    return cursor.read_column("name")


def main():
    # Set up an in-memory database with some test data
    conn = sqlite3.connect(":memory:")
    conn.execute("""
        CREATE TABLE users (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            active INTEGER DEFAULT 1
        )
    """)
    conn.execute("INSERT INTO users (name, email) VALUES ('Alice', 'alice@example.com')")
    conn.execute("INSERT INTO users (name, email) VALUES ('Bob', 'bob@example.com')")
    conn.execute("INSERT INTO users (name, email, active) VALUES ('Charlie', 'charlie@example.com', 0)")
    conn.commit()

    def query(sql, params=None):
        return SingleStatementExecutor(conn, sql, params).execute_query()

    print("=== Collecting Rows ===\n")

    # collect_one: first row or None
    user = collect_one(query("SELECT * FROM users WHERE id = :id", {"id": 1}), name_of)
    print(f"collect_one result: {user}")

    # collect_optional: first row wrapped in Maybe
    missing = collect_optional(query("SELECT * FROM users WHERE id = :id", {"id": 42}), name_of)
    print(f"collect_optional result: {missing} -> {missing.or_else('<nobody>')}\n")

    # collect_all: every row into a new list
    names = collect_all(query("SELECT name FROM users ORDER BY id"), name_of)
    print(f"collect_all result ({len(names)} rows): {names}")

    # collect_all_into: append to an existing list
    roster = ["Admin"]
    collect_all_into(query("SELECT name FROM users WHERE active = 1"), name_of, roster)
    print(f"collect_all_into result: {roster}")

    # collect_all_via: container built by a factory
    recent = collect_all_via(query("SELECT name FROM users ORDER BY id DESC"), name_of, deque)
    print(f"collect_all_via result: {recent}\n")

    # collect_map: key/value pairs, later duplicates win
    emails = collect_map(
        query("SELECT id, email FROM users"),
        lambda c: (c.read_column("id"), c.read_column("email")),
    )
    print(f"collect_map result: {emails}")

    # Raw DB-API cursors are accepted too
    count = collect_optional(conn.execute("SELECT COUNT(*) AS cnt FROM users"), lambda c: c.read_column("cnt"))
    assert count == Maybe.of(3)
    print(f"collect_optional on a raw cursor: {count.get()} total users")

    conn.close()


if __name__ == "__main__":
    main()
