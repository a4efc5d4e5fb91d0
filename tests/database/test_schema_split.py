from __future__ import annotations

from pankti_manager.database.bootstrap import SCHEMA_PATH, split_statements


def test_split_ignores_comments_and_quoted_semicolons():
    sql = """
    -- header; with a semicolon
    CREATE DATABASE IF NOT EXISTS other_db;
    USE other_db;
    CREATE TABLE t (note VARCHAR(10) DEFAULT 'a;b');
    INSERT INTO t VALUES ("x;y")
    """

    statements = list(split_statements(sql))

    assert statements == [
        "CREATE TABLE t (note VARCHAR(10) DEFAULT 'a;b')",
        'INSERT INTO t VALUES ("x;y")',
    ]


def test_bundled_schema_creates_every_table():
    statements = list(split_statements(SCHEMA_PATH.read_text(encoding="utf-8")))

    created = [s.split()[5] for s in statements if s.upper().startswith("CREATE TABLE IF NOT EXISTS")]
    assert created == ["customers", "transactions", "employees", "attendance", "employee_advances"]
