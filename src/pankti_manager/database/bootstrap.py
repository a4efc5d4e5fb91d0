"""Create the database and its tables from ``schema.sql``.

Every statement in the schema is idempotent, so this is safe to run on each
start (``AUTO_INIT_DB``) as well as from ``scripts/init_db.py``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

# Line comments, quoted strings and statement terminators, in that order.
_TOKEN = re.compile(r"--[^\n]*|'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"|;", re.S)
_DB_SWITCH = re.compile(r"^\s*(CREATE\s+DATABASE|USE)\b", re.I)


def split_statements(sql: str) -> Iterator[str]:
    """Yield the statements of a SQL script without comments.

    Semicolons inside quoted literals do not end a statement. ``CREATE
    DATABASE`` and ``USE`` are dropped so the configured name always wins.
    """

    parts: list[str] = []
    pos = 0
    for m in _TOKEN.finditer(sql):
        parts.append(sql[pos : m.start()])
        token = m.group()
        pos = m.end()
        if token.startswith("--"):
            continue
        if token != ";":
            parts.append(token)
            continue
        stmt = "".join(parts).strip()
        parts = []
        if stmt and not _DB_SWITCH.match(stmt):
            yield stmt

    parts.append(sql[pos:])
    stmt = "".join(parts).strip()
    if stmt and not _DB_SWITCH.match(stmt):
        yield stmt


def ensure_database_exists(db: DatabaseConnection) -> None:
    conn = db.connect(select_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{db.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    db = DatabaseConnection.from_dict(db_config)
    ensure_database_exists(db)

    statements = list(split_statements(Path(schema_path).read_text(encoding="utf-8")))
    conn = db.connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %s schema statement(s) to %s", len(statements), db.config.database)


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection.from_dict(db_config).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())
    finally:
        conn.close()
