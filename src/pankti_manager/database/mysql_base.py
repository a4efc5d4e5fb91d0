from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

import mysql.connector

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def fetch_list(
    conn_factory: DatabaseConnection,
    sql: str,
    params: Sequence[Any],
    decode: Callable[[Dict[str, Any]], T],
    *,
    what: str,
) -> List[T]:
    """Run a list query and decode every row.

    A failed fetch is logged and reported as an empty list; callers treat
    that as "no data".
    """

    try:
        with db_cursor(conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
    except mysql.connector.Error:
        logger.exception("Error fetching %s", what)
        return []
    out: List[T] = []
    for r in rows:
        try:
            out.append(decode(r))
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping malformed %s row: %r", what, r)
    return out
