from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.decoding import to_amount, to_date, to_datetime, to_optional_str
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_list
from .model import EmployeeAdvance
from .repository import AdvanceRepository

_COLUMNS = "id, employee_id, date, amount, transaction_type, notes, created_at"


def row_to_advance(r: dict) -> EmployeeAdvance:
    return EmployeeAdvance(
        advance_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        advance_date=to_date(r["date"]),
        amount=to_amount(r.get("amount")),
        transaction_type=str(r.get("transaction_type") or "Other"),
        notes=to_optional_str(r.get("notes")),
        created_at=to_datetime(r.get("created_at")),
    )


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, employee_id: Optional[int] = None) -> Sequence[EmployeeAdvance]:
        sql = f"SELECT {_COLUMNS} FROM employee_advances"
        params: list = []
        if employee_id is not None:
            sql += " WHERE employee_id=%s"
            params.append(employee_id)
        sql += " ORDER BY date DESC, id DESC"
        return fetch_list(self._conn_factory, sql, params, row_to_advance, what="employee advances")

    def create(
        self,
        *,
        employee_id: int,
        advance_date: date,
        amount: Decimal,
        transaction_type: str,
        notes: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_advances(employee_id, date, amount, transaction_type, notes)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee_id, advance_date, amount, transaction_type, notes),
            )
            return int(cur.lastrowid)
