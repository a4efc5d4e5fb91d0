from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..common.decoding import to_amount, to_datetime, to_optional_str
from ..core.constants import DEFAULT_OVERTIME_RATE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_list, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, name, phone_number, address, daily_wage, overtime_rate, created_at"


def row_to_employee(r: dict) -> Employee:
    overtime_rate = to_amount(r.get("overtime_rate"))
    return Employee(
        employee_id=int(r["id"]),
        name=str(r["name"]),
        phone=str(r.get("phone_number") or ""),
        daily_wage=to_amount(r.get("daily_wage")),
        overtime_rate=overtime_rate if overtime_rate > 0 else DEFAULT_OVERTIME_RATE,
        address=to_optional_str(r.get("address")),
        created_at=to_datetime(r.get("created_at")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        return fetch_list(
            self._conn_factory,
            f"SELECT {_COLUMNS} FROM employees ORDER BY name",
            (),
            row_to_employee,
            what="employees",
        )

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return row_to_employee(row) if row else None

    def create(
        self,
        *,
        name: str,
        phone: str,
        daily_wage: Decimal,
        overtime_rate: Decimal,
        address: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, phone_number, address, daily_wage, overtime_rate)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, phone, address, daily_wage, overtime_rate),
            )
            return int(cur.lastrowid)
