from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..common.decoding import to_date, to_datetime, to_hours
from ..core.enums import AttendanceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_list
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, employee_id, date, attendance_type, hours, created_at"


def row_to_attendance(r: dict) -> AttendanceRecord:
    attendance_type = AttendanceType(r["attendance_type"])
    return AttendanceRecord(
        attendance_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        work_date=to_date(r["date"]),
        attendance_type=attendance_type,
        hours=to_hours(r.get("hours")) if attendance_type == AttendanceType.HOURLY else None,
        created_at=to_datetime(r.get("created_at")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_month(self, *, year: int, month: int, employee_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        start, end = month_bounds(year, month)
        sql = f"SELECT {_COLUMNS} FROM attendance WHERE date BETWEEN %s AND %s"
        params: list = [start, end]
        if employee_id is not None:
            sql += " AND employee_id=%s"
            params.append(employee_id)
        sql += " ORDER BY date, employee_id"
        return fetch_list(self._conn_factory, sql, params, row_to_attendance, what="attendance")

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return fetch_list(
            self._conn_factory,
            f"SELECT {_COLUMNS} FROM attendance WHERE date=%s ORDER BY employee_id",
            (work_date,),
            row_to_attendance,
            what="attendance",
        )

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        attendance_type: AttendanceType,
        hours: Optional[float] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, date, attendance_type, hours)
                VALUES(%s,%s,%s,%s)
                """,
                (employee_id, work_date, attendance_type.value, hours),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        attendance_id: int,
        attendance_type: AttendanceType,
        hours: Optional[float] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET attendance_type=%s, hours=%s WHERE id=%s",
                (attendance_type.value, hours, attendance_id),
            )
            return cur.rowcount > 0

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE id=%s", (attendance_id,))
            return cur.rowcount > 0
