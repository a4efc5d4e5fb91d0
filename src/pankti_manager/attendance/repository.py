from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceType
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_month(self, *, year: int, month: int, employee_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        attendance_type: AttendanceType,
        hours: Optional[float] = None,
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        attendance_id: int,
        attendance_type: AttendanceType,
        hours: Optional[float] = None,
    ) -> bool:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError
