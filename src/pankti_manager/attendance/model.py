from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: attendance of one employee on one calendar day.

    ``hours`` is only set for ``AttendanceType.HOURLY``.
    """

    attendance_id: int
    employee_id: int
    work_date: date
    attendance_type: AttendanceType
    hours: Optional[float] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceEntry:
    """One employee's line in a "mark the whole day" submission."""

    employee_id: int
    attendance_type: Optional[AttendanceType]
    hours: Optional[float] = None
