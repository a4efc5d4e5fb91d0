from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Collection, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceCategory, AttendanceType
from ..employees.model import Employee

_CATEGORY_BY_TYPE = {
    AttendanceType.ABSENT: AttendanceCategory.ABSENT,
    AttendanceType.OT_DAY: AttendanceCategory.OT,
    AttendanceType.HALF_DAY: AttendanceCategory.PARTIAL,
    AttendanceType.HOURLY: AttendanceCategory.PARTIAL,
    AttendanceType.FULL_DAY: AttendanceCategory.PRESENT,
}


@dataclass(frozen=True)
class SaveCheck:
    """Outcome of :func:`validate_attendance_save`.

    ``hours`` is the value that should be stored: cleared for every type but
    hourly.
    """

    ok: bool
    hours: Optional[float] = None
    message: Optional[str] = None


def attendance_status(
    attendance_type: Union[AttendanceType, str, None],
    hours: Optional[float] = None,
) -> AttendanceCategory:
    if attendance_type is None:
        return AttendanceCategory.NONE
    return _CATEGORY_BY_TYPE[AttendanceType(attendance_type)]


def calendar_status(
    records_by_date: Mapping[date, Sequence[AttendanceRecord]],
    day: date,
    selected_employee_ids: Collection[int],
) -> AttendanceCategory:
    """Calendar cell highlight for ``day``.

    Only defined for a single selected employee; any other selection size
    yields ``none`` rather than merging several employees into one cell.
    """

    if len(selected_employee_ids) != 1:
        return AttendanceCategory.NONE

    (employee_id,) = tuple(selected_employee_ids)
    for r in records_by_date.get(day, ()):
        if r.employee_id == employee_id:
            return attendance_status(r.attendance_type, r.hours)
    return AttendanceCategory.NONE


def monthly_presence_ratio(
    employee: Employee,
    records_for_month: Iterable[AttendanceRecord],
    days_in_month: int,
) -> Tuple[int, int]:
    """``(present_days, days_in_month)`` for display as "X/Y".

    Only absent records are subtracted, so a day without any record counts
    as present.
    """

    absent = sum(
        1
        for r in records_for_month
        if r.employee_id == employee.employee_id and r.attendance_type == AttendanceType.ABSENT
    )
    return days_in_month - absent, days_in_month


def absence_counts(records: Iterable[AttendanceRecord]) -> Dict[int, int]:
    counts = Counter(r.employee_id for r in records if r.attendance_type == AttendanceType.ABSENT)
    return dict(counts)


def validate_attendance_save(
    attendance_type: Union[AttendanceType, str],
    hours: Optional[float] = None,
) -> SaveCheck:
    try:
        attendance_type = AttendanceType(attendance_type)
    except ValueError:
        return SaveCheck(ok=False, message="Please select a valid attendance type")
    if attendance_type != AttendanceType.HOURLY:
        return SaveCheck(ok=True, hours=None)

    if hours is None:
        return SaveCheck(ok=False, message="Please enter valid hours")
    try:
        value = float(hours)
    except (TypeError, ValueError):
        return SaveCheck(ok=False, message="Please enter valid hours")
    if not math.isfinite(value) or value <= 0:
        return SaveCheck(ok=False, message="Please enter valid hours")
    return SaveCheck(ok=True, hours=value)
