from __future__ import annotations

from datetime import date

import pytest

from pankti_manager.aggregation import (
    absence_counts,
    attendance_status,
    calendar_status,
    index_attendance_by_date,
    monthly_presence_ratio,
    validate_attendance_save,
)
from pankti_manager.attendance.model import AttendanceRecord
from pankti_manager.core.enums import AttendanceCategory, AttendanceType

from fakes import employee


def _rec(rid, employee_id, day, kind, hours=None):
    return AttendanceRecord(
        attendance_id=rid,
        employee_id=employee_id,
        work_date=day,
        attendance_type=AttendanceType(kind),
        hours=hours,
    )


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("absent", AttendanceCategory.ABSENT),
        ("ot_day", AttendanceCategory.OT),
        ("half_day", AttendanceCategory.PARTIAL),
        ("hourly", AttendanceCategory.PARTIAL),
        ("full_day", AttendanceCategory.PRESENT),
        (None, AttendanceCategory.NONE),
    ],
)
def test_attendance_status_mapping(kind, expected):
    assert attendance_status(kind, 4 if kind == "hourly" else None) == expected


def test_calendar_status_only_for_single_selection():
    day = date(2026, 3, 5)
    by_date = index_attendance_by_date([_rec(1, 1, day, "ot_day"), _rec(2, 2, day, "absent")])

    assert calendar_status(by_date, day, [1]) == AttendanceCategory.OT
    assert calendar_status(by_date, day, [2]) == AttendanceCategory.ABSENT
    assert calendar_status(by_date, day, [1, 2]) == AttendanceCategory.NONE
    assert calendar_status(by_date, day, []) == AttendanceCategory.NONE
    assert calendar_status(by_date, date(2026, 3, 6), [1]) == AttendanceCategory.NONE


def test_presence_ratio_with_no_records_counts_every_day_present():
    assert monthly_presence_ratio(employee(1, "Sunil"), [], 30) == (30, 30)


def test_presence_ratio_subtracts_only_absent_records():
    records = [
        _rec(1, 1, date(2026, 4, 1), "absent"),
        _rec(2, 1, date(2026, 4, 2), "absent"),
        _rec(3, 1, date(2026, 4, 3), "half_day"),
        _rec(4, 1, date(2026, 4, 4), "hourly", 3),
        _rec(5, 2, date(2026, 4, 1), "absent"),  # other employee
    ]

    assert monthly_presence_ratio(employee(1, "Sunil"), records, 30) == (28, 30)


def test_absence_counts_per_employee():
    records = [
        _rec(1, 1, date(2026, 4, 1), "absent"),
        _rec(2, 1, date(2026, 4, 2), "full_day"),
        _rec(3, 2, date(2026, 4, 1), "absent"),
        _rec(4, 2, date(2026, 4, 2), "absent"),
    ]

    assert absence_counts(records) == {1: 1, 2: 2}


@pytest.mark.parametrize(
    "kind, hours, ok",
    [
        ("hourly", 0, False),
        ("hourly", None, False),
        ("hourly", -2, False),
        ("hourly", float("nan"), False),
        ("hourly", 4, True),
        ("absent", None, True),
        ("full_day", None, True),
    ],
)
def test_validate_attendance_save(kind, hours, ok):
    assert validate_attendance_save(kind, hours).ok is ok


def test_validate_clears_hours_for_non_hourly_types():
    assert validate_attendance_save("half_day", 6).hours is None
    assert validate_attendance_save("hourly", "4.5").hours == 4.5


def test_validate_never_raises_on_bad_hours():
    check = validate_attendance_save(AttendanceType.HOURLY, "abc")

    assert not check.ok
    assert check.message


def test_validate_reports_unknown_type_instead_of_raising():
    check = validate_attendance_save("overtime", None)

    assert not check.ok
    assert "attendance type" in check.message
