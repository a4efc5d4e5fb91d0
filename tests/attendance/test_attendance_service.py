from __future__ import annotations

from datetime import date

import pytest

from pankti_manager.attendance.model import AttendanceEntry
from pankti_manager.attendance.service import AttendanceService
from pankti_manager.core.enums import AttendanceCategory, AttendanceType
from pankti_manager.core.exceptions import ValidationError

from fakes import InMemoryAttendance, InMemoryEmployees, employee

DAY = date(2026, 2, 10)


def _service():
    attendance = InMemoryAttendance()
    employees = InMemoryEmployees([employee(1, "Anil"), employee(2, "Bhavna"), employee(3, "Chetan")])
    return AttendanceService(attendance, employees), attendance


def test_mark_day_creates_records_and_skips_blank_entries():
    svc, repo = _service()

    saved = svc.mark_day(
        DAY,
        [
            AttendanceEntry(1, AttendanceType.FULL_DAY),
            AttendanceEntry(2, AttendanceType.HOURLY, hours=4),
            AttendanceEntry(3, None),
        ],
    )

    assert saved == 2
    records = {r.employee_id: r for r in repo.list_for_date(DAY)}
    assert set(records) == {1, 2}
    assert records[2].hours == 4.0


def test_mark_day_updates_existing_record_and_clears_hours():
    svc, repo = _service()
    svc.mark_day(DAY, [AttendanceEntry(1, AttendanceType.HOURLY, hours=3)])

    svc.mark_day(DAY, [AttendanceEntry(1, AttendanceType.HALF_DAY, hours=3)])

    (record,) = repo.list_for_date(DAY)
    assert record.attendance_type == AttendanceType.HALF_DAY
    assert record.hours is None
    assert repo.updated == [record.attendance_id]


def test_mark_day_rejects_hourly_without_hours_before_writing():
    svc, repo = _service()

    with pytest.raises(ValidationError, match="Bhavna"):
        svc.mark_day(
            DAY,
            [AttendanceEntry(1, AttendanceType.FULL_DAY), AttendanceEntry(2, AttendanceType.HOURLY, hours=0)],
        )
    assert repo.list_for_date(DAY) == []


def test_mark_day_keeps_one_record_per_employee_when_entries_repeat():
    svc, repo = _service()

    saved = svc.mark_day(
        DAY,
        [
            AttendanceEntry(1, AttendanceType.ABSENT),
            AttendanceEntry(2, AttendanceType.FULL_DAY),
            AttendanceEntry(1, AttendanceType.HALF_DAY),
        ],
    )

    assert saved == 2
    records = [r for r in repo.list_for_date(DAY) if r.employee_id == 1]
    assert len(records) == 1
    assert records[0].attendance_type == AttendanceType.HALF_DAY


def test_repeated_absent_entries_count_once_in_presence():
    svc, _ = _service()
    svc.mark_day(DAY, [AttendanceEntry(1, AttendanceType.ABSENT), AttendanceEntry(1, AttendanceType.ABSENT)])

    view = svc.month_view(year=2026, month=2)

    anil = next(s for s in view.summaries if s.employee.name == "Anil")
    assert (anil.present_days, anil.absences) == (27, 1)


def test_mark_day_requires_at_least_one_entry():
    svc, _ = _service()

    with pytest.raises(ValidationError, match="at least one"):
        svc.mark_day(DAY, [AttendanceEntry(1, None)])


def test_month_view_single_selection_drives_calendar():
    svc, _ = _service()
    svc.mark_day(date(2026, 2, 3), [AttendanceEntry(1, AttendanceType.ABSENT), AttendanceEntry(2, AttendanceType.OT_DAY)])
    svc.mark_day(date(2026, 2, 4), [AttendanceEntry(1, AttendanceType.HALF_DAY)])

    view = svc.month_view(year=2026, month=2, selected_employee_ids=[1, 99])

    assert view.selected_employee_ids == [1]
    assert view.days_in_month == 28
    assert len(view.calendar) == 28
    assert view.calendar[date(2026, 2, 3)] == AttendanceCategory.ABSENT
    assert view.calendar[date(2026, 2, 4)] == AttendanceCategory.PARTIAL
    assert view.calendar[date(2026, 2, 5)] == AttendanceCategory.NONE


def test_month_view_multiple_selection_has_no_calendar_colours():
    svc, _ = _service()
    svc.mark_day(date(2026, 2, 3), [AttendanceEntry(1, AttendanceType.ABSENT)])

    view = svc.month_view(year=2026, month=2, selected_employee_ids=[1, 2])

    assert set(view.calendar.values()) == {AttendanceCategory.NONE}


def test_month_view_presence_counts_missing_days_as_present():
    svc, _ = _service()
    svc.mark_day(date(2026, 2, 3), [AttendanceEntry(1, AttendanceType.ABSENT)])

    view = svc.month_view(year=2026, month=2)

    by_name = {s.employee.name: s for s in view.summaries}
    assert (by_name["Anil"].present_days, by_name["Anil"].days_in_month) == (27, 28)
    assert by_name["Anil"].absences == 1
    assert (by_name["Bhavna"].present_days, by_name["Bhavna"].days_in_month) == (28, 28)


def test_month_view_day_details_for_selected_employees():
    svc, _ = _service()
    svc.mark_day(DAY, [AttendanceEntry(2, AttendanceType.FULL_DAY)])

    view = svc.month_view(year=2026, month=2, selected_employee_ids=[2, 3], selected_day=DAY)

    details = {d.employee.name: d.record for d in view.day_details}
    assert set(details) == {"Bhavna", "Chetan"}
    assert details["Bhavna"].attendance_type == AttendanceType.FULL_DAY
    assert details["Chetan"] is None


def test_month_view_links_neighbouring_months_across_year_end():
    svc, _ = _service()

    january = svc.month_view(year=2026, month=1)
    december = svc.month_view(year=2026, month=12)

    assert january.previous == (2025, 12)
    assert january.next == (2026, 2)
    assert december.next == (2027, 1)


def test_month_view_rejects_bad_month():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.month_view(year=2026, month=13)


def test_month_view_rejects_out_of_range_year():
    svc, _ = _service()

    with pytest.raises(ValidationError, match="Year"):
        svc.month_view(year=0, month=1)
    with pytest.raises(ValidationError, match="Year"):
        svc.month_view(year=10000, month=1)


def test_delete_record():
    svc, repo = _service()
    svc.mark_day(DAY, [AttendanceEntry(1, AttendanceType.FULL_DAY)])
    (record,) = repo.list_for_date(DAY)

    svc.delete_record(record.attendance_id)

    assert repo.list_for_date(DAY) == []
    with pytest.raises(ValidationError):
        svc.delete_record(record.attendance_id)
