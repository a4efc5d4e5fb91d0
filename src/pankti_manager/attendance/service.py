from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Collection, Optional, Sequence

from ..aggregation import (
    absence_counts,
    calendar_status,
    index_by_id,
    index_attendance_by_date,
    index_attendance_by_employee,
    monthly_presence_ratio,
    validate_attendance_save,
)
from ..common.datetime_utils import days_in_month, next_month, previous_month
from ..core.enums import AttendanceCategory
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeMonthSummary:
    employee: Employee
    present_days: int
    days_in_month: int
    absences: int


@dataclass(frozen=True)
class DayDetail:
    employee: Employee
    record: Optional[AttendanceRecord]


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    days_in_month: int
    selected_employee_ids: list[int]
    calendar: dict[date, AttendanceCategory]
    summaries: list[EmployeeMonthSummary]
    selected_day: Optional[date]
    day_details: list[DayDetail]
    previous: tuple[int, int]
    next: tuple[int, int]


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def mark_day(self, work_date: date, entries: Sequence[AttendanceEntry]) -> int:
        """Save attendance for several employees on one date.

        Entries are keyed by employee, so a later entry for the same employee
        replaces an earlier one. Entries without a type are skipped. Every
        entry is validated before anything is written; an existing record for
        the employee/date is updated, otherwise a new one is created. Returns
        the number saved.
        """

        employees = index_by_id(self._employees.list_all(), key=lambda e: e.employee_id)
        latest = {entry.employee_id: entry for entry in entries}
        pending: list[tuple[AttendanceEntry, Optional[float]]] = []
        for entry in latest.values():
            if entry.attendance_type is None:
                continue
            employee = employees.get(entry.employee_id)
            if not employee:
                raise ValidationError("Employee not found")
            check = validate_attendance_save(entry.attendance_type, entry.hours)
            if not check.ok:
                raise ValidationError(f"{check.message} for {employee.name}")
            pending.append((entry, check.hours))

        if not pending:
            raise ValidationError("Select attendance for at least one employee.")

        existing = {r.employee_id: r for r in self._attendance.list_for_date(work_date)}
        for entry, hours in pending:
            record = existing.get(entry.employee_id)
            if record:
                self._attendance.update(
                    attendance_id=record.attendance_id,
                    attendance_type=entry.attendance_type,
                    hours=hours,
                )
            else:
                self._attendance.create(
                    employee_id=entry.employee_id,
                    work_date=work_date,
                    attendance_type=entry.attendance_type,
                    hours=hours,
                )

        logger.info("Saved attendance for %s employee(s) on %s", len(pending), work_date.isoformat())
        return len(pending)

    def delete_record(self, attendance_id: int) -> None:
        if not self._attendance.delete(attendance_id):
            raise ValidationError("Failed to delete attendance")

    def records_for_date(self, work_date: date) -> list[AttendanceRecord]:
        return list(self._attendance.list_for_date(work_date))

    def month_view(
        self,
        *,
        year: int,
        month: int,
        selected_employee_ids: Collection[int] = (),
        selected_day: Optional[date] = None,
    ) -> MonthView:
        if not 1 <= int(month) <= 12:
            raise ValidationError("Month must be between 1 and 12")
        if not MINYEAR <= int(year) <= MAXYEAR:
            raise ValidationError(f"Year must be between {MINYEAR} and {MAXYEAR}")

        employees = list(self._employees.list_all())
        known_ids = {e.employee_id for e in employees}
        # Drop selections that no longer exist in the roster.
        selected = [i for i in dict.fromkeys(selected_employee_ids) if i in known_ids]

        records = list(self._attendance.list_for_month(year=year, month=month))
        by_date = index_attendance_by_date(records)
        by_employee = index_attendance_by_employee(records)
        absences = absence_counts(records)
        n_days = days_in_month(year, month)

        first = date(year, month, 1)
        calendar = {
            first + timedelta(days=i): calendar_status(by_date, first + timedelta(days=i), selected)
            for i in range(n_days)
        }

        summaries = []
        for e in employees:
            own = by_employee.get(e.employee_id, [])
            present, total = monthly_presence_ratio(e, own, n_days)
            summaries.append(
                EmployeeMonthSummary(
                    employee=e,
                    present_days=present,
                    days_in_month=total,
                    absences=absences.get(e.employee_id, 0),
                )
            )

        day_details: list[DayDetail] = []
        if selected_day and selected:
            lookup = {r.employee_id: r for r in by_date.get(selected_day, [])}
            day_details = [
                DayDetail(employee=e, record=lookup.get(e.employee_id)) for e in employees if e.employee_id in selected
            ]

        return MonthView(
            year=year,
            month=month,
            days_in_month=n_days,
            selected_employee_ids=selected,
            calendar=calendar,
            summaries=summaries,
            selected_day=selected_day,
            day_details=day_details,
            previous=previous_month(year, month),
            next=next_month(year, month),
        )
