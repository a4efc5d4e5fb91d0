"""Lookup tables built once per snapshot.

The aggregations take these instead of scanning the full payment or
attendance list for every customer/employee.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Callable, Dict, Iterable, List, TypeVar

from ..attendance.model import AttendanceRecord
from ..customers.model import Payment

T = TypeVar("T")


def index_by_id(items: Iterable[T], key: Callable[[T], int]) -> Dict[int, T]:
    return {key(item): item for item in items}


def index_payments_by_customer(payments: Iterable[Payment]) -> Dict[int, List[Payment]]:
    out: Dict[int, List[Payment]] = defaultdict(list)
    for p in payments:
        out[p.customer_id].append(p)
    return dict(out)


def index_attendance_by_date(records: Iterable[AttendanceRecord]) -> Dict[date, List[AttendanceRecord]]:
    out: Dict[date, List[AttendanceRecord]] = defaultdict(list)
    for r in records:
        out[r.work_date].append(r)
    return dict(out)


def index_attendance_by_employee(records: Iterable[AttendanceRecord]) -> Dict[int, List[AttendanceRecord]]:
    out: Dict[int, List[AttendanceRecord]] = defaultdict(list)
    for r in records:
        out[r.employee_id].append(r)
    return dict(out)
