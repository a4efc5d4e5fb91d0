from __future__ import annotations

from enum import Enum


class AttendanceType(str, Enum):
    """Attendance kind stored for one employee on one day."""

    FULL_DAY = "full_day"
    HALF_DAY = "half_day"
    HOURLY = "hourly"
    ABSENT = "absent"
    OT_DAY = "ot_day"


class AttendanceCategory(str, Enum):
    """Calendar highlight derived from an attendance record."""

    PRESENT = "present"
    PARTIAL = "partial"
    ABSENT = "absent"
    OT = "ot"
    NONE = "none"


class StatusFilter(str, Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


class SortOrder(str, Enum):
    NONE = "none"
    DESC = "desc"
    ASC = "asc"


class PaymentMode(str, Enum):
    CASH = "cash"
    UPI = "upi"
    BANK_TRANSFER = "bank_transfer"
    CHEQUE = "cheque"
    OTHER = "other"
