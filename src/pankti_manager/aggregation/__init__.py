"""Pure aggregation over in-memory snapshots.

Nothing in this package performs I/O, reads the clock or mutates its inputs.
Every call recomputes from the snapshot it is given.
"""

from .advances import advance_totals
from .attendance import (
    SaveCheck,
    absence_counts,
    attendance_status,
    calendar_status,
    monthly_presence_ratio,
    validate_attendance_save,
)
from .balances import (
    CustomerRow,
    PortfolioTotals,
    customer_balance,
    filter_and_sort_customers,
    matches_search,
    pending_amount,
    portfolio_totals,
)
from .snapshot import index_attendance_by_date, index_attendance_by_employee, index_by_id, index_payments_by_customer

__all__ = [
    "CustomerRow",
    "PortfolioTotals",
    "SaveCheck",
    "absence_counts",
    "advance_totals",
    "attendance_status",
    "calendar_status",
    "customer_balance",
    "filter_and_sort_customers",
    "index_attendance_by_date",
    "index_attendance_by_employee",
    "index_by_id",
    "index_payments_by_customer",
    "matches_search",
    "monthly_presence_ratio",
    "pending_amount",
    "portfolio_totals",
    "validate_attendance_save",
]
