"""Customer balance rules.

Balance due = work amount - advance - sum of recorded payments. It is signed:
a negative balance means the customer overpaid. "Pending" is the same figure
floored at zero. Amounts are ``Decimal`` so totals are exact and do not depend
on payment order.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from ..common.decoding import ZERO, to_amount
from ..core.enums import SortOrder, StatusFilter
from ..customers.model import Customer, Payment


@dataclass(frozen=True)
class PortfolioTotals:
    total_work_value: Decimal
    total_pending: Decimal
    completed_work_pending: Decimal


@dataclass(frozen=True)
class CustomerRow:
    customer: Customer
    pending: Decimal


def customer_balance(customer: Customer, payments: Iterable[Payment]) -> Decimal:
    """Signed balance due; payments are summed before subtracting."""

    paid = sum((to_amount(p.amount) for p in payments), ZERO)
    return to_amount(customer.work_amount) - to_amount(customer.advance_amount) - paid


def pending_amount(customer: Customer, payments: Iterable[Payment]) -> Decimal:
    return max(customer_balance(customer, payments), ZERO)


def portfolio_totals(
    customers: Iterable[Customer],
    payments_by_customer: Mapping[int, Sequence[Payment]],
) -> PortfolioTotals:
    total_work_value = ZERO
    total_pending = ZERO
    completed_work_pending = ZERO

    for c in customers:
        total_work_value += to_amount(c.work_amount)
        pending = pending_amount(c, payments_by_customer.get(c.customer_id, ()))
        total_pending += pending
        if c.work_completed:
            completed_work_pending += pending

    return PortfolioTotals(
        total_work_value=total_work_value,
        total_pending=total_pending,
        completed_work_pending=completed_work_pending,
    )


def matches_search(customer: Customer, search_term: Optional[str]) -> bool:
    term = (search_term or "").lower()
    if not term:
        return True
    fields = (customer.name, customer.phone, customer.location)
    return any(term in (f or "").lower() for f in fields)


def filter_and_sort_customers(
    customers: Iterable[Customer],
    payments_by_customer: Mapping[int, Sequence[Payment]],
    search_term: Optional[str] = "",
    status_filter: Union[StatusFilter, str] = StatusFilter.ALL,
    sort_order: Union[SortOrder, str] = SortOrder.NONE,
) -> List[CustomerRow]:
    """Search, filter by pending status and order by pending amount.

    Overpaid customers have zero pending and therefore count as completed.
    Sorting is stable: customers with equal pending keep their input order.
    """

    status_filter = StatusFilter(status_filter)
    sort_order = SortOrder(sort_order)

    rows = [
        CustomerRow(customer=c, pending=pending_amount(c, payments_by_customer.get(c.customer_id, ())))
        for c in customers
        if matches_search(c, search_term)
    ]

    if status_filter == StatusFilter.PENDING:
        rows = [r for r in rows if r.pending > 0]
    elif status_filter == StatusFilter.COMPLETED:
        rows = [r for r in rows if r.pending == 0]

    if sort_order == SortOrder.DESC:
        rows = sorted(rows, key=lambda r: r.pending, reverse=True)
    elif sort_order == SortOrder.ASC:
        rows = sorted(rows, key=lambda r: r.pending)
    return rows
