from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Optional, Union

from ..aggregation import (
    CustomerRow,
    PortfolioTotals,
    filter_and_sort_customers,
    index_payments_by_customer,
    portfolio_totals,
)
from ..core.enums import SortOrder, StatusFilter
from ..core.exceptions import ValidationError
from ..customers.repository import CustomerRepository, PaymentRepository

CSV_FIELDS = [
    "customer_id",
    "name",
    "phone",
    "location",
    "work_amount",
    "advance_amount",
    "work_completed",
    "pending",
]


@dataclass(frozen=True)
class DashboardData:
    totals: PortfolioTotals
    customers: list[CustomerRow]


class DashboardService:
    """Read-side use cases: dashboard totals and the payment tracking list.

    Each call loads a fresh snapshot and recomputes; nothing is cached.
    """

    def __init__(self, customers: CustomerRepository, payments: PaymentRepository):
        self._customers = customers
        self._payments = payments

    def _snapshot(self):
        customers = list(self._customers.list_all())
        by_customer = index_payments_by_customer(self._payments.list_all())
        return customers, by_customer

    def summary(self, *, search_term: Optional[str] = "") -> DashboardData:
        customers, by_customer = self._snapshot()
        return DashboardData(
            totals=portfolio_totals(customers, by_customer),
            customers=filter_and_sort_customers(customers, by_customer, search_term),
        )

    def payment_tracking(
        self,
        *,
        search_term: Optional[str] = "",
        status: Union[StatusFilter, str] = StatusFilter.ALL,
        sort: Union[SortOrder, str] = SortOrder.DESC,
    ) -> list[CustomerRow]:
        try:
            status = StatusFilter(status)
            sort = SortOrder(sort)
        except ValueError as e:
            raise ValidationError(str(e))

        customers, by_customer = self._snapshot()
        return filter_and_sort_customers(customers, by_customer, search_term, status, sort)

    def payment_tracking_csv(self, **filters) -> str:
        rows = self.payment_tracking(**filters)

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in rows:
            c = r.customer
            writer.writerow(
                {
                    "customer_id": c.customer_id,
                    "name": c.name,
                    "phone": c.phone,
                    "location": c.location,
                    "work_amount": c.work_amount,
                    "advance_amount": c.advance_amount,
                    "work_completed": "yes" if c.work_completed else "no",
                    "pending": r.pending,
                }
            )
        return out.getvalue()
