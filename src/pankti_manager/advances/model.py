from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EmployeeAdvance:
    """Cash handed to an employee ahead of wage settlement."""

    advance_id: int
    employee_id: int
    advance_date: date
    amount: Decimal
    transaction_type: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
