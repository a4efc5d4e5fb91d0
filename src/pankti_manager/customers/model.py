from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Customer:
    """Domain entity: a customer and the contracted work value.

    Note: plain data object, no DB access code here.
    """

    customer_id: int
    name: str
    phone: str
    location: str
    work_amount: Decimal
    advance_amount: Decimal
    work_completed: bool = False
    address: Optional[str] = None
    referred_by: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Payment:
    """Domain entity: one payment received from a customer."""

    payment_id: int
    customer_id: int
    amount: Decimal
    payment_mode: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
