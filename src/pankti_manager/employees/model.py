from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.constants import DEFAULT_OVERTIME_RATE


@dataclass(frozen=True)
class Employee:
    """Domain entity: a daily-wage employee."""

    employee_id: int
    name: str
    phone: str
    daily_wage: Decimal
    overtime_rate: Decimal = DEFAULT_OVERTIME_RATE
    address: Optional[str] = None
    created_at: Optional[datetime] = None
