from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import EmployeeAdvance


class AdvanceRepository(Protocol):
    def list_all(self, *, employee_id: Optional[int] = None) -> Sequence[EmployeeAdvance]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        advance_date: date,
        amount: Decimal,
        transaction_type: str,
        notes: Optional[str] = None,
    ) -> int:
        raise NotImplementedError
