from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        phone: str,
        daily_wage: Decimal,
        overtime_rate: Decimal,
        address: Optional[str] = None,
    ) -> int:
        raise NotImplementedError
