from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..aggregation import advance_totals
from ..common.decoding import ZERO
from ..common.validators import optional_text, require_choice, require_positive
from ..core.constants import ADVANCE_TRANSACTION_TYPES
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import EmployeeAdvance
from .repository import AdvanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeAdvanceTotal:
    employee: Employee
    total: Decimal


@dataclass(frozen=True)
class AdvanceOverview:
    totals: list[EmployeeAdvanceTotal]
    advances: list[EmployeeAdvance]


class AdvanceService:
    def __init__(self, advances: AdvanceRepository, employees: EmployeeRepository):
        self._advances = advances
        self._employees = employees

    def record_advance(
        self,
        *,
        employee_id: Optional[int],
        advance_date: Optional[date],
        amount: Any,
        transaction_type: str = ADVANCE_TRANSACTION_TYPES[0],
        notes: Optional[str] = None,
    ) -> int:
        if not employee_id or not advance_date:
            raise ValidationError("Please fill all required fields")
        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Employee not found")

        advance_id = self._advances.create(
            employee_id=employee_id,
            advance_date=advance_date,
            amount=require_positive(amount, "Amount"),
            transaction_type=require_choice(transaction_type, "Transaction type", ADVANCE_TRANSACTION_TYPES),
            notes=optional_text(notes),
        )
        logger.info("Recorded advance %s for employee %s", advance_id, employee_id)
        return advance_id

    def advance_overview(self, *, include_zero: bool = False) -> AdvanceOverview:
        """Every employee with the total advanced so far.

        Employees with nothing advanced are hidden unless ``include_zero``.
        """

        advances = list(self._advances.list_all())
        totals = advance_totals(advances)
        rows = [
            EmployeeAdvanceTotal(employee=e, total=totals.get(e.employee_id, ZERO))
            for e in self._employees.list_all()
        ]
        if not include_zero:
            rows = [r for r in rows if r.total != 0]
        return AdvanceOverview(totals=rows, advances=advances)
