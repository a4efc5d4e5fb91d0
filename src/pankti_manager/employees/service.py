from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.validators import optional_text, require_non_empty, require_positive
from ..core.constants import DEFAULT_OVERTIME_RATE
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def add_employee(
        self,
        *,
        name: str,
        phone: str,
        daily_wage: Any,
        overtime_rate: Any = None,
        address: Optional[str] = None,
    ) -> int:
        name = require_non_empty(name, "Name")
        phone = require_non_empty(phone, "Phone")
        wage = require_positive(daily_wage, "Daily wage")
        if overtime_rate is None or (isinstance(overtime_rate, str) and not overtime_rate.strip()):
            rate = DEFAULT_OVERTIME_RATE
        else:
            rate = require_positive(overtime_rate, "Overtime rate")

        employee_id = self._employees.create(
            name=name,
            phone=phone,
            daily_wage=wage,
            overtime_rate=rate,
            address=optional_text(address),
        )
        logger.info("Added employee %s (%s)", employee_id, name)
        return employee_id

    def list_employees(self) -> list[Employee]:
        return list(self._employees.list_all())

    def search_employees(self, term: Optional[str]) -> list[Employee]:
        employees = self.list_employees()
        term = (term or "").strip().lower()
        if not term:
            return employees
        return [e for e in employees if term in e.name.lower()]
