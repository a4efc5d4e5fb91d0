from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable

from ..advances.model import EmployeeAdvance
from ..common.decoding import ZERO, to_amount


def advance_totals(advances: Iterable[EmployeeAdvance]) -> Dict[int, Decimal]:
    """Total advanced per employee id.

    Employees whose advances sum to zero stay in the mapping; hiding them is
    a display decision.
    """

    totals: Dict[int, Decimal] = defaultdict(lambda: ZERO)
    for a in advances:
        totals[a.employee_id] += to_amount(a.amount)
    return dict(totals)
