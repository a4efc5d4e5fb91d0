"""Strict row decoding used at the data-access boundary.

Rows coming back from the store are loosely typed (DECIMAL, float, str or
NULL depending on the driver). These helpers turn them into the exact types
the domain dataclasses declare.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

ZERO = Decimal("0")


def to_amount(value: Any) -> Decimal:
    """Coerce a stored money value to Decimal.

    Missing, non-numeric and non-finite values become zero so a single bad
    row contributes nothing to a total instead of aborting it.
    """

    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, float):
        if not math.isfinite(value):
            return ZERO
        return Decimal(str(value))
    if isinstance(value, int):
        return Decimal(value)
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    return amount if amount.is_finite() else ZERO


def to_hours(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return None
    return hours if math.isfinite(hours) else None


def to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value)[:10], "%Y-%m-%d").date()


def to_datetime(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value))


def to_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None
