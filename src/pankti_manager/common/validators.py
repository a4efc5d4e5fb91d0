from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_amount(value: Any, field_name: str) -> Decimal:
    """Parse a user supplied amount, rejecting blanks and non-numbers."""

    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"Please enter a valid {field_name.lower()}")
    if not amount.is_finite():
        raise ValidationError(f"Please enter a valid {field_name.lower()}")
    return amount


def require_positive(value: Any, field_name: str) -> Decimal:
    amount = parse_amount(value, field_name)
    if amount <= 0:
        raise ValidationError(f"Please enter a valid {field_name.lower()}")
    return amount


def require_non_negative(value: Any, field_name: str) -> Decimal:
    amount = parse_amount(value, field_name)
    if amount < 0:
        raise ValidationError(f"Please enter a valid {field_name.lower()}")
    return amount


def require_choice(value: Optional[str], field_name: str, choices) -> str:
    value = require_non_empty(value, field_name)
    if value not in choices:
        raise ValidationError(f"{field_name} must be one of: {', '.join(choices)}")
    return value
