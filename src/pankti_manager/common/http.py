"""Small helpers shared by the Flask controllers."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request, session

from ..auth.service import AuthSession
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def current_auth() -> AuthSession:
    return AuthSession(session).load()


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_auth().is_authenticated:
            return jsonify({"success": False, "message": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def arg_date(value: Optional[str], field_name: str) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def arg_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")


def arg_bool(value: Any, field_name: str) -> bool:
    if value is None or value == "":
        return False
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"true", "1", "yes", "on"}:
        return True
    if text in {"false", "0", "no", "off"}:
        return False
    raise ValidationError(f"{field_name} must be true or false")


def money(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def iso(value: Optional[date | datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None
