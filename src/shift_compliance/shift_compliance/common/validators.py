from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_utc_instant

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_instant(value: Any, field_name: str) -> datetime:
    text = require_non_empty(value, field_name)
    try:
        return parse_utc_instant(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO-8601 UTC instant") from None


def require_enum(value: Any, enum_type: Type[E], field_name: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_type)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None


def require_period(start: datetime, end: datetime) -> tuple[datetime, datetime]:
    if end <= start:
        raise ValidationError("period_end must be after period_start")
    return start, end


def require_non_negative_int(value: Any, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_list(value: Any, field_name: str) -> list[dict]:
    """A JSON array of objects; missing means empty."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise ValidationError(f"{field_name} must be a list of objects")
    return value


def require_bool(value: Any, field_name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a boolean")
    return value


def require_number(value: Any, field_name: str) -> float:
    # bool is an int subclass; JSON true is not a threshold
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number")
    return float(value)
