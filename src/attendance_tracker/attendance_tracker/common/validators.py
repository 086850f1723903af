from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_hhmm(value: str, field_name: str) -> str:
    """Accept HH:MM (24-hour); browsers may also post HH:MM:SS."""
    value = (value or "").strip()
    if len(value) == 8 and value[5] == ":":
        value = value[:5]
    if not _HHMM.match(value):
        raise ValidationError(f"{field_name} must be a time in HH:MM format")
    return value


def require_day_of_week(value: object) -> int:
    try:
        day = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError("Day of week is invalid")
    if not 0 <= day <= 6:
        raise ValidationError("Day of week is invalid")
    return day
