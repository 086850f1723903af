from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def sunday_based_weekday(value: date) -> int:
    """Weekday number with Sunday = 0 ... Saturday = 6."""
    return (value.weekday() + 1) % 7


def format_hhmm(value: Any) -> str:
    """Render a TIME column value as zero-padded HH:MM.

    mysql-connector can return TIME as datetime.time, datetime.timedelta or a string.
    """

    if isinstance(value, time):
        return value.strftime("%H:%M")

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return f"{total_seconds // 3600:02d}:{(total_seconds % 3600) // 60:02d}"

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        return f"{int(parts[0]):02d}:{int(parts[1]):02d}"

    raise TypeError(f"Unsupported TIME value type: {type(value)!r}")
