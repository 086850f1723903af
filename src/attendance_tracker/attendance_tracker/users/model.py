from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Account that owns lectures and attendance records.

    Plain data object (no DB access code).
    """

    user_id: int
    username: str
    full_name: str
    password_hash: str
    is_active: bool = True
