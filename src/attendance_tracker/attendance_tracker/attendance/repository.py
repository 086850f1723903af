from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_with_lecture_since(self, user_id: int, since: date) -> Sequence[AttendanceRecord]:
        """Records dated on/after `since`, each joined with its lecture (subject, type)."""

        raise NotImplementedError

    def get_for_lecture_and_date(self, *, lecture_id: int, user_id: int, on: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, user_id: int, lecture_id: int, on: date, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        raise NotImplementedError
