from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus, LectureType


@dataclass(frozen=True)
class LectureRef:
    """Lecture columns joined onto an attendance row (read-model for reports)."""

    lecture_id: int
    subject: str
    type: LectureType


@dataclass(frozen=True)
class AttendanceRecord:
    """A dated present/absent mark tied to one lecture and one user.

    `lecture` is only filled by joined queries; it stays None when the owning
    lecture row is missing.
    """

    attendance_id: int
    user_id: int
    lecture_id: Optional[int]
    date: date
    status: AttendanceStatus
    lecture: Optional[LectureRef] = None
