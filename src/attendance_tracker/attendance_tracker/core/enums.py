from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class AttendanceStatus(str, Enum):
    """Attendance mark stored per lecture per day."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def from_raw(cls, value: object) -> "AttendanceStatus":
        """Normalize a stored status: anything other than "Present" counts as absent."""
        if value == cls.PRESENT.value:
            return cls.PRESENT
        if value != cls.ABSENT.value:
            logger.warning("Unexpected attendance status %r, counting as %s", value, cls.ABSENT.value)
        return cls.ABSENT


class LectureType(str, Enum):
    LECTURE = "Lecture"
    LAB = "Lab"
    TUTORIAL = "Tutorial"
