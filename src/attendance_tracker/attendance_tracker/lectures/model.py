from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DAY_NAMES
from ..core.enums import LectureType


@dataclass(frozen=True)
class Lecture:
    """A recurring weekly session (lecture/lab/tutorial).

    day_of_week uses 0 = Sunday; start_time/end_time are zero-padded "HH:MM".
    """

    lecture_id: int
    user_id: int
    subject: str
    type: LectureType
    day_of_week: int
    start_time: str
    end_time: str

    @property
    def day_name(self) -> str:
        return DAY_NAMES.get(self.day_of_week, "?")

    def to_dict(self) -> dict:
        return {
            "id": self.lecture_id,
            "subject": self.subject,
            "type": self.type.value,
            "day_of_week": self.day_of_week,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }
