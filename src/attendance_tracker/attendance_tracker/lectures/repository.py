from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LectureType
from .model import Lecture


class LectureRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[Lecture]:
        """All lectures of a user, ordered by weekday then start time."""

        raise NotImplementedError

    def get_by_id(self, lecture_id: int) -> Optional[Lecture]:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: int,
        subject: str,
        type: LectureType,
        day_of_week: int,
        start_time: str,
        end_time: str,
    ) -> int:
        raise NotImplementedError
