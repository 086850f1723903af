from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import sunday_based_weekday
from ..common.validators import require_day_of_week, require_hhmm, require_non_empty
from ..core.enums import LectureType
from ..core.exceptions import ValidationError
from .model import Lecture
from .repository import LectureRepository

logger = logging.getLogger(__name__)


def find_active_lecture(lectures: Iterable[Lecture], now: datetime) -> Optional[Lecture]:
    """First lecture in progress at `now` (same weekday, start <= HH:MM <= end)."""
    current_day = sunday_based_weekday(now.date())
    current_time = now.strftime("%H:%M")
    for lecture in lectures:
        if lecture.day_of_week == current_day and lecture.start_time <= current_time <= lecture.end_time:
            return lecture
    return None


class LectureService:
    def __init__(self, lectures: LectureRepository):
        self._lectures = lectures

    def schedule(
        self,
        *,
        user_id: int,
        subject: str,
        type: str,
        day_of_week: object,
        start_time: str,
        end_time: str,
    ) -> int:
        subject = require_non_empty(subject, "Subject")
        try:
            lecture_type = LectureType(type)
        except ValueError:
            raise ValidationError("Type must be one of Lecture, Lab, Tutorial")
        day = require_day_of_week(day_of_week)
        start = require_hhmm(start_time, "Start time")
        end = require_hhmm(end_time, "End time")
        if start >= end:
            raise ValidationError("End time must be after start time")

        lecture_id = self._lectures.create(
            user_id=int(user_id),
            subject=subject,
            type=lecture_type,
            day_of_week=day,
            start_time=start,
            end_time=end,
        )
        logger.info("Scheduled %s (%s) for user_id=%s as lecture_id=%s", subject, lecture_type.value, user_id, lecture_id)
        return lecture_id

    def list_for_user(self, user_id: int) -> Sequence[Lecture]:
        return self._lectures.list_for_user(int(user_id))
