from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError, store_errors
from ..lectures.model import Lecture
from ..lectures.repository import LectureRepository
from ..lectures.service import find_active_lecture
from ..reports.aggregator import LowAttendanceAlert, low_attendance_alerts
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActiveLecture:
    lecture: Lecture
    recorded_status: Optional[AttendanceStatus] = None


@dataclass(frozen=True)
class HomeView:
    lectures: Sequence[Lecture]
    alerts: list[LowAttendanceAlert]


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, lectures: LectureRepository):
        self._attendance = attendance
        self._lectures = lectures

    def record(self, user_id: int, lecture_id: int, status: object, *, today: Optional[date] = None) -> int:
        """Mark attendance for a lecture today; re-marking the same day updates the record."""
        try:
            status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError("Status must be Present or Absent")

        today = today or now_local().date()

        lecture = self._lectures.get_by_id(int(lecture_id))
        if not lecture or lecture.user_id != int(user_id):
            raise ValidationError("Lecture not found")

        existing = self._attendance.get_for_lecture_and_date(lecture_id=lecture.lecture_id, user_id=int(user_id), on=today)
        if existing:
            self._attendance.update_status(attendance_id=existing.attendance_id, status=status)
            logger.info("Updated attendance_id=%s to %s", existing.attendance_id, status.value)
            return existing.attendance_id

        attendance_id = self._attendance.create(user_id=int(user_id), lecture_id=lecture.lecture_id, on=today, status=status)
        logger.info("Recorded %s for lecture_id=%s on %s", status.value, lecture.lecture_id, today)
        return attendance_id

    def active_lecture(self, user_id: int, *, now: Optional[datetime] = None) -> Optional[ActiveLecture]:
        now = now or now_local()
        with store_errors("checking active lecture"):
            lecture = find_active_lecture(self._lectures.list_for_user(int(user_id)), now)
            if lecture is None:
                return None
            existing = self._attendance.get_for_lecture_and_date(lecture_id=lecture.lecture_id, user_id=int(user_id), on=now.date())
        return ActiveLecture(lecture=lecture, recorded_status=existing.status if existing else None)

    def home_view(self, user_id: int) -> HomeView:
        with store_errors("fetching lectures"):
            lectures = tuple(self._lectures.list_for_user(int(user_id)))
        with store_errors("fetching attendance"):
            records = tuple(self._attendance.list_for_user(int(user_id)))

        return HomeView(lectures=lectures, alerts=low_attendance_alerts(lectures, records))
