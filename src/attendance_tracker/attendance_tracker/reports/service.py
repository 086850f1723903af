from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.constants import REPORT_WINDOW_DAYS
from ..core.exceptions import store_errors
from .aggregator import SubjectTypeSummary, aggregate_by_subject_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeeklyReport:
    since: date
    until: date
    rows: list[SubjectTypeSummary]

    def to_json(self) -> list[dict]:
        return [row.to_dict() for row in self.rows]


class ReportService:
    """Weekly attendance report: fetch the window, then aggregate the snapshot."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        window_days: int = REPORT_WINDOW_DAYS,
        project_future_sessions: bool = False,
    ):
        self._attendance = attendance
        self._window_days = int(window_days)
        self._project_future_sessions = bool(project_future_sessions)

    def weekly_report(self, user_id: int, *, today: Optional[date] = None) -> Optional[WeeklyReport]:
        """Return None when the user has no attendance in the window.

        Raises DataFetchError when the record store fails.
        """
        today = today or now_local().date()
        since = today - timedelta(days=self._window_days)

        with store_errors("fetching attendance data"):
            records = tuple(self._attendance.list_with_lecture_since(int(user_id), since))

        if not records:
            return None

        rows = aggregate_by_subject_type(records, project_future_sessions=self._project_future_sessions)
        logger.debug("Weekly report user_id=%s records=%d groups=%d", user_id, len(records), len(rows))
        return WeeklyReport(since=since, until=today, rows=rows)
