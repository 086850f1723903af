"""Attendance arithmetic.

Two granularities live here and must not be mixed up:

* ``aggregate_by_subject_type`` buckets records by (subject, type) across every
  lecture sharing that label (weekly report).
* ``low_attendance_alerts`` buckets records by lecture id, one bucket per
  scheduled lecture row (home view alert).

Both are pure functions over an already-fetched snapshot.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import ATTENDANCE_TARGET
from ..core.enums import AttendanceStatus, LectureType
from ..lectures.model import Lecture


@dataclass(frozen=True)
class SubjectTypeSummary:
    subject: str
    type: LectureType
    present: int
    absent: int
    total_lectures: int
    attendance_score: float
    lectures_needed_for_75: int

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "type": self.type.value,
            "present": self.present,
            "absent": self.absent,
            "totalLectures": self.total_lectures,
            "attendanceScore": self.attendance_score,
            "lecturesNeededFor75": self.lectures_needed_for_75,
        }


@dataclass(frozen=True)
class LowAttendanceAlert:
    lecture_id: int
    subject: str
    type: LectureType
    percentage: float


@dataclass
class _Bucket:
    present: int = 0
    total: int = 0

    def add(self, status: AttendanceStatus) -> None:
        self.total += 1
        if status == AttendanceStatus.PRESENT:
            self.present += 1


def percentage(present: int, total: int) -> float:
    """present/total*100 rounded to 2 decimals, half away from zero."""
    if total <= 0:
        return 0.0
    value = Decimal(present * 100) / Decimal(total)
    return float(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def lectures_needed(
    present: int,
    total: int,
    *,
    target: Fraction = ATTENDANCE_TARGET,
    project_future_sessions: bool = False,
) -> int:
    """Additional present sessions needed to reach `target`.

    By default the count is taken against the current total:
    ``max(0, ceil(target * total) - present)``. With ``project_future_sessions``
    every extra session also grows the total, giving the least k with
    ``(present + k) / (total + k) >= target``.
    """
    if total <= 0:
        return 0
    if not project_future_sessions:
        return max(0, math.ceil(target * total) - present)
    if target >= 1:
        raise ValueError("target must be below 1 when projecting future sessions")
    return max(0, math.ceil((target * total - present) / (1 - target)))


def aggregate_by_subject_type(
    records: Iterable[AttendanceRecord],
    *,
    project_future_sessions: bool = False,
) -> list[SubjectTypeSummary]:
    buckets: dict[tuple[str, LectureType], _Bucket] = {}
    for record in records:
        if record.lecture is None:
            continue
        key = (record.lecture.subject, record.lecture.type)
        buckets.setdefault(key, _Bucket()).add(record.status)

    return [
        SubjectTypeSummary(
            subject=subject,
            type=lecture_type,
            present=b.present,
            absent=b.total - b.present,
            total_lectures=b.total,
            attendance_score=percentage(b.present, b.total),
            lectures_needed_for_75=lectures_needed(
                b.present, b.total, project_future_sessions=project_future_sessions
            ),
        )
        for (subject, lecture_type), b in buckets.items()
    ]


def low_attendance_alerts(
    lectures: Sequence[Lecture],
    records: Iterable[AttendanceRecord],
    *,
    target: Fraction = ATTENDANCE_TARGET,
) -> list[LowAttendanceAlert]:
    buckets = {lecture.lecture_id: _Bucket() for lecture in lectures}
    for record in records:
        bucket = buckets.get(record.lecture_id)
        if bucket is not None:
            bucket.add(record.status)

    alerts: list[LowAttendanceAlert] = []
    for lecture in lectures:
        b = buckets[lecture.lecture_id]
        if b.total > 0 and Fraction(b.present, b.total) < target:
            alerts.append(
                LowAttendanceAlert(
                    lecture_id=lecture.lecture_id,
                    subject=lecture.subject,
                    type=lecture.type,
                    percentage=percentage(b.present, b.total),
                )
            )
    return alerts
