from __future__ import annotations

from datetime import datetime

import pytest

from attendance_tracker.core.enums import LectureType
from attendance_tracker.core.exceptions import ValidationError
from attendance_tracker.lectures.service import LectureService, find_active_lecture


def _schedule(svc: LectureService, **overrides):
    kwargs = dict(
        user_id=1,
        subject="Maths",
        type="Lecture",
        day_of_week="1",
        start_time="09:00",
        end_time="10:00",
    )
    kwargs.update(overrides)
    return svc.schedule(**kwargs)


def test_schedule_persists_lecture(lectures_repo):
    svc = LectureService(lectures_repo)

    lecture_id = _schedule(svc, subject="  Maths  ", start_time="09:00:00")

    lec = lectures_repo.get_by_id(lecture_id)
    assert lec.subject == "Maths"
    assert lec.type == LectureType.LECTURE
    assert lec.day_of_week == 1
    assert (lec.start_time, lec.end_time) == ("09:00", "10:00")


@pytest.mark.parametrize(
    "overrides",
    [
        {"subject": "   "},
        {"type": "Seminar"},
        {"day_of_week": "7"},
        {"day_of_week": ""},
        {"start_time": "9am"},
        {"end_time": "24:00"},
        {"start_time": "10:00", "end_time": "10:00"},
        {"start_time": "11:00", "end_time": "10:00"},
    ],
)
def test_schedule_rejects_invalid_input(lectures_repo, overrides):
    svc = LectureService(lectures_repo)

    with pytest.raises(ValidationError):
        _schedule(svc, **overrides)

    assert lectures_repo.list_for_user(1) == []


def test_sunday_is_day_zero(lectures_repo):
    svc = LectureService(lectures_repo)
    _schedule(svc, day_of_week=0)

    sunday = datetime(2026, 2, 1, 9, 15)
    assert find_active_lecture(svc.list_for_user(1), sunday).subject == "Maths"


def test_list_orders_by_day_then_start(lectures_repo):
    lectures_repo.add(1, "Late", day_of_week=2, start_time="15:00", end_time="16:00")
    lectures_repo.add(1, "Early", day_of_week=2, start_time="08:00", end_time="09:00")
    lectures_repo.add(1, "Monday", day_of_week=1, start_time="12:00", end_time="13:00")

    subjects = [lec.subject for lec in LectureService(lectures_repo).list_for_user(1)]

    assert subjects == ["Monday", "Early", "Late"]


def test_active_lecture_window_is_inclusive(lectures_repo, fixed_now):
    lec = lectures_repo.add(1, "Maths", day_of_week=1, start_time="09:30", end_time="10:30")
    lectures = lectures_repo.list_for_user(1)

    assert find_active_lecture(lectures, fixed_now) == lec
    assert find_active_lecture(lectures, fixed_now.replace(hour=10, minute=30)) == lec
    assert find_active_lecture(lectures, fixed_now.replace(hour=10, minute=31)) is None
    assert find_active_lecture(lectures, fixed_now.replace(hour=9, minute=29)) is None


def test_active_lecture_needs_same_weekday(lectures_repo, fixed_now):
    lectures_repo.add(1, "Maths", day_of_week=2, start_time="09:00", end_time="10:00")

    assert find_active_lecture(lectures_repo.list_for_user(1), fixed_now) is None


def test_first_matching_lecture_wins(lectures_repo, fixed_now):
    first = lectures_repo.add(1, "Maths", day_of_week=1, start_time="09:00", end_time="10:00")
    lectures_repo.add(1, "Physics", LectureType.LAB, day_of_week=1, start_time="09:15", end_time="11:00")

    assert find_active_lecture(lectures_repo.list_for_user(1), fixed_now) == first
