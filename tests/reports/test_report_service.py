from __future__ import annotations

from datetime import date, timedelta

import pytest

from attendance_tracker.core.enums import LectureType
from attendance_tracker.core.exceptions import DataFetchError
from attendance_tracker.reports.service import ReportService
from fakes import FailingAttendance

TODAY = date(2026, 2, 6)


def test_weekly_window_is_seven_days_inclusive(attendance_repo, lectures_repo):
    lec = lectures_repo.add(1, "Maths")
    attendance_repo.add(1, lec.lecture_id, TODAY - timedelta(days=7), "Present")
    attendance_repo.add(1, lec.lecture_id, TODAY - timedelta(days=8), "Absent")
    attendance_repo.add(1, lec.lecture_id, TODAY, "Absent")

    report = ReportService(attendance_repo).weekly_report(1, today=TODAY)

    assert attendance_repo.last_since == date(2026, 1, 30)
    (row,) = report.rows
    assert (row.present, row.absent, row.total_lectures) == (1, 1, 2)


def test_no_records_is_empty_result(attendance_repo):
    assert ReportService(attendance_repo).weekly_report(1, today=TODAY) is None


def test_only_other_users_records_is_empty_result(attendance_repo, lectures_repo):
    lec = lectures_repo.add(2, "Maths")
    attendance_repo.add(2, lec.lecture_id, TODAY, "Present")

    assert ReportService(attendance_repo).weekly_report(1, today=TODAY) is None


def test_records_whose_lecture_was_deleted_leave_an_empty_group_list(attendance_repo, lectures_repo):
    lec = lectures_repo.add(1, "Maths")
    attendance_repo.add(1, lec.lecture_id, TODAY, "Present")
    lectures_repo.remove(lec.lecture_id)

    report = ReportService(attendance_repo).weekly_report(1, today=TODAY)

    assert report is not None
    assert report.to_json() == []


def test_report_groups_by_subject_and_type(attendance_repo, lectures_repo):
    maths = lectures_repo.add(1, "Maths", LectureType.LECTURE)
    lab = lectures_repo.add(1, "Physics", LectureType.LAB, day_of_week=3)
    for status in ["Present", "Present", "Present", "Absent"]:
        attendance_repo.add(1, maths.lecture_id, TODAY, status)
    for status in ["Present", "Absent", "Absent", "Absent"]:
        attendance_repo.add(1, lab.lecture_id, TODAY, status)

    rows = {(r["subject"], r["type"]): r for r in ReportService(attendance_repo).weekly_report(1, today=TODAY).to_json()}

    assert rows[("Maths", "Lecture")]["lecturesNeededFor75"] == 0
    assert rows[("Physics", "Lab")]["attendanceScore"] == 25.0
    assert rows[("Physics", "Lab")]["lecturesNeededFor75"] == 2


def test_projection_setting_is_forwarded(attendance_repo, lectures_repo):
    lab = lectures_repo.add(1, "Physics", LectureType.LAB)
    for status in ["Present", "Absent", "Absent", "Absent"]:
        attendance_repo.add(1, lab.lecture_id, TODAY, status)

    report = ReportService(attendance_repo, project_future_sessions=True).weekly_report(1, today=TODAY)

    assert report.rows[0].lectures_needed_for_75 == 8


def test_store_failure_raises_data_fetch_error_with_message():
    svc = ReportService(FailingAttendance("relation \"attendance\" does not exist"))

    with pytest.raises(DataFetchError) as exc:
        svc.weekly_report(1, today=TODAY)

    assert "does not exist" in str(exc.value)
