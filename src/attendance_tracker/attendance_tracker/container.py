from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .lectures.mysql_lecture_repository import MySQLLectureRepository
from .lectures.repository import LectureRepository
from .lectures.service import LectureService
from .reports.service import ReportService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    lectures_repo: LectureRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    user_service: UserService
    lecture_service: LectureService
    attendance_service: AttendanceService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    users_repo: UserRepository,
    lectures_repo: LectureRepository,
    attendance_repo: AttendanceRepository,
    project_future_sessions: bool = False,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations (MySQL or in-memory)."""
    return Container(
        users_repo=users_repo,
        lectures_repo=lectures_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        lecture_service=LectureService(lectures_repo),
        attendance_service=AttendanceService(attendance_repo, lectures_repo),
        report_service=ReportService(attendance_repo, project_future_sessions=project_future_sessions),
        conn=conn,
    )


def build_container(*, db_config: dict, project_future_sessions: bool = False) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        lectures_repo=MySQLLectureRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        project_future_sessions=project_future_sessions,
        conn=conn,
    )
