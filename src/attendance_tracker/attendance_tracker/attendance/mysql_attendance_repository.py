from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus, LectureType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, LectureRef
from .repository import AttendanceRepository


def _to_record(r: dict, *, with_lecture: bool = False) -> AttendanceRecord:
    lecture = None
    if with_lecture and r.get("l_lecture_id") is not None:
        lecture = LectureRef(
            lecture_id=int(r["l_lecture_id"]),
            subject=r["subject"],
            type=LectureType(r["type"]),
        )
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        lecture_id=int(r["lecture_id"]) if r.get("lecture_id") is not None else None,
        date=r["date"],
        status=AttendanceStatus.from_raw(r["status"]),
        lecture=lecture,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, user_id, lecture_id, date, status
                FROM attendance
                WHERE user_id=%s
                ORDER BY date DESC, attendance_id DESC
                """,
                (int(user_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_with_lecture_since(self, user_id: int, since: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    a.attendance_id, a.user_id, a.lecture_id, a.date, a.status,
                    l.lecture_id AS l_lecture_id, l.subject, l.type
                FROM attendance a
                LEFT JOIN lectures l ON l.lecture_id = a.lecture_id
                WHERE a.user_id=%s AND a.date >= %s
                ORDER BY a.date ASC, a.attendance_id ASC
                """,
                (int(user_id), since),
            )
            return [_to_record(r, with_lecture=True) for r in fetchall(cur)]

    def get_for_lecture_and_date(self, *, lecture_id: int, user_id: int, on: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, user_id, lecture_id, date, status
                FROM attendance
                WHERE lecture_id=%s AND user_id=%s AND date=%s
                """,
                (int(lecture_id), int(user_id), on),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(self, *, user_id: int, lecture_id: int, on: date, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(user_id, lecture_id, date, status)
                VALUES(%s,%s,%s,%s)
                """,
                (int(user_id), int(lecture_id), on, status.value),
            )
            return int(cur.lastrowid)

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance SET status=%s WHERE attendance_id=%s",
                (status.value, int(attendance_id)),
            )
            return cur.rowcount > 0
