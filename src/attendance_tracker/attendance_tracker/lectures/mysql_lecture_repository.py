from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import format_hhmm
from ..core.enums import LectureType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Lecture
from .repository import LectureRepository


def _to_lecture(r: dict) -> Lecture:
    return Lecture(
        lecture_id=int(r["lecture_id"]),
        user_id=int(r["user_id"]),
        subject=r["subject"],
        type=LectureType(r["type"]),
        day_of_week=int(r["day_of_week"]),
        start_time=format_hhmm(r["start_time"]),
        end_time=format_hhmm(r["end_time"]),
    )


class MySQLLectureRepository(LectureRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: int) -> Sequence[Lecture]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT lecture_id, user_id, subject, type, day_of_week, start_time, end_time
                FROM lectures
                WHERE user_id=%s
                ORDER BY day_of_week ASC, start_time ASC, lecture_id ASC
                """,
                (int(user_id),),
            )
            return [_to_lecture(r) for r in fetchall(cur)]

    def get_by_id(self, lecture_id: int) -> Optional[Lecture]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT lecture_id, user_id, subject, type, day_of_week, start_time, end_time
                FROM lectures
                WHERE lecture_id=%s
                """,
                (int(lecture_id),),
            )
            r = fetchone(cur)
            return _to_lecture(r) if r else None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO lectures(user_id, subject, type, day_of_week, start_time, end_time)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), subject, type.value, int(day_of_week), start_time, end_time),
            )
            return int(cur.lastrowid)
