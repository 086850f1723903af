from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(r: dict) -> User:
    return User(
        user_id=int(r["user_id"]),
        username=r["username"],
        full_name=r["full_name"],
        password_hash=r["password_hash"],
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, username, full_name, password_hash, is_active
                FROM users
                WHERE username=%s
                """,
                (username,),
            )
            r = fetchone(cur)
            return _to_user(r) if r else None

    def create_user(self, *, username: str, full_name: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, full_name, password_hash)
                VALUES(%s,%s,%s)
                """,
                (username, full_name, password_hash),
            )
            return int(cur.lastrowid)
