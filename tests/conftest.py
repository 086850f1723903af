from __future__ import annotations

from datetime import datetime

import pytest

from attendance_tracker.container import build_services
from attendance_tracker.main import create_app
from fakes import InMemoryAttendance, InMemoryLectures, InMemoryUsers


@pytest.fixture
def fixed_now() -> datetime:
    # Monday 2026-02-02 09:30 (day_of_week 1 with Sunday = 0)
    return datetime(2026, 2, 2, 9, 30)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def lectures_repo() -> InMemoryLectures:
    return InMemoryLectures()


@pytest.fixture
def attendance_repo(lectures_repo) -> InMemoryAttendance:
    return InMemoryAttendance(lectures_repo)


@pytest.fixture
def container(users_repo, lectures_repo, attendance_repo):
    return build_services(users_repo=users_repo, lectures_repo=lectures_repo, attendance_repo=attendance_repo)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def student(users_repo):
    return users_repo.add("alice", "secret123", full_name="Alice")


@pytest.fixture
def signed_in_client(client, student):
    with client.session_transaction() as sess:
        sess["user_id"] = student.user_id
        sess["name"] = student.full_name
    return client
