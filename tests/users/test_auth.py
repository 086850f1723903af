from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from attendance_tracker.core.exceptions import AuthenticationError, ValidationError
from attendance_tracker.users.service import AuthService, UserService


def test_auth_wrong_password_raises(users_repo, student):
    with pytest.raises(AuthenticationError):
        AuthService(users_repo).authenticate("alice", "wrong")


def test_auth_unknown_user_raises(users_repo):
    with pytest.raises(AuthenticationError):
        AuthService(users_repo).authenticate("nobody", "secret123")


def test_auth_returns_session_user(users_repo, student):
    s_user = AuthService(users_repo).authenticate("alice", "secret123")

    assert s_user.user_id == student.user_id
    assert s_user.full_name == "Alice"


def test_register_hashes_password(users_repo):
    user_id = UserService(users_repo).register(username="bob", full_name="Bob", password="hunter22")

    user = users_repo.get_by_username("bob")
    assert user.user_id == user_id
    assert user.password_hash != "hunter22"
    assert check_password_hash(user.password_hash, "hunter22")


@pytest.mark.parametrize(
    "username,full_name,password",
    [("", "Bob", "hunter22"), ("bob", " ", "hunter22"), ("bob", "Bob", "short")],
)
def test_register_validation(users_repo, username, full_name, password):
    with pytest.raises(ValidationError):
        UserService(users_repo).register(username=username, full_name=full_name, password=password)


def test_register_rejects_duplicate_username(users_repo, student):
    with pytest.raises(ValidationError):
        UserService(users_repo).register(username="alice", full_name="Other", password="secret123")


def test_login_logout_flow(client, student):
    resp = client.post("/login", data={"username": "alice", "password": "secret123"})
    assert resp.status_code == 302

    with client.session_transaction() as sess:
        assert sess["user_id"] == student.user_id

    client.get("/logout")
    with client.session_transaction() as sess:
        assert "user_id" not in sess


def test_login_failure_flashes_message(client, student):
    resp = client.post("/login", data={"username": "alice", "password": "nope"}, follow_redirects=True)

    assert "Invalid username or password" in resp.get_data(as_text=True)


def test_register_view_then_login(client, users_repo):
    resp = client.post("/register", data={"username": "carol", "full_name": "Carol", "password": "pa55word"})
    assert resp.status_code == 302

    resp = client.post("/login", data={"username": "carol", "password": "pa55word"})
    assert resp.status_code == 302
    assert users_repo.get_by_username("carol") is not None
