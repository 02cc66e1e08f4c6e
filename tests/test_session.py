import pytest

from mediahive import Admin, AdminRepo, AdminSession, NotAuthorizedError


@pytest.fixture
def admins():
    repo = AdminRepo()
    repo.add(Admin(admin_id=repo.next_id(), username="admin", password="secret"))
    return repo


def test_login_and_logout(admins):
    session = AdminSession(admins)
    assert not session.is_logged_in
    assert session.login("admin", "secret")
    assert session.require_admin().username == "admin"
    session.logout()
    assert not session.is_logged_in
    with pytest.raises(NotAuthorizedError, match="Admin required"):
        session.require_admin()


@pytest.mark.parametrize("username,password", [("admin", "wrong"), ("nobody", "secret")])
def test_bad_credentials(admins, username, password):
    session = AdminSession(admins)
    assert session.login(username, password) is False
    assert session.current_admin is None


def test_sessions_are_independent(admins):
    first, second = AdminSession(admins), AdminSession(admins)
    first.login("admin", "secret")
    assert not second.is_logged_in
