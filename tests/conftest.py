from datetime import date

import pytest

from mediahive import Admin, FixedClock, LibrarySystem

START = date(2024, 3, 1)


@pytest.fixture
def clock():
    return FixedClock(START)


@pytest.fixture
def system(clock):
    return LibrarySystem(clock=clock)


@pytest.fixture
def user(system):
    return system.register_user("Alice Reader", "alice@example.com")


@pytest.fixture
def book(system):
    return system.add_book("Clean Code", "Robert C. Martin", "ISBN-100")


@pytest.fixture
def cd(system):
    return system.add_cd("Greatest Hits", "Michael Jackson")


@pytest.fixture
def admin_session(system):
    system.admins.add(Admin(admin_id=system.admins.next_id(), username="admin", password="admin"))
    session = system.new_session()
    assert session.login("admin", "admin")
    return session
