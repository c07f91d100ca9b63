"""Tests for the SQL-backed collaborators."""

import pytest
from sqlalchemy.orm import sessionmaker

from drawbox.db import create_app_engine
from drawbox.errors import OverrideUnavailable, PersistenceUnavailable, UnauthorizedError
from drawbox.models.base import Base
from drawbox.repositories.admin_session_repository import AdminSessionRepository
from drawbox.repositories.history_repository import HistoryRepository
from drawbox.repositories.override_repository import OverrideRepository
from drawbox.services.admin_service import AdminService
from drawbox.services.history_ledger import Actor, HistoryEntry


@pytest.fixture
def engine():
    engine = create_app_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def test_override_queue_fifo(session_factory):
    repo = OverrideRepository(session_factory)
    repo.replace([3, 1, 2])

    assert repo.peek() == [3, 1, 2]
    assert repo.take() == 3
    assert repo.take() == 1
    assert repo.take() == 2
    assert repo.take() is None


def test_override_replace_discards_previous(session_factory):
    repo = OverrideRepository(session_factory)
    repo.replace([1, 2])
    repo.replace([9])
    assert repo.peek() == [9]
    repo.clear()
    assert repo.peek() == []


def test_override_failure_is_wrapped(engine, session_factory):
    repo = OverrideRepository(session_factory)
    Base.metadata.drop_all(bind=engine)

    with pytest.raises(OverrideUnavailable):
        repo.take()


def test_history_newest_first_and_limited(session_factory):
    repo = HistoryRepository(session_factory)
    for i in range(5):
        repo.append(HistoryEntry(value=str(i), actor=Actor.USER, timestamp=f"t{i}"))

    recent = repo.list_recent(3)
    assert [e.value for e in recent] == ["4", "3", "2"]
    assert recent[0].actor is Actor.USER


def test_history_failure_is_wrapped(engine, session_factory):
    repo = HistoryRepository(session_factory)
    Base.metadata.drop_all(bind=engine)

    with pytest.raises(PersistenceUnavailable):
        repo.list_recent(10)


class Clock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def test_admin_login_and_expiry(session_factory):
    clock = Clock()
    repo = AdminSessionRepository(session_factory)
    service = AdminService(repo, "admin", "pw", ttl_seconds=60, clock=clock)

    token = service.login("admin", "pw")
    assert service.is_admin(token)

    clock.now += 61
    assert service.is_admin(token) is False
    # expired tokens are removed, not just ignored
    assert repo.get(token) is None


def test_admin_rejects_bad_credentials(session_factory):
    service = AdminService(AdminSessionRepository(session_factory), "admin", "pw")
    with pytest.raises(UnauthorizedError):
        service.login("admin", "nope")
    with pytest.raises(UnauthorizedError):
        service.require_admin("made-up")


def test_admin_login_disabled_without_password(session_factory):
    service = AdminService(AdminSessionRepository(session_factory), "admin", "")
    with pytest.raises(UnauthorizedError):
        service.login("admin", "")


def test_logout_revokes(session_factory):
    service = AdminService(AdminSessionRepository(session_factory), "admin", "pw")
    token = service.login("admin", "pw")
    service.logout(token)
    assert service.is_admin(token) is False


def test_admin_check_degrades_when_store_down(engine, session_factory):
    service = AdminService(AdminSessionRepository(session_factory), "admin", "pw")
    token = service.login("admin", "pw")
    Base.metadata.drop_all(bind=engine)
    assert service.is_admin(token) is False
