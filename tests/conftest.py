import random

import pytest

from drawbox import create_app
from drawbox.errors import OverrideUnavailable, PersistenceUnavailable
from drawbox.services.draw_service import DrawService


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"RANDOM_SEED": 1234, "SECRET_KEY": "test-secret"})
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/admin/login", json={"username": "admin", "password": "secret"})
    assert resp.status_code == 200
    token = resp.get_json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


class FakeSlot:
    """List-backed override queue."""

    def __init__(self, values=None, broken=False):
        self.values = list(values or [])
        self.broken = broken

    def take(self):
        if self.broken:
            raise OverrideUnavailable("down")
        return self.values.pop(0) if self.values else None

    def peek(self):
        if self.broken:
            raise OverrideUnavailable("down")
        return list(self.values)

    def replace(self, values):
        if self.broken:
            raise OverrideUnavailable("down")
        self.values = list(values)

    def clear(self):
        self.replace([])


class FakeStore:
    def __init__(self, entries=None, broken=False):
        self.entries = list(entries or [])
        self.broken = broken

    def append(self, entry):
        if self.broken:
            raise PersistenceUnavailable("down")
        self.entries.insert(0, entry)

    def list_recent(self, limit):
        if self.broken:
            raise PersistenceUnavailable("down")
        return self.entries[:limit]


@pytest.fixture
def slot():
    return FakeSlot()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def service(slot, store):
    return DrawService(slot, store, rng=random.Random(42))
