"""
Shared pytest fixtures: in-memory gateway doubles and an app wired to them.
"""
from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from portfolio_backend import create_app
from portfolio_backend.config import Settings
from portfolio_backend.errors import DeliveryError, StorageError
from portfolio_backend.interfaces.notifier import INotifier
from portfolio_backend.interfaces.repository import ISubmissionRepository


class FakeRepository(ISubmissionRepository):
    def __init__(self):
        self.rows = []
        self.fail = False
        self.fail_init = False
        self.init_calls = 0
        self._clock = datetime(2024, 1, 1, 12, 0, 0)

    async def init_db(self):
        self.init_calls += 1
        if self.fail_init:
            raise StorageError("connection refused")

    async def insert(self, name, email, about, prompt):
        if self.fail:
            raise StorageError("connection refused")
        self._clock += timedelta(minutes=1)
        row = SimpleNamespace(
            id=len(self.rows) + 1,
            name=name,
            email=email,
            about=about,
            prompt=prompt,
            submission_date=self._clock,
        )
        self.rows.append(row)
        return row.id

    async def list_all(self):
        if self.fail:
            raise StorageError("connection refused")
        return sorted(self.rows, key=lambda row: row.submission_date, reverse=True)


class FakeNotifier(INotifier):
    def __init__(self):
        self.sent = []
        self.fail = False

    async def notify(self, name, email, about, prompt):
        if self.fail:
            raise DeliveryError("535 authentication failed")
        self.sent.append({"name": name, "email": email, "about": about, "prompt": prompt})
        return f"<{len(self.sent)}@example.com>"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        email_user="me@example.com",
        email_receiver="inbox@example.com",
        frontend_dir=tmp_path,
    )


@pytest.fixture
def repository():
    return FakeRepository()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def app(settings, repository, notifier):
    return create_app(settings, repository=repository, notifier=notifier)


@pytest.fixture
def client(app):
    """Client without lifespan; the gateways are already on app.state."""
    return TestClient(app)
