from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from guestbook.main import create_app
from guestbook.storage import MessageStore


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FrozenClock(datetime(2026, 10, 18, 12, 0, 0, 123000, tzinfo=timezone.utc))


@pytest.fixture
def store():
    return MessageStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client
