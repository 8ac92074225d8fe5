"""Pytest configuration and fixtures."""

import random
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport

from backend.app.main import app
from backend.app.services.idea_store import InMemoryIdeaStore, get_idea_store


class TickingClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(seconds=1)
        return now


@pytest.fixture
def clock() -> TickingClock:
    """Deterministic clock for creation timestamps."""
    return TickingClock()


@pytest.fixture
def store(clock) -> InMemoryIdeaStore:
    """Fresh, empty idea store with a seeded rating generator."""
    return InMemoryIdeaStore(rng=random.Random(42), clock=clock)


@pytest.fixture
def sample_idea() -> dict[str, str]:
    """Valid idea submission payload."""
    return {
        "name": "EcoDelivery",
        "tagline": "Green logistics",
        "description": "A service that delivers parcels by cargo bike.",
    }


@pytest.fixture(scope="function")
async def test_client(store: InMemoryIdeaStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client backed by a fresh idea store.

    The app's store dependency is overridden so each test starts empty,
    as if the process had just started.
    """
    app.dependency_overrides[get_idea_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
