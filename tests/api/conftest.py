"""API test fixtures — FastAPI test client over an in-memory database.

Invariants:
    - get_db overridden to use the per-test SQLite engine
    - get_dispatcher overridden with a recorder so tests can assert on events
    - db_manager patched so the health check pings the test engine

Design Decisions:
    - Lifespan is not run by ASGITransport: everything it would create is
      provided through overrides instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

from purehouse.api.dependencies import get_dispatcher
from purehouse.infrastructure.database import get_db, DatabaseSessionManager
import purehouse.infrastructure.database as db_module
from purehouse.main import app


class RecordingDispatcher:
    """Stands in for NotificationDispatcher; keeps every dispatched event."""

    def __init__(self):
        self.events = []

    def dispatch(self, event):
        self.events.append(event)


@pytest.fixture
def notifications():
    return RecordingDispatcher()


@pytest.fixture
async def client(test_engine, test_session_factory, notifications):
    """FastAPI test client with DB and dispatcher dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_dispatcher] = lambda: notifications

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_post(client):
    """Create one post through the API and return its id."""
    res = await client.post(
        "/api/posts",
        json={"title": "Hello World", "author": "Al Ice", "content": "Body text"},
    )
    assert res.status_code == 201
    return res.json()["insertedId"]
