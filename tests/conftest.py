"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test that asks for a database gets a fresh in-memory SQLite one
    - Notifications are disabled by default (no WORKER_URL)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for the
      posts table (no PostgreSQL-specific features used)
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

# Ensure tests never touch a real database or worker
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ["WORKER_URL"] = ""

from purehouse.db.base import Base  # noqa: E402
import purehouse.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
