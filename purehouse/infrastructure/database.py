"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only applied to server databases; SQLite uses its own pool class
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from purehouse.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def map_database_error(e: SQLAlchemyError) -> DatabaseError:
    """Translate a SQLAlchemy exception into the API's DatabaseError."""
    if isinstance(e, IntegrityError):
        logger.error(f"DB integrity error: {e}")
        return DatabaseError("Integrity constraint violated", "commit")
    if isinstance(e, OperationalError):
        logger.error(f"DB operational error: {e}")
        return DatabaseError("Connection or operational error", "execute")
    if isinstance(e, DBAPIError):
        logger.error(f"DB driver error: {e}")
        return DatabaseError("Database driver error", "query")
    logger.error(f"SQLAlchemy error: {e}")
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise map_database_error(e)
        finally:
            await session.close()

    async def ping(self) -> str | None:
        """Ping the database. Returns None when healthy, else the failure reason."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return None
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return str(e)

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
