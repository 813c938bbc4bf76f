"""API Dependencies — builds the lifecycle manager for each request.

Invariants:
    - One NotificationDispatcher per process (created in lifespan)
    - One PostLifecycleManager per request, bound to that request's DB session
    - Without an initialized dispatcher, notifications are disabled rather than failing

Design Decisions:
    - Explicit factory functions over a DI container: tests swap them through
      app.dependency_overrides
"""

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from purehouse.config import Settings
from purehouse.infrastructure.database import get_db
from purehouse.infrastructure.post_store import SqlPostStore
from purehouse.infrastructure.worker_notifier import WorkerNotifier
from purehouse.services.notification_dispatch import NotificationDispatcher
from purehouse.services.post_lifecycle import PostLifecycleManager

logger = logging.getLogger(__name__)

# Singleton (initialized on startup)
dispatcher: NotificationDispatcher | None = None


def init_dispatcher(settings: Settings) -> NotificationDispatcher:
    global dispatcher
    sender = None
    if settings.worker_url.strip():
        sender = WorkerNotifier(
            settings.worker_url.strip(),
            timeout_seconds=settings.notifier_timeout_seconds,
        )
    else:
        logger.info("WORKER_URL not set, lifecycle notifications disabled")
    dispatcher = NotificationDispatcher(
        sender, timeout_seconds=settings.notifier_timeout_seconds,
    )
    return dispatcher


async def close_dispatcher() -> None:
    global dispatcher
    if dispatcher is not None:
        await dispatcher.aclose()
        dispatcher = None


def get_dispatcher() -> NotificationDispatcher:
    """FastAPI dependency for the notification dispatcher."""
    return dispatcher or NotificationDispatcher(None)


def get_post_lifecycle(
    db: AsyncSession = Depends(get_db),
    notifications: NotificationDispatcher = Depends(get_dispatcher),
) -> PostLifecycleManager:
    return PostLifecycleManager(SqlPostStore(db), notifications.dispatch)
