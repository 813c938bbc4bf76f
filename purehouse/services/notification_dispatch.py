"""Notification Dispatch — fire-and-forget delivery of lifecycle events.

Invariants:
    - dispatch() is synchronous and returns before anything is sent
    - No sender configured → dispatch() is a silent no-op
    - Every send is bounded by timeout_seconds; a missed deadline is just
      another failure
    - Any failure is logged as a warning inside the background task and
      discarded; nothing is retried and nothing reaches the CRUD caller
    - In-flight tasks are strongly referenced until done (asyncio only keeps
      weak references to tasks)

Design Decisions:
    - asyncio task per event over FastAPI BackgroundTasks: the lifecycle
      manager is transport-agnostic, and BackgroundTasks delays the response
      in the test client
    - drain() exists for shutdown and tests; it never raises
"""

import asyncio
import logging
from typing import Protocol

from purehouse.core.notification_events import NotificationEvent

logger = logging.getLogger(__name__)


class NotificationSender(Protocol):
    """Delivers one event to the sink; raises on any failure."""
    async def send(self, event: NotificationEvent) -> None: ...
    async def aclose(self) -> None: ...


class NotificationDispatcher:
    """Schedules best-effort sends and isolates their failures."""

    def __init__(
        self, sender: NotificationSender | None, timeout_seconds: float = 5.0,
    ):
        self.sender = sender
        self.timeout_seconds = timeout_seconds
        self._pending: set[asyncio.Task] = set()

    @property
    def enabled(self) -> bool:
        return self.sender is not None

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def dispatch(self, event: NotificationEvent) -> None:
        """Schedule delivery of event and return immediately."""
        if self.sender is None:
            return
        task = asyncio.get_running_loop().create_task(self._deliver(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for every in-flight delivery to settle."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        await self.drain()
        if self.sender is not None:
            await self.sender.aclose()

    async def _deliver(self, event: NotificationEvent) -> None:
        try:
            await asyncio.wait_for(
                self.sender.send(event), timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Failed to notify worker: timed out after {self.timeout_seconds}s",
                extra={"event": event.event},
            )
        except Exception as e:
            logger.warning(
                f"Failed to notify worker: {e}",
                extra={"event": event.event},
            )
