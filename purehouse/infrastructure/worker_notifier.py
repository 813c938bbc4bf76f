"""Worker Notifier — httpx client for the worker's POST /logs sink.

Invariants:
    - Posts exactly {level, message, metadata} as JSON to <base_url>/logs
    - Trailing slashes on base_url never produce "//logs"
    - Transport errors, timeouts, and non-2xx responses all map to
      NotificationDeliveryError (core/errors.py)
    - No retry; delivery is best-effort by contract

Design Decisions:
    - One long-lived AsyncClient per process: connection reuse across events
    - client injectable so tests can use httpx.MockTransport
"""

import logging

import httpx

from purehouse.core.errors import NotificationDeliveryError
from purehouse.core.notification_events import NotificationEvent

logger = logging.getLogger(__name__)


class WorkerNotifier:
    """Sends lifecycle events to the worker service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.logs_url = base_url.rstrip("/") + "/logs"
        self.client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def send(self, event: NotificationEvent) -> None:
        try:
            response = await self.client.post(
                self.logs_url, json=event.to_payload(),
            )
            response.raise_for_status()
        except httpx.TimeoutException:
            raise NotificationDeliveryError(
                f"no response from {self.logs_url}", "timeout",
            )
        except httpx.HTTPStatusError as e:
            raise NotificationDeliveryError(
                f"worker answered {e.response.status_code}", "status",
            )
        except httpx.HTTPError as e:
            raise NotificationDeliveryError(str(e), "connection_error")
        logger.debug(
            "Worker notified", extra={"event": event.event},
        )

    async def aclose(self) -> None:
        await self.client.aclose()
