"""Notification Events — lifecycle event payloads sent to the worker sink.

Invariants:
    - Every event carries level, message, and metadata with `event` and `id`
    - id is always the external (string) form of the post identifier
    - Builders are pure: they never touch the network

Design Decisions:
    - Frozen dataclass: events are values, shared safely with background tasks
"""

from dataclasses import dataclass, field
from typing import Any

from purehouse.core.domain_types import NotificationLevel, PostEvent


@dataclass(frozen=True)
class NotificationEvent:
    """One message for the worker's POST /logs endpoint."""
    level: NotificationLevel
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def event(self) -> str | None:
        return self.metadata.get("event")

    def to_payload(self) -> dict[str, Any]:
        return {
            "level": self.level.value,
            "message": self.message,
            "metadata": self.metadata,
        }


def post_created_event(post_id: str, title: str) -> NotificationEvent:
    return NotificationEvent(
        level=NotificationLevel.SUCCESS,
        message="Post created successfully",
        metadata={"event": PostEvent.CREATED.value, "id": post_id, "title": title},
    )


def post_updated_event(post_id: str, changes: dict[str, Any]) -> NotificationEvent:
    return NotificationEvent(
        level=NotificationLevel.INFO,
        message="Post updated successfully",
        metadata={"event": PostEvent.UPDATED.value, "id": post_id, "changes": changes},
    )


def post_deleted_event(post_id: str) -> NotificationEvent:
    return NotificationEvent(
        level=NotificationLevel.WARN,
        message="Post deleted",
        metadata={"event": PostEvent.DELETED.value, "id": post_id},
    )
