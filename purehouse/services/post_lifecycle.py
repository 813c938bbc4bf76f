"""Post Lifecycle Manager — create/read/update/delete orchestration for posts.

Invariants:
    - Identifier strings are parsed BEFORE any store call (malformed → 400, never 404)
    - update() reports NotFound from the matched count, not the modified count
    - remove() reports NotFound when nothing was deleted
    - Notifications are scheduled after the store call succeeds and never
      awaited; a failing notify function cannot change the CRUD result
    - Store failures propagate unchanged (no retry, no translation)

Design Decisions:
    - Store and notify passed explicitly to the constructor: no container, no globals
    - Follows impureim sandwich: pure parse/normalize → awaited store IO → scheduled notify
"""

import logging
from collections.abc import Mapping
from typing import Any

from purehouse.core.domain_types import PostId
from purehouse.core.errors import ResourceNotFoundError
from purehouse.core.normalize_post import normalize_post, strip_patch
from purehouse.core.notification_events import (
    NotificationEvent,
    post_created_event,
    post_deleted_event,
    post_updated_event,
)
from purehouse.core.post_identity import format_post_id, parse_post_id
from purehouse.core.repository_protocols import NotifyFn, PostRecord, PostStore

logger = logging.getLogger(__name__)


class PostLifecycleManager:
    """Owns the post state machine: absent → active → (updated)* → absent."""

    def __init__(self, store: PostStore, notify: NotifyFn):
        self.store = store
        self.notify = notify

    async def create(self, payload: Mapping[str, Any]) -> PostId:
        """Normalize and insert a new post. Returns the store-assigned id."""
        record = normalize_post(payload)
        post_id = await self.store.insert(record)
        logger.info("Post created", extra={"post_id": format_post_id(post_id)})
        self._notify_safely(
            post_created_event(format_post_id(post_id), record["title"]),
        )
        return post_id

    async def find_all(self) -> list[PostRecord]:
        """All posts, in whatever order the store returns them."""
        return await self.store.find_all()

    async def find_one(self, external_id: str) -> PostRecord:
        post_id = parse_post_id(external_id)
        record = await self.store.find_by_id(post_id)
        if record is None:
            raise ResourceNotFoundError("Post", format_post_id(post_id))
        return record

    async def update(self, external_id: str, patch: dict[str, Any]) -> int:
        """Partial update. Returns the modified count (0 when nothing changed)."""
        post_id = parse_post_id(external_id)
        outcome = await self.store.update_by_id(post_id, strip_patch(patch))
        if outcome.matched_count == 0:
            raise ResourceNotFoundError("Post", format_post_id(post_id))
        self._notify_safely(
            post_updated_event(format_post_id(post_id), dict(patch)),
        )
        return outcome.modified_count

    async def remove(self, external_id: str) -> int:
        post_id = parse_post_id(external_id)
        deleted = await self.store.delete_by_id(post_id)
        if deleted == 0:
            raise ResourceNotFoundError("Post", format_post_id(post_id))
        logger.info("Post deleted", extra={"post_id": format_post_id(post_id)})
        self._notify_safely(post_deleted_event(format_post_id(post_id)))
        return deleted

    def _notify_safely(self, event: NotificationEvent) -> None:
        try:
            self.notify(event)
        except Exception as e:
            logger.warning(
                f"Failed to schedule notification: {e}",
                extra={"event": event.event},
            )
