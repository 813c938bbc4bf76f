"""Boundary Protocols — contracts between the post core and its shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Store and notifier accessed through Protocol types / plain callables
    - Implementations provided by the shell via explicit constructor arguments

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in the store Protocol: implementations do IO; the notifier dispatch
      function is deliberately synchronous; it schedules, it never waits
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from purehouse.core.domain_types import PostId
from purehouse.core.notification_events import NotificationEvent

# Record shape returned by the store: internal field names, `id` as PostId,
# absent optional fields omitted.
PostRecord = dict[str, Any]

NotifyFn = Callable[[NotificationEvent], None]


@dataclass(frozen=True)
class UpdateOutcome:
    """Result of a partial update. matched=0 means no such record."""
    matched_count: int
    modified_count: int


class PostStore(Protocol):
    """Contract for post persistence: implemented by infrastructure/post_store.py."""
    async def insert(self, record: PostRecord) -> PostId: ...
    async def find_all(self) -> list[PostRecord]: ...
    async def find_by_id(self, post_id: PostId) -> PostRecord | None: ...
    async def update_by_id(
        self, post_id: PostId, patch: dict[str, Any],
    ) -> UpdateOutcome: ...
    async def delete_by_id(self, post_id: PostId) -> int: ...
