"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PostId wraps UUID; never pass a bare string id into the store layer
    - Event tags and notification levels encoded as Enums; no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (worker payload is JSON)
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", UUID)


# ─── Field Limits ────────────────────────────────────────────────

TITLE_MAX_LENGTH = 80
AUTHOR_MAX_LENGTH = 30
EXCERPT_MAX_LENGTH = 250


# ─── Enums ───────────────────────────────────────────────────────

class PostEvent(str, Enum):
    """Lifecycle event tags carried in notification metadata."""
    CREATED = "post.created"
    UPDATED = "post.updated"
    DELETED = "post.deleted"


class NotificationLevel(str, Enum):
    """Severity levels understood by the worker sink."""
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARN = "WARN"
