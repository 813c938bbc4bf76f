"""Post Identity — conversion between external (string) and native (UUID) ids.

Invariants:
    - parse_post_id is the only way a caller-supplied string becomes a PostId
    - A malformed string raises InvalidIdentifierError, never ResourceNotFoundError
    - format_post_id(parse_post_id(s)) is the canonical lowercase hyphenated form
"""

from uuid import UUID

from purehouse.core.domain_types import PostId
from purehouse.core.errors import InvalidIdentifierError


def parse_post_id(raw_id: str) -> PostId:
    """Convert an external identifier to the store's native id."""
    if not isinstance(raw_id, str):
        raise InvalidIdentifierError(repr(raw_id))
    try:
        return PostId(UUID(raw_id.strip()))
    except ValueError:
        raise InvalidIdentifierError(raw_id)


def format_post_id(post_id: PostId) -> str:
    return str(post_id)
