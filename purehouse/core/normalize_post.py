"""Post Normalizer — untrusted creation payload → canonical record.

Invariants:
    - title/author/content/excerpt are trimmed
    - Optional fields are either absent from the output or hold a non-blank
      trimmed value; never "", never {}, never None
    - date is stamped here, once; callers cannot supply it
    - Pure: no IO, output depends only on the payload and `now`

Design Decisions:
    - Length rules re-checked after trimming so direct callers (scripts, tests)
      get the same guarantees as the HTTP schema
    - Media keys accepted in both wire (coverImage) and internal (cover_image)
      spelling; output always uses the internal spelling
    - Updates only get their optional fields cleaned (see strip_patch)
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from purehouse.core.domain_types import (
    TITLE_MAX_LENGTH, AUTHOR_MAX_LENGTH, EXCERPT_MAX_LENGTH,
)
from purehouse.core.errors import PostValidationError

MEDIA_FIELDS = {
    "cover_image": "coverImage",
    "cover_video": "coverVideo",
}
MUTABLE_FIELDS = (
    "title", "author", "content", "excerpt", "cover_image", "cover_video",
)
IMMUTABLE_FIELDS = ("id", "_id", "date")


def normalize_post(
    payload: Mapping[str, Any], now: datetime | None = None,
) -> dict[str, Any]:
    """Build the canonical record stored on create."""
    record: dict[str, Any] = {
        "title": _required_text(payload, "title", TITLE_MAX_LENGTH),
        "author": _required_text(payload, "author", AUTHOR_MAX_LENGTH),
        "content": _trimmed(payload.get("content"), "content"),
    }

    excerpt = _trimmed(payload.get("excerpt"), "excerpt")
    if excerpt:
        if len(excerpt) > EXCERPT_MAX_LENGTH:
            raise PostValidationError(
                f"excerpt must be at most {EXCERPT_MAX_LENGTH} characters",
                "excerpt",
            )
        record["excerpt"] = excerpt

    for field_name, wire_name in MEDIA_FIELDS.items():
        media = payload.get(field_name, payload.get(wire_name))
        url = _media_url(media, field_name)
        if url:
            record[field_name] = {"url": url}

    record["date"] = now or datetime.now(timezone.utc)
    return record


def strip_patch(patch: Mapping[str, Any]) -> dict[str, Any]:
    """Reduce an update patch to the mutable fields, accepting wire spellings.

    Identifier fields and date are dropped. Optional values are trimmed like
    on create; a blank excerpt or a media value without a usable url becomes
    None, which clears the stored field. title/author/content are kept as given.
    """
    cleaned: dict[str, Any] = {}
    for key, value in patch.items():
        if key in IMMUTABLE_FIELDS:
            continue
        for field_name, wire_name in MEDIA_FIELDS.items():
            if key == wire_name:
                key = field_name
        if key not in MUTABLE_FIELDS:
            continue
        if key == "excerpt":
            value = _trimmed(value, "excerpt") or None
        elif key in MEDIA_FIELDS:
            url = _media_url(value, key)
            value = {"url": url} if url else None
        cleaned[key] = value
    return cleaned


def _required_text(
    payload: Mapping[str, Any], field_name: str, max_length: int,
) -> str:
    value = _trimmed(payload.get(field_name), field_name)
    if not value:
        raise PostValidationError(f"{field_name} is required", field_name)
    if len(value) > max_length:
        raise PostValidationError(
            f"{field_name} must be at most {max_length} characters",
            field_name,
        )
    return value


def _trimmed(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PostValidationError(f"{field_name} must be a string", field_name)
    return value.strip()


def _media_url(media: Any, field_name: str) -> str:
    if media is None:
        return ""
    if isinstance(media, Mapping):
        return _trimmed(media.get("url"), f"{field_name}.url")
    # pydantic MediaRef and similar objects
    return _trimmed(getattr(media, "url", None), f"{field_name}.url")
