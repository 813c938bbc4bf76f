"""Notification Events — payload shape sent to the worker sink."""

from purehouse.core.domain_types import NotificationLevel, PostEvent
from purehouse.core.notification_events import (
    post_created_event, post_deleted_event, post_updated_event,
)


def test_created_event_carries_id_and_title():
    event = post_created_event("abc", "Hello")
    assert event.level == NotificationLevel.SUCCESS
    assert event.metadata == {"event": "post.created", "id": "abc", "title": "Hello"}


def test_updated_event_carries_raw_changes():
    changes = {"title": "New", "_id": "ignored-by-store"}
    event = post_updated_event("abc", changes)
    assert event.level == NotificationLevel.INFO
    assert event.metadata["event"] == PostEvent.UPDATED.value
    assert event.metadata["changes"] == changes


def test_deleted_event_is_a_warning():
    event = post_deleted_event("abc")
    assert event.level == NotificationLevel.WARN
    assert event.event == "post.deleted"


def test_payload_serializes_level_as_string():
    payload = post_deleted_event("abc").to_payload()
    assert payload == {
        "level": "WARN",
        "message": "Post deleted",
        "metadata": {"event": "post.deleted", "id": "abc"},
    }
