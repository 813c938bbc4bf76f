"""Post Normalizer — tests for the create-time canonical record.

Tests cover:
    - Trimming of text fields
    - Blank/absent optional fields are absent keys (never "", {}, None)
    - Length limits measured after trimming
    - date stamped once from `now`
    - strip_patch drops identifiers, date, and unknown keys
    - strip_patch turns blank optional values into None so they are cleared
"""

from datetime import datetime, timezone

import pytest

from purehouse.core.errors import PostValidationError
from purehouse.core.normalize_post import normalize_post, strip_patch

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _payload(**overrides):
    payload = {"title": "Hello World", "author": "Al Ice", "content": "Body text"}
    payload.update(overrides)
    return payload


def test_minimal_payload_has_no_optional_keys():
    record = normalize_post(_payload(), now=NOW)
    assert record == {
        "title": "Hello World",
        "author": "Al Ice",
        "content": "Body text",
        "date": NOW,
    }


def test_text_fields_are_trimmed():
    record = normalize_post(
        _payload(title="  Hi  ", author="\tBob\n", content=" c ", excerpt="  short "),
        now=NOW,
    )
    assert record["title"] == "Hi"
    assert record["author"] == "Bob"
    assert record["content"] == "c"
    assert record["excerpt"] == "short"


def test_blank_excerpt_is_omitted():
    record = normalize_post(_payload(excerpt="   "), now=NOW)
    assert "excerpt" not in record


def test_none_excerpt_is_omitted():
    record = normalize_post(_payload(excerpt=None), now=NOW)
    assert "excerpt" not in record


def test_blank_cover_image_url_is_omitted():
    record = normalize_post(_payload(cover_image={"url": "  "}), now=NOW)
    assert "cover_image" not in record


def test_cover_image_without_url_is_omitted():
    record = normalize_post(_payload(cover_image={}), now=NOW)
    assert "cover_image" not in record


def test_cover_video_url_is_trimmed():
    record = normalize_post(
        _payload(cover_video={"url": " https://cdn.example/v.mp4 "}), now=NOW,
    )
    assert record["cover_video"] == {"url": "https://cdn.example/v.mp4"}


def test_wire_spelling_of_media_is_accepted():
    record = normalize_post(
        _payload(coverImage={"url": "https://cdn.example/a.png"}), now=NOW,
    )
    assert record["cover_image"] == {"url": "https://cdn.example/a.png"}
    assert "coverImage" not in record


def test_media_object_with_url_attribute_is_accepted():
    class _Media:
        url = " https://cdn.example/b.png "

    record = normalize_post(_payload(cover_image=_Media()), now=NOW)
    assert record["cover_image"] == {"url": "https://cdn.example/b.png"}


def test_title_length_measured_after_trimming():
    record = normalize_post(_payload(title="  " + "t" * 80 + "  "), now=NOW)
    assert len(record["title"]) == 80


def test_title_over_80_rejected():
    with pytest.raises(PostValidationError) as exc:
        normalize_post(_payload(title="t" * 81), now=NOW)
    assert exc.value.field == "title"
    assert exc.value.http_status == 400


def test_author_over_30_rejected():
    with pytest.raises(PostValidationError) as exc:
        normalize_post(_payload(author="a" * 31), now=NOW)
    assert exc.value.field == "author"


def test_blank_title_rejected():
    with pytest.raises(PostValidationError):
        normalize_post(_payload(title="   "), now=NOW)


def test_missing_author_rejected():
    payload = _payload()
    del payload["author"]
    with pytest.raises(PostValidationError):
        normalize_post(payload, now=NOW)


def test_excerpt_over_250_rejected():
    with pytest.raises(PostValidationError) as exc:
        normalize_post(_payload(excerpt="e" * 251), now=NOW)
    assert exc.value.field == "excerpt"


def test_non_string_title_rejected():
    with pytest.raises(PostValidationError):
        normalize_post(_payload(title=42), now=NOW)


def test_date_defaults_to_current_utc_instant():
    before = datetime.now(timezone.utc)
    record = normalize_post(_payload())
    after = datetime.now(timezone.utc)
    assert before <= record["date"] <= after


def test_caller_supplied_date_is_ignored():
    stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
    record = normalize_post(_payload(date=stale), now=NOW)
    assert record["date"] == NOW


def test_normalize_does_not_mutate_input():
    payload = _payload(title="  Hi  ")
    normalize_post(payload, now=NOW)
    assert payload["title"] == "  Hi  "


def test_strip_patch_drops_identifier_and_date():
    patch = strip_patch({"_id": "x", "id": "y", "date": NOW, "title": "New"})
    assert patch == {"title": "New"}


def test_strip_patch_keeps_values_as_given():
    patch = strip_patch({"title": "  padded  ", "excerpt": None})
    assert patch == {"title": "  padded  ", "excerpt": None}


def test_strip_patch_maps_wire_media_names():
    patch = strip_patch({"coverImage": {"url": "u"}, "coverVideo": None})
    assert patch == {"cover_image": {"url": "u"}, "cover_video": None}


def test_strip_patch_drops_unknown_fields():
    assert strip_patch({"views": 10}) == {}


def test_strip_patch_clears_blank_excerpt():
    assert strip_patch({"excerpt": ""}) == {"excerpt": None}
    assert strip_patch({"excerpt": "   "}) == {"excerpt": None}


def test_strip_patch_clears_media_without_usable_url():
    patch = strip_patch({"coverImage": {"url": "  "}, "coverVideo": {}})
    assert patch == {"cover_image": None, "cover_video": None}


def test_strip_patch_trims_non_blank_optionals():
    patch = strip_patch({"excerpt": " Short ", "coverImage": {"url": " img.png "}})
    assert patch == {"excerpt": "Short", "cover_image": {"url": "img.png"}}
