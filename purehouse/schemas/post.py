"""Post Schemas — Pydantic models with field-level validation for the posts API.

Invariants:
    - PostCreate: title 1-80, author 1-30, excerpt <= 250; all measured after
      stripping whitespace; content any string
    - PostUpdate: every field optional, values kept as given (no stripping);
      title/author/content may be omitted but never null
    - Unknown keys (including _id, id, date) are ignored, never persisted
    - Wire names are camelCase (coverImage, coverVideo); Python names snake_case

Design Decisions:
    - StringConstraints(strip_whitespace=True) so length limits apply to the
      trimmed value; the normalizer trims again for non-HTTP callers
    - serialize_post builds the response dict by hand: absent optional fields
      must be missing keys, not nulls
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator

from purehouse.core.domain_types import (
    TITLE_MAX_LENGTH, AUTHOR_MAX_LENGTH, EXCERPT_MAX_LENGTH,
)
from purehouse.core.post_identity import format_post_id
from purehouse.core.repository_protocols import PostRecord

TrimmedTitle = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH),
]
TrimmedAuthor = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=AUTHOR_MAX_LENGTH),
]
TrimmedExcerpt = Annotated[
    str, StringConstraints(strip_whitespace=True, max_length=EXCERPT_MAX_LENGTH),
]


class MediaRef(BaseModel):
    """Reference to an externally hosted image or video."""
    url: str | None = None


class PostCreate(BaseModel):
    """Post creation: required fields present and within limits."""
    model_config = ConfigDict(populate_by_name=True)

    title: TrimmedTitle
    author: TrimmedAuthor
    content: str
    excerpt: TrimmedExcerpt | None = None
    cover_image: MediaRef | None = Field(None, alias="coverImage")
    cover_video: MediaRef | None = Field(None, alias="coverVideo")


class PostUpdate(BaseModel):
    """Partial post update: any subset of the mutable fields."""
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    author: str | None = Field(None, min_length=1, max_length=AUTHOR_MAX_LENGTH)
    content: str | None = None
    excerpt: str | None = Field(None, max_length=EXCERPT_MAX_LENGTH)
    cover_image: MediaRef | None = Field(None, alias="coverImage")
    cover_video: MediaRef | None = Field(None, alias="coverVideo")

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in ("title", "author", "content"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_patch(self) -> dict:
        """Only the fields the caller actually sent, in wire spelling."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class InsertedResponse(BaseModel):
    insertedId: str


class ModifiedResponse(BaseModel):
    modifiedCount: int


class DeletedResponse(BaseModel):
    deletedCount: int


def serialize_post(record: PostRecord) -> dict:
    """Store record → JSON-ready dict with wire field names."""
    body = {
        "id": format_post_id(record["id"]),
        "title": record["title"],
        "author": record["author"],
        "content": record["content"],
    }
    if "excerpt" in record:
        body["excerpt"] = record["excerpt"]
    if "cover_image" in record:
        body["coverImage"] = record["cover_image"]
    if "cover_video" in record:
        body["coverVideo"] = record["cover_video"]
    date = record.get("date")
    body["date"] = date.isoformat() if isinstance(date, datetime) else date
    return body
