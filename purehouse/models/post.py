"""Post ORM — one row per post in the flat `posts` collection.

Invariants:
    - id is a UUID primary key generated on insert, never updated
    - Optional fields (excerpt, cover_image, cover_video) are NULL when absent;
      NULL is never serialized; the record simply lacks the key
    - date is set once by the lifecycle manager at creation

Design Decisions:
    - JSON columns for media references: keeps the {url} object shape as-is
    - Generic Uuid type: native on PostgreSQL, CHAR(32) on SQLite test databases
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, DateTime, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from purehouse.db.base import Base


class Post(Base):
    """A blog-style article."""
    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(80), nullable=False)
    author: Mapped[str] = mapped_column(String(30), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    excerpt: Mapped[str | None] = mapped_column(String(250), nullable=True)
    cover_image: Mapped[dict | None] = mapped_column(
        JSON(none_as_null=True), nullable=True,
    )
    cover_video: Mapped[dict | None] = mapped_column(
        JSON(none_as_null=True), nullable=True,
    )
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
