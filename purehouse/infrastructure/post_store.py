"""SQL Post Store — PostStore protocol implemented over the `posts` table.

Invariants:
    - Records returned with internal field names and absent optional fields omitted
    - update_by_id writes only the fields whose value actually differs, so
      matched_count=1/modified_count=0 means "exists, nothing changed"
    - Concurrent updates touching different fields never clobber each other
      (field-level last-writer-wins)
    - Each write commits its own transaction; SQLAlchemy failures roll back
      and surface as DatabaseError

Design Decisions:
    - Session injected per request (get_db); engine/pool shared process-wide
    - find_all ordered by (date, id): SQL leaves unordered results undefined
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from purehouse.core.domain_types import PostId
from purehouse.core.repository_protocols import PostRecord, UpdateOutcome
from purehouse.infrastructure.database import map_database_error
from purehouse.models.post import Post

logger = logging.getLogger(__name__)

_OPTIONAL_COLUMNS = ("excerpt", "cover_image", "cover_video")


def row_to_record(row: Post) -> PostRecord:
    """ORM row → plain record, dropping NULL optional fields."""
    record: PostRecord = {
        "id": PostId(row.id),
        "title": row.title,
        "author": row.author,
        "content": row.content,
    }
    for column in _OPTIONAL_COLUMNS:
        value = getattr(row, column)
        if value is not None:
            record[column] = value
    record["date"] = row.date
    return record


class SqlPostStore:
    """Post persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, record: PostRecord) -> PostId:
        row = Post(**{k: v for k, v in record.items() if k != "id"})
        async with self._write("insert"):
            self.db.add(row)
            await self.db.flush()
            post_id = PostId(row.id)
        return post_id

    async def find_all(self) -> list[PostRecord]:
        async with self._guard():
            result = await self.db.execute(
                select(Post).order_by(Post.date, Post.id),
            )
            return [row_to_record(row) for row in result.scalars().all()]

    async def find_by_id(self, post_id: PostId) -> PostRecord | None:
        async with self._guard():
            row = await self.db.get(Post, post_id)
            return row_to_record(row) if row is not None else None

    async def update_by_id(
        self, post_id: PostId, patch: dict[str, Any],
    ) -> UpdateOutcome:
        async with self._write("update"):
            result = await self.db.execute(
                select(Post).where(Post.id == post_id),
            )
            row = result.scalar_one_or_none()
            if row is None:
                return UpdateOutcome(matched_count=0, modified_count=0)

            changed = {
                key: value for key, value in patch.items()
                if getattr(row, key) != value
            }
            if not changed:
                return UpdateOutcome(matched_count=1, modified_count=0)

            outcome = await self.db.execute(
                update(Post).where(Post.id == post_id).values(**changed),
            )
            # rowcount 0 here means a concurrent delete won the race
            matched = outcome.rowcount
        logger.debug(
            f"Updated fields {sorted(changed)}", extra={"post_id": str(post_id)},
        )
        return UpdateOutcome(matched_count=matched, modified_count=matched)

    async def delete_by_id(self, post_id: PostId) -> int:
        async with self._write("delete"):
            result = await self.db.execute(
                delete(Post).where(Post.id == post_id),
            )
            deleted = result.rowcount
        return deleted

    @asynccontextmanager
    async def _guard(self):
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise map_database_error(e)

    @asynccontextmanager
    async def _write(self, operation: str):
        """Run a write and commit it; roll back and map errors otherwise."""
        async with self._guard():
            yield
            await self.db.commit()
