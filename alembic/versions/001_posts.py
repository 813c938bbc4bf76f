"""Posts table — the single flat collection of post records.

Revision ID: 001_posts
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_posts"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(80), nullable=False),
        sa.Column("author", sa.String(30), nullable=False),
        sa.Column("content", sa.Text, nullable=False, server_default=""),
        sa.Column("excerpt", sa.String(250), nullable=True),
        sa.Column("cover_image", sa.JSON, nullable=True),
        sa.Column("cover_video", sa.JSON, nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("posts")
