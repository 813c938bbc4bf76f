"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Post is the only persisted entity; no secondary tables

Design Decisions:
    - Models imported here so Base.metadata is complete before create_all/autogenerate
"""

from purehouse.models.post import Post  # noqa: F401
