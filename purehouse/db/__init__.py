"""Database Infrastructure — SQLAlchemy Base for the posts table.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite in tests
"""
