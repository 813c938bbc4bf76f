"""Health Check — pings the database.

Invariants:
    - Always answers 200; the body says whether the database answered
      ({"status": "ok"} or {"status": "error", "details": ...})
"""

import logging

from fastapi import APIRouter

from purehouse.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """Ping the database."""
    if database.db_manager is None:
        return {"status": "error", "details": "Database not initialized"}
    failure = await database.db_manager.ping()
    if failure is not None:
        return {"status": "error", "details": failure}
    return {"status": "ok"}
