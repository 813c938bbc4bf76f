"""Purehouse Posts API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under the configured prefix (default /api)
    - Global error handlers map PurehouseError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database engine and notification dispatcher created once in lifespan,
      torn down on shutdown (pending notifications drained first)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's imports small
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from purehouse.api.dependencies import init_dispatcher, close_dispatcher
from purehouse.api.error_handlers import register_error_handlers
from purehouse.api.routes import health, posts
from purehouse.config import get_settings
from purehouse.infrastructure.database import init_db, close_db
from purehouse.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.resolved_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_dispatcher(settings)
    logger.info(f"Purehouse API started, serving under {settings.api_prefix}")
    yield
    logger.info("Purehouse API shutting down")
    await close_dispatcher()
    await close_db()


app = FastAPI(
    title="Purehouse API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(posts.router, prefix=settings.api_prefix)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "purehouse.main:app", host="0.0.0.0", port=get_settings().port,  # nosec B104
    )
