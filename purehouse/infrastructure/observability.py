"""Structured Logging — JSON log lines for the posts API.

Invariants:
    - Every line has timestamp, level, logger and message
    - Post context extras (post_id, event, error_code, method, path) are
      surfaced when set; UUIDs and other non-JSON values are stringified
    - setup_logging is idempotent: calling it again replaces its own
      handler instead of stacking a second one
    - Driver chatter (httpx, sqlalchemy.engine) stays at WARNING unless
      the app itself runs at DEBUG

Design Decisions:
    - Stdlib logging with a small formatter; no extra logging dependency
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

POST_CONTEXT_FIELDS = ("post_id", "event", "error_code", "method", "path")
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in POST_CONTEXT_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _PurehouseHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure the root logger for the application."""
    handler = _PurehouseHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if isinstance(existing, _PurehouseHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)

    root_level = getattr(logging, level.upper(), logging.INFO)
    logging.root.setLevel(root_level)
    driver_level = (
        root_level if root_level <= logging.DEBUG
        else max(root_level, logging.WARNING)
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(driver_level)
