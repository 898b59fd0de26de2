"""Structured Logging: JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name and message
    - Extra fields (connection_id, action, record_id, error_code) surfaced when present
    - setup_logging is idempotent: repeated calls replace, never stack, handlers

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "connection_id", "action", "record_id", "error_code", "attempt",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application."""
    handler = logging.StreamHandler()
    handler.set_name("bookshelf")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == "bookshelf":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
