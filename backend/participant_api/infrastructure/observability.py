"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Only the extras this service logs are surfaced: email, operation and
      error_code from the service layer, path and method from the authorization gate
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: a second call replaces, never duplicates, its handler
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "participant_api"

_EXTRA_KEYS = ("email", "operation", "error_code", "path", "method")


class JSONFormatter(logging.Formatter):
    """One JSON object per line; known extras flattened into the top level."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def _build_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the service's root handler, replacing one from an earlier call."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(_build_handler(fmt))
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
