"""Structured Logging — JSON formatter and setup for applications embedding SetKit.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operation, set_size, group_count, error_code) surfaced when present
    - JSON format by default, human-readable when log_format is "text"
    - Library modules never call setup_logging themselves; the host application does

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging_from_settings reads Settings so SETKIT_LOG_* env vars take effect
"""

import json
import logging
from datetime import datetime, timezone

from setkit.config import Settings, get_settings

_EXTRA_FIELDS = ("operation", "set_size", "group_count", "error_code")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure the root logger and return the handler that was installed."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Handler:
    """setup_logging driven by Settings (get_settings() when none is given)."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
