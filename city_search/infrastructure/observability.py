"""Structured Logging - JSON formatter and setup for the City Search service.

Invariants:
    - Every log line has timestamp, level, logger name and message
    - Search context extras (browser_id, query, page, lifecycle, error_code,
      record_count) are surfaced when present on the record
    - setup_logging() is idempotent: calling it again replaces its own handler
    - httpx/httpcore request logs stay at WARNING unless the app runs at DEBUG

Design Decisions:
    - JSONFormatter on stdlib logging: one line per event, no extra dependency
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

SEARCH_CONTEXT_KEYS = (
    "browser_id", "query", "page", "lifecycle", "error_code",
    "record_count", "status_code", "path",
)

_NOISY_LOGGERS = ("httpx", "httpcore")
_HANDLER_NAME = "city_search"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines with search context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(_search_context(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines; search context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _search_context(record)
        if context:
            line += " " + " ".join(f"{k}={v!r}" for k, v in context.items())
        return line


def _search_context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in SEARCH_CONTEXT_KEYS
        if record.__dict__.get(key) is not None
    }


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure root logging for the application."""
    root_level = getattr(logging, level.upper(), logging.INFO)
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(root_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(
            root_level if root_level <= logging.DEBUG else logging.WARNING,
        )
