"""Structured Logging — JSON lines with request correlation for the Tracker API.

Invariants:
    - Every record carries timestamp, level, logger, message and, inside a
      request, the request_id bound by RequestIdMiddleware
    - Entity extras (entity_type, entity_key, field) are emitted only when set,
      so a failed reference check logs which field pointed where
    - setup_logging is idempotent: calling it twice never duplicates output

Design Decisions:
    - request_id lives in a ContextVar: survives awaits, isolated per request task
    - SQLAlchemy engine logger pinned to WARNING unless database_echo is on
"""

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

_EXTRA_KEYS = (
    "entity_type", "entity_key", "field", "error_code", "path", "operation",
)
_HANDLER_NAME = "tracker"


class RequestIdFilter(logging.Filter):
    """Stamp the current request id onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            log["request_id"] = request_id
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(
    level: str = "INFO", fmt: str = "json", database_echo: bool = False,
) -> logging.Handler:
    """Install the tracker handler on the root logger (replacing a previous one)."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.addFilter(RequestIdFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(request_id)s] - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if database_echo else logging.WARNING,
    )
    return handler
