"""Structured Logging — one JSON object per line, carrying the store/entity context of the event.

Invariants:
    - Every line has timestamp, level, logger and message
    - Only whitelisted context fields are copied from `extra`; anything else
      passed by a caller (e.g. credentials) never reaches the output
    - setup_logging is idempotent: calling it again replaces its own handler
      instead of stacking a second one

Design Decisions:
    - stdlib logging + a small formatter, no structlog: handlers already pass
      context through `extra=`, which is all the formatter needs
    - Driver and SDK loggers capped at WARNING so per-query and per-request
      chatter does not drown the handler logs
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "store_id", "user_id", "entity", "entity_id",
    "error_code", "path", "asset_ids", "attempt",
)

_NOISY_LOGGERS = ("sqlalchemy.engine", "urllib3", "cloudinary")


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key])
            for key in CONTEXT_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        # asset id lists and datetimes fall back to str()
        return json.dumps(entry, ensure_ascii=False, default=str)


class _StoreAdminHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the root handler: JSON lines in production, plain text locally."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _StoreAdminHandler)]:
        root.removeHandler(existing)

    handler = _StoreAdminHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
