"""Logging setup.

The library itself only creates module loggers (`logging.getLogger(__name__)`)
and never installs handlers; `setup_logging` is for applications such as the
CLI.

- All records include timestamp, level, logger name and message.
- Request extras (`path`, `status_code`, `error_code`) are surfaced when present.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = ("path", "status_code", "error_code", "subscription")


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Attach a stream handler to the root logger and return it."""

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
