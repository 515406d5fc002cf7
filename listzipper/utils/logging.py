from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO


_RESERVED = {
    "args", "msg", "levelname", "levelno", "pathname", "filename", "module",
    "exc_info", "exc_text", "stack_info", "lineno", "funcName", "created",
    "msecs", "relativeCreated", "thread", "threadName", "processName", "process",
    "name", "taskName", "message", "asctime",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Fields passed through ``extra=`` (``path``, ``transforms``, ``host``...) are
    grouped under ``context`` so they never collide with the fixed keys.
    """

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        context = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)

    # Dash/Werkzeug request logs
    for name in ("werkzeug", "dash"):
        noisy = logging.getLogger(name)
        noisy.handlers.clear()
        noisy.propagate = False
        noisy.setLevel(logging.CRITICAL)
