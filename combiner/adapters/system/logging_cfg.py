# /combiner/adapters/system/logging_cfg.py
from __future__ import annotations

import json
import logging
import sys
from typing import Any

from combiner.config import settings


class JSONHandler(logging.StreamHandler):
    """One JSON object per line; fields from extra={"extra": {...}} are merged in."""

    def emit(self, record: logging.LogRecord) -> None:
        payload: dict[str, Any] = {
            "ts": self.formatter.formatTime(record) if self.formatter else record.created,
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = logging.Formatter().formatException(record.exc_info)
        try:
            self.stream.write(json.dumps(payload, default=str) + "\n")
            self.flush()
        except Exception:
            self.handleError(record)


def configure_logger(level: int | str | None = None) -> None:
    handler = JSONHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level if level is not None else settings.LOG_LEVEL)
    root.addHandler(handler)
