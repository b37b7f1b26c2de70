from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Final, Optional

_LOGGER_NAME: Final[str] = "quality_gate"
_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class _ConsoleFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("%(levelname)-7s %(name)s: %(message)s")


def _env_truthy(name: str) -> bool:
    v = os.environ.get(name)
    if not v:
        return False
    return v.strip().lower() in {"1", "true", "yes", "on", "y"}


def _resolve_level(level: Optional[str]) -> int:
    raw = level or os.environ.get("QUALITY_GATE_LOG_LEVEL")
    if not raw:
        return logging.WARNING
    return _LEVELS.get(raw.strip().upper(), logging.WARNING)


def init_logging(level: Optional[str] = None) -> logging.Logger:
    """Initialize or refresh the package logger.

    Keeps exactly one StreamHandler, bound to the current ``sys.stderr`` so
    reports written to stdout stay clean (and pytest's capture is honoured).
    """
    logger = logging.getLogger(_LOGGER_NAME)
    lvl = _resolve_level(level)
    logger.setLevel(lvl)
    logger.propagate = _env_truthy("QUALITY_GATE_LOG_PROPAGATE")

    for h in list(logger.handlers):
        if isinstance(h, logging.StreamHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(_JsonFormatter() if _env_truthy("QUALITY_GATE_LOG_JSON") else _ConsoleFormatter())
    handler.setLevel(lvl)
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
