"""Per-invocation JSON logging for the pixie command line."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .paths import app_root


_LOGGER_NAME = "pixie"
_OWNED = "_pixie_owned"
# Fields callers may attach through ``extra=`` that end up in the JSON line.
_FIELDS = ("event", "run_id", "word_len", "size", "color", "output", "destination")


def log_dir() -> Path:
    path = app_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in _FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class _RunIdFilter(logging.Filter):
    def __init__(self, run_id: str) -> None:
        super().__init__()
        self.run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self.run_id
        return True


def _own(handler: logging.Handler, run_id: str) -> logging.Handler:
    setattr(handler, _OWNED, True)
    handler.addFilter(_RunIdFilter(run_id))
    return handler


def owned_handlers(logger: logging.Logger | None = None) -> list[logging.Handler]:
    logger = logger or logging.getLogger(_LOGGER_NAME)
    return [h for h in logger.handlers if getattr(h, _OWNED, False)]


def _file_handler(keep_files: int) -> logging.Handler | None:
    try:
        path = log_dir() / "pixie.log"
        handler = logging.handlers.TimedRotatingFileHandler(
            filename=str(path),
            when="midnight",
            backupCount=max(2, keep_files),
            encoding="utf-8",
        )
    except OSError as exc:
        # A missing log directory must not stop the image from being written.
        print(f"pixie: file logging disabled: {exc}", file=sys.stderr)
        return None
    handler.setFormatter(JsonFormatter())
    return handler


def configure_logging(keep_files: int = 7, console: bool = False) -> logging.Logger:
    """Attach the pixie handlers once per invocation and return the logger.

    Logs go to ``<app root>/logs/pixie.log`` as JSON lines, and to stderr when
    ``console`` is set. Standard output is left alone because it may carry
    the rendered image.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if owned_handlers(logger):
        return logger

    logger.setLevel(logging.INFO)
    logger.propagate = False
    run_id = uuid.uuid4().hex[:12]

    handler = _file_handler(keep_files)
    if handler is not None:
        logger.addHandler(_own(handler, run_id))

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(_own(stream_handler, run_id))

    if not owned_handlers(logger):
        # Keeps records away from logging.lastResort.
        logger.addHandler(_own(logging.NullHandler(), run_id))

    logger.info("logging configured", extra={"event": "logging_configured"})
    return logger


def reset_logging() -> None:
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in owned_handlers(logger):
        logger.removeHandler(handler)
        handler.close()


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)
