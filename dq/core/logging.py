"""
Structured logging configuration.

The library only emits records through named loggers; handlers are
installed by calling :func:`setup_logging` from the host application.
Records may carry an ``extra_data`` mapping (the arguments a helper was
called with, say), which the JSON formatter merges into its output.
"""

import sys
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Settings, get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# JSON key -> LogRecord attribute
_RECORD_FIELDS = (
    ("level", "levelname"),
    ("logger", "name"),
    ("module", "module"),
    ("function", "funcName"),
    ("line", "lineno"),
)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with ``extra_data`` merged in"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "message": record.getMessage(),
        }
        payload.update((key, getattr(record, attr)) for key, attr in _RECORD_FIELDS)
        payload.update(getattr(record, "extra_data", None) or {})

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def make_formatter(log_format: str) -> logging.Formatter:
    """Formatter for ``LOG_FORMAT``: "json", anything else gives plain text."""
    if log_format == "json":
        return StructuredFormatter()
    return logging.Formatter(TEXT_FORMAT, DATE_FORMAT)


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure the ``dq`` logger hierarchy from settings.

    Handlers are attached to the package logger rather than the root logger
    so a host application's own configuration is left alone.

    Returns:
        The configured ``dq`` logger
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
    formatter = make_formatter(settings.LOG_FORMAT)

    handlers: list = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    package_logger = logging.getLogger("dq")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    return package_logger


class LoggerAdapter(logging.LoggerAdapter):
    """Adapter accepting ``extra_data=`` on every call, merged over fixed context"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        data = dict(self.extra)
        data.update(kwargs.pop("extra_data", None) or {})
        kwargs.setdefault("extra", {})["extra_data"] = data
        return msg, kwargs


def get_logger(name: str) -> LoggerAdapter:
    """Get logger instance accepting ``extra_data=...``"""
    return LoggerAdapter(logging.getLogger(name), {})


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Logger whose records always carry ``context``, e.g. a question id"""
    return LoggerAdapter(logging.getLogger(name), context)
