"""Log output configuration for the `actionretry` logger tree.

Library modules log through stdlib loggers named `actionretry.<area>` and
never configure handlers themselves. Applications opt in once at startup:

    >>> from actionretry.runtime.observability import configure_logging
    >>> configure_logging(format="console", level="DEBUG")
    
Formats:
    console: `12:30:45.123 [INFO] actionretry.retry: [tap] Retry 2/3 after 1.0s (policy: linear)`
    json:    JSON Lines via orjson, for log aggregation
    none:    Silent (NullHandler)
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

import orjson

if TYPE_CHECKING:
    from actionretry.foundation.config import LoggingSettings

ROOT_LOGGER = "actionretry"

_handler: logging.Handler | None = None


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=UTC)


class ConsoleFormatter(logging.Formatter):
    """Human-readable single-line output."""
    
    def format(self, record: logging.LogRecord) -> str:
        line = f"{_timestamp(record).strftime('%H:%M:%S.%f')[:-3]} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation (Elasticsearch, Loki, Datadog, etc.)."""
    
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(
    format: str = "console",  # noqa: A002 - shadows builtin but matches stdlib
    level: str = "INFO",
    *,
    output: TextIO | None = None,
) -> logging.Handler:
    """Install a handler on the `actionretry` logger, replacing a previous one.
    
    Format: "console" (human), "json" (machine), "none".
    """
    global _handler
    if (levelno := logging.getLevelNamesMapping().get(level.upper())) is None:
        raise ValueError(f"Unknown level: {level}. Use DEBUG, INFO, WARNING, ERROR or CRITICAL")
    match format:
        case "console":
            handler: logging.Handler = logging.StreamHandler(output or sys.stderr)
            handler.setFormatter(ConsoleFormatter())
        case "json":
            handler = logging.StreamHandler(output or sys.stdout)
            handler.setFormatter(JsonFormatter())
        case "none":
            handler = logging.NullHandler()
        case _:
            raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    
    root = logging.getLogger(ROOT_LOGGER)
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(levelno)
    _handler = handler
    return handler


def configure_from_settings(settings: LoggingSettings | None = None) -> logging.Handler:
    """Apply LoggingSettings (default: from environment)."""
    if settings is None:
        from actionretry.foundation.config import get_settings
        settings = get_settings().logging
    return configure_logging(settings.format, settings.level)
