"""
FeedSig Logging
===============

Logging for the ``feedsig`` logger tree.

Records go to stderr (colored or JSON lines) and, optionally, to a rotating
JSON-lines file. Components log through ``ComponentLogger`` so every record
carries the component name and, where known, the article it concerns.
"""

import json
import logging
import logging.handlers
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "feedsig"

# Attribute names of a bare LogRecord; anything else arrived through ``extra``.
_RECORD_FIELDS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the ``extra`` fields attached to a record."""
    return {k: v for k, v in vars(record).items() if k not in _RECORD_FIELDS}


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, context fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(record_context(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Short colored lines for a terminal: time, level, component, message."""

    LEVEL_COLORS = {
        "DEBUG": "\033[2m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelname, "")
        stamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        source = getattr(record, "component", record.name)

        line = f"{color}{stamp} {record.levelname[0]}{self.RESET} [{source}] {record.getMessage()}"

        article_url = getattr(record, "article_url", None)
        if article_url:
            line += f" ({article_url})"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class ComponentLogger(logging.LoggerAdapter):
    """Adapter that merges its fixed context into each call's ``extra``."""

    def process(self, msg: Any, kwargs: Dict[str, Any]):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger_for_component(
    component_name: str,
    article_url: Optional[str] = None,
    feed_title: Optional[str] = None,
) -> ComponentLogger:
    """Get the logger for a FeedSig component.

    Args:
        component_name: Component name, e.g. ``"stopwords"`` or ``"signature"``
        article_url: URL of the article being processed, if any
        feed_title: Title of the feed the article came from, if any
    """
    context: Dict[str, Any] = {"component": component_name}
    if article_url:
        context["article_url"] = article_url
    if feed_title:
        context["feed_title"] = feed_title

    return ComponentLogger(logging.getLogger(f"{ROOT_LOGGER_NAME}.{component_name}"), context)


def configure_application_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    enable_console: bool = True,
    structured_logging: bool = False,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> logging.Logger:
    """Replace the handlers of the ``feedsig`` logger.

    Args:
        log_level: Level name for the whole ``feedsig`` tree
        log_file: JSON-lines log file, rotated by size; no file when None
        enable_console: Log to stderr, keeping stdout for command output
        structured_logging: Write JSON lines to stderr instead of colored text
        max_file_size_mb: Rotate the log file after this many megabytes
        backup_count: Rotated files to keep

    Returns:
        The configured ``feedsig`` logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(log_level.upper())

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if enable_console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(JsonLineFormatter() if structured_logging else ConsoleFormatter())
        root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(JsonLineFormatter())
        root.addHandler(file_handler)

    return root


class PerformanceLogger:
    """Time a block and log how long it took.

    Success is logged at debug level, failure at error level; exceptions
    are never suppressed.
    """

    def __init__(self, logger, operation: str, **context):
        self.logger = logger
        self.operation = operation
        self.context = context
        self._started: Optional[float] = None

    def __enter__(self) -> "PerformanceLogger":
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        elapsed = time.perf_counter() - self._started
        extra = {**self.context, "duration_seconds": round(elapsed, 6), "success": exc_type is None}

        if exc_type is None:
            self.logger.debug(f"{self.operation} took {elapsed:.3f}s", extra=extra)
        else:
            self.logger.error(f"{self.operation} failed after {elapsed:.3f}s: {exc_val}", extra=extra)
