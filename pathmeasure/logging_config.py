"""Logging configuration.

Provides JSON-formatted logs with:
- Category detection (geometry, cache, parsing, cli)
- Extra fields passed through `extra=`
- Human-readable output for interactive use
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO


class StructuredFormatter(logging.Formatter):
    """JSON lines formatter."""

    # Map logger names to categories
    CATEGORY_MAP = {
        "pathmeasure.cache": "cache",
        "pathmeasure.path": "cache",
        "pathmeasure.decompose": "geometry",
        "pathmeasure.arc_length": "geometry",
        "pathmeasure.lookup_table": "geometry",
        "pathmeasure.svg_parser": "parsing",
        "pathmeasure.cli": "cli",
    }

    # Standard LogRecord fields to exclude from 'extra'
    STANDARD_FIELDS = {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }

    def _get_category(self, logger_name: str) -> str:
        """Determine category from logger name."""
        for prefix, cat in self.CATEGORY_MAP.items():
            if logger_name.startswith(prefix):
                return cat
        return "system"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record: dict = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "category": self._get_category(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Collect extra fields
        extra = {}
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_FIELDS and not key.startswith("_"):
                # Try to serialize, fall back to str
                try:
                    json.dumps(value)
                    extra[key] = value
                except (TypeError, ValueError):
                    extra[key] = str(value)
        if extra:
            log_record["extra"] = extra

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


class ErrorFilter(logging.Filter):
    """Filter that only allows ERROR and CRITICAL level logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def configure_logging(
    *,
    json_format: bool = False,
    log_level: int | str = logging.INFO,
    stream: TextIO | None = None,
    errors_only_stream: TextIO | None = None,
) -> None:
    """Configure logging for the pathmeasure package.

    Args:
        json_format: Use JSON formatting instead of human-readable lines
        log_level: Minimum log level
        stream: Stream to write to (default: sys.stderr)
        errors_only_stream: Extra stream receiving only ERROR and above
    """
    import sys

    package_logger = logging.getLogger("pathmeasure")
    package_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)5s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    package_logger.addHandler(stream_handler)

    if errors_only_stream is not None:
        error_handler = logging.StreamHandler(errors_only_stream)
        error_handler.setFormatter(formatter)
        error_handler.addFilter(ErrorFilter())
        package_logger.addHandler(error_handler)


def setup_cli_logging() -> None:
    """Configure logging for command-line use from Settings."""
    from pathmeasure.config import settings

    configure_logging(json_format=settings.log_json, log_level=settings.log_level.upper())
