"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
import sys
from io import StringIO

import pytest

from pathmeasure.logging_config import (
    ErrorFilter,
    StructuredFormatter,
    configure_logging,
)


def _record(name: str = "pathmeasure.cache", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="cache.py",
        lineno=42,
        msg="Invalidating cache",
        args=(),
        exc_info=None,
    )


class TestStructuredFormatter:
    """Tests for StructuredFormatter JSON output."""

    @pytest.fixture
    def formatter(self) -> StructuredFormatter:
        return StructuredFormatter()

    def test_basic_json_output(self, formatter: StructuredFormatter) -> None:
        """Output is valid JSON with the required fields."""
        data = json.loads(formatter.format(_record()))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["logger"] == "pathmeasure.cache"
        assert data["message"] == "Invalidating cache"
        assert data["category"] == "cache"

    @pytest.mark.parametrize(
        ("logger_name", "category"),
        [
            ("pathmeasure.path", "cache"),
            ("pathmeasure.decompose", "geometry"),
            ("pathmeasure.arc_length", "geometry"),
            ("pathmeasure.lookup_table", "geometry"),
            ("pathmeasure.svg_parser", "parsing"),
            ("pathmeasure.cli", "cli"),
            ("pathmeasure.config", "system"),
            ("unknown.logger", "system"),
        ],
    )
    def test_category_detection(
        self, formatter: StructuredFormatter, logger_name: str, category: str
    ) -> None:
        data = json.loads(formatter.format(_record(logger_name)))
        assert data["category"] == category, f"Failed for {logger_name}"

    def test_extra_fields_serializable(self, formatter: StructuredFormatter) -> None:
        record = _record()
        record.segment_count = 3  # type: ignore[attr-defined]
        data = json.loads(formatter.format(record))
        assert data["extra"]["segment_count"] == 3

    def test_extra_fields_non_serializable(self, formatter: StructuredFormatter) -> None:
        """Non-serializable extra fields are converted to strings."""
        record = _record()
        record.custom_obj = object()  # type: ignore[attr-defined]
        data = json.loads(formatter.format(record))
        assert isinstance(data["extra"]["custom_obj"], str)

    def test_no_extra_key_without_extras(self, formatter: StructuredFormatter) -> None:
        data = json.loads(formatter.format(_record()))
        assert "extra" not in data

    def test_exception_info(self, formatter: StructuredFormatter) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = _record(level=logging.ERROR)
        record.exc_info = exc_info
        data = json.loads(formatter.format(record))
        assert "ValueError" in data["exception"]
        assert "Test error" in data["exception"]


class TestErrorFilter:
    """Tests for ErrorFilter."""

    @pytest.mark.parametrize("level", [logging.ERROR, logging.CRITICAL])
    def test_allows_errors(self, level: int) -> None:
        assert ErrorFilter().filter(_record(level=level)) is True

    @pytest.mark.parametrize("level", [logging.DEBUG, logging.INFO, logging.WARNING])
    def test_blocks_below_error(self, level: int) -> None:
        assert ErrorFilter().filter(_record(level=level)) is False


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_json_format_output(self) -> None:
        output = StringIO()
        configure_logging(json_format=True, log_level=logging.INFO, stream=output)

        logging.getLogger("pathmeasure.test_json").info("Test message")

        data = json.loads(output.getvalue().strip())
        assert data["message"] == "Test message"

    def test_plain_format_output(self) -> None:
        output = StringIO()
        configure_logging(json_format=False, log_level=logging.INFO, stream=output)

        logging.getLogger("pathmeasure.test_plain").info("Test message")

        content = output.getvalue()
        assert "Test message" in content
        assert "INFO" in content
        with pytest.raises(json.JSONDecodeError):
            json.loads(content.strip())

    def test_log_level_filtering(self) -> None:
        output = StringIO()
        configure_logging(json_format=False, log_level=logging.WARNING, stream=output)

        logger = logging.getLogger("pathmeasure.test_level")
        logger.info("Should not appear")
        logger.warning("Should appear")

        content = output.getvalue()
        assert "Should not appear" not in content
        assert "Should appear" in content

    def test_errors_only_stream(self) -> None:
        output = StringIO()
        errors = StringIO()
        configure_logging(log_level=logging.INFO, stream=output, errors_only_stream=errors)

        logger = logging.getLogger("pathmeasure.test_errors")
        logger.info("Routine")
        logger.error("Broken")

        assert "Routine" in output.getvalue()
        assert "Broken" in output.getvalue()
        assert "Routine" not in errors.getvalue()
        assert "Broken" in errors.getvalue()

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging(stream=StringIO())
        configure_logging(stream=StringIO())
        assert len(logging.getLogger("pathmeasure").handlers) == 1
