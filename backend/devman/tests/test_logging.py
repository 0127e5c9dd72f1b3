"""Tests for structured logging."""

import json
import logging
import sys
from io import StringIO

from devman.core.logging import ConsoleFormatter, JSONFormatter, LoggerAdapter


def make_record(msg="Test message", level=logging.INFO, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="devman.test",
        level=level,
        pathname="/devman/test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_basic_log_format(self):
        parsed = json.loads(JSONFormatter().format(make_record()))

        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "devman.test"
        assert parsed["message"] == "Test message"
        assert parsed["line"] == 42
        assert "timestamp" in parsed
        assert "extra" not in parsed

    def test_extra_fields(self):
        record = make_record("Filter not applied")
        record.parameter = "ip4_addr_f"
        record.request_id = "abc"

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["extra"] == {"parameter": "ip4_addr_f", "request_id": "abc"}

    def test_without_extra(self):
        record = make_record()
        record.parameter = "limit"
        parsed = json.loads(JSONFormatter(include_extra=False).format(record))
        assert "extra" not in parsed

    def test_exception(self):
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        parsed = json.loads(JSONFormatter().format(make_record(level=logging.ERROR, exc_info=exc_info)))

        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "Test error"
        assert isinstance(parsed["exception"]["traceback"], list)

    def test_non_serializable_extra(self):
        record = make_record()
        record.custom_object = object()
        parsed = json.loads(JSONFormatter().format(record))
        assert "object" in parsed["extra"]["custom_object"].lower()


class TestConsoleFormatter:
    """Tests for console log formatter."""

    def test_basic_console_format(self):
        output = ConsoleFormatter().format(make_record())
        assert "INFO" in output
        assert "devman.test" in output
        assert "Test message" in output

    def test_request_id_suffix(self):
        record = make_record()
        record.request_id = "req-7"
        assert ConsoleFormatter().format(record).endswith("[req-7]")

    def test_colors(self):
        for level, color in ConsoleFormatter.COLORS.items():
            output = ConsoleFormatter().format(make_record(level=getattr(logging, level)))
            assert color in output, f"Color code missing for {level}"


class TestLoggerAdapter:
    """Tests for LoggerAdapter context injection."""

    def test_adapter_merges_context_and_extra(self):
        base_logger = logging.getLogger("devman.test.adapter")
        base_logger.setLevel(logging.DEBUG)
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JSONFormatter())
        base_logger.addHandler(handler)

        try:
            adapter = LoggerAdapter(base_logger, {"request_id": "abc-123"})
            adapter.info("Listing devices", extra={"count": 3})
            parsed = json.loads(stream.getvalue())
        finally:
            base_logger.removeHandler(handler)

        assert parsed["extra"]["request_id"] == "abc-123"
        assert parsed["extra"]["count"] == 3
