"""Tests for logging utilities."""

import json
import os
from typing import Any
from unittest.mock import patch

from src.utils.logging import StructuredLogger, get_correlation_id, get_logger


class TestStructuredLogger:
    """Tests for StructuredLogger class."""

    def test_logger_initialization(self) -> None:
        logger = StructuredLogger("test", "test-id-123")

        assert logger.correlation_id == "test-id-123"

    def test_logger_generates_correlation_id(self) -> None:
        logger = StructuredLogger("test")

        assert logger.correlation_id

    def test_info_logs_json(self, capsys: Any) -> None:
        logger = StructuredLogger("products", "test-id")

        logger.info("Test message", key="value", empty=None)

        log_entry = json.loads(capsys.readouterr().out.strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["logger"] == "products"
        assert log_entry["message"] == "Test message"
        assert log_entry["correlationId"] == "test-id"
        assert log_entry["key"] == "value"
        assert "empty" not in log_entry
        assert "timestamp" in log_entry

    def test_warning_and_error_levels(self, capsys: Any) -> None:
        logger = StructuredLogger("test", "test-id")

        logger.warning("careful", code=123)
        logger.error("broken")

        lines = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
        assert [entry["level"] for entry in lines] == ["WARNING", "ERROR"]
        assert lines[0]["code"] == 123

    def test_debug_suppressed_at_info(self, capsys: Any) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO"}):
            StructuredLogger("quiet", "id").debug("hidden")

        assert capsys.readouterr().out == ""

    def test_debug_emitted_when_enabled(self, capsys: Any) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            StructuredLogger("verbose", "id").debug("shown")

        assert json.loads(capsys.readouterr().out)["level"] == "DEBUG"

    def test_non_json_values_are_stringified(self, capsys: Any) -> None:
        from decimal import Decimal

        StructuredLogger("test", "id").info("price", price=Decimal("1.50"))

        assert json.loads(capsys.readouterr().out)["price"] == "1.50"


def test_get_logger_binds_correlation_id() -> None:
    assert get_logger("x", "abc").correlation_id == "abc"


class TestGetCorrelationId:
    """Tests for get_correlation_id."""

    def test_from_request_context(self) -> None:
        assert get_correlation_id({"requestContext": {"requestId": "req-1"}}) == "req-1"

    def test_from_header(self) -> None:
        event = {"request": {"headers": {"x-correlation-id": "hdr-1"}}}

        assert get_correlation_id(event) == "hdr-1"

    def test_generated(self) -> None:
        first = get_correlation_id({})

        assert first
        assert first != get_correlation_id({})
