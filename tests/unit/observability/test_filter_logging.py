"""Unit tests for observability logging."""

from __future__ import annotations

import logging

import pytest
import structlog

from filteroption.application.filtering import FilterOption, decode_query
from filteroption.kernel.errors import InvalidQueryParamError
from filteroption.observability.logging import JsonLoggerFactory, get_logger


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        logger = get_logger("filteroption.test")
        assert hasattr(logger, "bind")

    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("filteroption.test", request_id="r-1").info("hello")
        assert logs[0]["request_id"] == "r-1"
        assert logs[0]["event"] == "hello"


class TestNormalizationLogging:
    def test_apply_defaults_logs_normalized_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            FilterOption(sort_by="-name").apply_defaults()
        event = next(e for e in logs if e["event"] == "filter_option.normalized")
        assert event["log_level"] == "debug"
        assert event["sort_attr"] == "name"
        assert event["desc"] is True


class TestDecodingLogging:
    def test_invalid_param_logs_warning(self) -> None:
        with structlog.testing.capture_logs() as logs:
            with pytest.raises(InvalidQueryParamError):
                decode_query({"pageSize": "x"})
        event = next(e for e in logs if e["event"] == "filter_option.invalid_param")
        assert event["log_level"] == "warning"
        assert event["param"] == "pageSize"
        assert event["value"] == "x"

    def test_valid_query_logs_nothing(self) -> None:
        with structlog.testing.capture_logs() as logs:
            decode_query({"pageSize": "20"})
        assert logs == []


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestJsonLoggerFactory:
    def test_configure_installs_single_root_handler(self, restore_root_logger: logging.Logger) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_configure_console_renderer(self, restore_root_logger: logging.Logger) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG, json=False)
        assert logging.getLogger().level == logging.DEBUG
