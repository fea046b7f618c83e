"""Tests for settings, logging and error context."""

import logging

import pytest
from pydantic import ValidationError

from design_patterns.core.settings import Settings, get_settings
from design_patterns.utils.error_handler import ErrorContext
from design_patterns.utils.logger import (
    StructuredFormatter,
    get_logger,
    log_with_context,
    setup_logger,
)


class TestSettings:
    """Test cases for Settings."""

    def test_singleton(self):
        assert get_settings() is get_settings()
        assert Settings() is get_settings()

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DESIGN_PATTERNS_LOG_LEVEL", raising=False)
        monkeypatch.delenv("DESIGN_PATTERNS_LOG_DIR", raising=False)

        settings = get_settings()

        assert settings.log_level == "WARNING"
        assert settings.log_dir is None

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DESIGN_PATTERNS_LOG_LEVEL", "debug")
        monkeypatch.setenv("DESIGN_PATTERNS_LOG_DIR", str(tmp_path))

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_dir == tmp_path

    def test_invalid_level(self, monkeypatch):
        monkeypatch.setenv("DESIGN_PATTERNS_LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            get_settings()


class TestLogger:
    """Test cases for the logging helpers."""

    def test_get_logger_is_package_child(self):
        assert get_logger("demo").name == "design_patterns.demo"
        assert get_logger("design_patterns.cli.demo").name == "design_patterns.cli.demo"

    def test_file_handler(self, tmp_path):
        logger = setup_logger(
            name="design_patterns_test",
            run_id="unit",
            log_level="DEBUG",
            log_dir=tmp_path,
        )
        log_with_context(logger, "info", "Stage done", stage="adapter")
        for handler in logger.handlers:
            handler.flush()

        content = (tmp_path / "run_unit.log").read_text(encoding="utf-8")
        assert "Stage done | stage=adapter" in content

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_no_file_handler_without_dir(self):
        logger = setup_logger(name="design_patterns_console_only")

        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)

    def test_structured_formatter(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
        record.context = {"a": 1, "b": "two"}

        assert StructuredFormatter("%(message)s").format(record) == "hello | a=1 | b=two"


class TestErrorContext:
    """Test cases for ErrorContext."""

    def test_logs_and_propagates(self, caplog):
        logger = get_logger("error_context_test")

        with caplog.at_level(logging.ERROR, logger="design_patterns"):
            with pytest.raises(RuntimeError):
                with ErrorContext("decorator", logger=logger, offer="30% OFF") as ctx:
                    raise RuntimeError("boom")

        assert isinstance(ctx.error, RuntimeError)
        assert "Stage 'decorator' failed: boom" in caplog.text
        record = caplog.records[-1]
        assert record.context == {
            "stage": "decorator",
            "error_type": "RuntimeError",
            "offer": "30% OFF",
        }

    def test_no_error(self):
        with ErrorContext("adapter") as ctx:
            pass

        assert ctx.error is None
