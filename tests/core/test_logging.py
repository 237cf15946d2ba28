"""
Tests for core/logging module

Formatters, the context-injecting adapter, setup_logging and LogTimer.
"""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from motion_rules.core.logging import (
    DevelopmentFormatter,
    LogTimer,
    StructuredFormatter,
    correlation_context,
    get_logger,
    set_request_id,
    set_spec_id,
    setup_logging,
)


def _record(msg="Test message", level=logging.INFO):
    return logging.LogRecord(
        name="motion_rules.test",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestStructuredFormatter:
    """Test suite for StructuredFormatter"""

    def test_format_basic_log(self):
        """Test basic record formatting to JSON"""
        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert parsed["logger"] == "motion_rules.test"
        assert parsed["timestamp"].endswith("Z")
        assert "extra" not in parsed

    def test_extra_attributes_are_nested(self):
        """Test values passed via extra= land under 'extra'"""
        record = _record()
        record.issue_type = "crop"
        record.violations = 2

        parsed = json.loads(StructuredFormatter().format(record))

        assert parsed["extra"] == {"issue_type": "crop", "violations": 2}

    def test_correlation_ids_included(self):
        """Test request and spec ids from the context"""
        set_request_id("req-123")
        set_spec_id("spec-001")

        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["request_id"] == "req-123"
        assert parsed["spec_id"] == "spec-001"

    def test_format_with_exception(self):
        """Test exception info is serialized"""
        try:
            raise ValueError("Test exception")
        except ValueError:
            import sys
            exc_info = sys.exc_info()

        record = _record(level=logging.ERROR)
        record.exc_info = exc_info
        parsed = json.loads(StructuredFormatter().format(record))

        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "Test exception"


class TestDevelopmentFormatter:
    """Test suite for DevelopmentFormatter"""

    def test_format_contains_level_and_message(self):
        line = DevelopmentFormatter().format(_record("Spec enforced"))
        assert "INFO" in line
        assert "Spec enforced" in line

    def test_format_shows_context(self):
        set_request_id("abcdef123456")
        line = DevelopmentFormatter().format(_record())
        assert "req:abcdef12" in line


class TestLoggerAdapter:
    """Test suite for get_logger and the bound context"""

    def test_bound_extra_reaches_record(self, caplog):
        logger = get_logger("motion_rules.test.adapter", component="rule_enforcer")

        with caplog.at_level(logging.INFO, logger="motion_rules.test.adapter"):
            logger.info("hello", extra={"violations": 3})

        record = caplog.records[-1]
        assert record.component == "rule_enforcer"
        assert record.violations == 3

    def test_call_extra_wins_over_bound_extra(self, caplog):
        logger = get_logger("motion_rules.test.adapter", component="bound")

        with caplog.at_level(logging.INFO, logger="motion_rules.test.adapter"):
            logger.info("hello", extra={"component": "explicit"})

        assert caplog.records[-1].component == "explicit"

    def test_correlation_context(self):
        assert correlation_context() == {}
        set_spec_id("spec-9")
        assert correlation_context() == {"spec_id": "spec-9"}

    def test_request_id_injected(self, caplog):
        logger = get_logger("motion_rules.test.adapter")
        set_request_id("req-42")

        with caplog.at_level(logging.INFO, logger="motion_rules.test.adapter"):
            logger.info("hello")

        assert caplog.records[-1].request_id == "req-42"


class TestSetupLogging:
    """Test suite for setup_logging"""

    def test_console_handler_installed(self, restore_root_logger):
        setup_logging(level="WARNING")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, DevelopmentFormatter)

    def test_json_console(self, restore_root_logger):
        setup_logging(use_json=True)
        assert isinstance(restore_root_logger.handlers[0].formatter, StructuredFormatter)

    def test_file_logging_is_json(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "engine.log"
        setup_logging(level="DEBUG", log_file=log_file)

        file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1

        get_logger("motion_rules.test.file").info("written", extra={"key": "value"})
        file_handlers[0].flush()

        last_line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        parsed = json.loads(last_line)
        assert parsed["message"] == "written"
        assert parsed["extra"]["key"] == "value"

    def test_rotation_limits(self, tmp_path, restore_root_logger):
        setup_logging(log_file=tmp_path / "engine.log", max_bytes=1024, backup_count=5)

        handler = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)][0]
        assert handler.maxBytes == 1024
        assert handler.backupCount == 5


class TestLogTimer:
    """Test suite for LogTimer"""

    def test_logs_start_and_completion(self, caplog):
        logger = get_logger("motion_rules.test.timer")

        with caplog.at_level(logging.INFO, logger="motion_rules.test.timer"):
            with LogTimer(logger, "animation review") as timer:
                pass

        messages = [r.getMessage() for r in caplog.records]
        assert "Starting: animation review" in messages
        assert "Completed: animation review" in messages
        assert timer.duration is not None and timer.duration >= 0
        completed = [r for r in caplog.records if r.getMessage() == "Completed: animation review"][0]
        assert completed.operation == "animation review"
        assert completed.duration_ms >= 0

    def test_logs_failure_and_reraises(self, caplog):
        logger = get_logger("motion_rules.test.timer")

        with caplog.at_level(logging.INFO, logger="motion_rules.test.timer"):
            with pytest.raises(ValueError):
                with LogTimer(logger, "animation review"):
                    raise ValueError("boom")

        failed = [r for r in caplog.records if r.getMessage() == "Failed: animation review"]
        assert len(failed) == 1
        assert failed[0].levelno == logging.ERROR
        assert failed[0].error == "boom"
