"""Tests for logging configuration."""

import json
import logging
from unittest.mock import patch

import pytest

from ssoadm.utils.logging_config import (
    ColoredConsoleFormatter,
    LogFormat,
    LoggingConfig,
    LoggingManager,
    LogLevel,
    SensitiveDataFilter,
    StructuredFormatter,
    get_logger,
    get_logging_manager,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_ssoadm_logger():
    yield
    logger = logging.getLogger("ssoadm")
    logger.handlers.clear()
    logger.propagate = True


def _record(msg="hello", args=None, level=logging.INFO):
    return logging.LogRecord(
        name="ssoadm.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


class TestSensitiveDataFilter:
    """Test redaction of sensitive values."""

    def test_redacts_message(self):
        record = _record("session token expired")

        assert SensitiveDataFilter([r"token"]).filter(record) is True
        assert record.msg == "session [REDACTED] expired"

    def test_redacts_string_args(self):
        record = _record("value %s %d", ("my-secret", 3))

        SensitiveDataFilter([r"secret"]).filter(record)

        assert record.args == ("my-[REDACTED]", 3)


class TestFormatters:
    """Test log formatters."""

    def test_structured_formatter_outputs_json(self):
        record = _record("resolved alice")
        record.operation = "UpdateGroup"

        data = json.loads(StructuredFormatter().format(record))

        assert data["message"] == "resolved alice"
        assert data["level"] == "INFO"
        assert data["logger"] == "ssoadm.test"
        assert data["extra"] == {"operation": "UpdateGroup"}

    def test_colored_formatter_without_colors(self):
        formatter = ColoredConsoleFormatter(use_colors=False)

        output = formatter.format(_record("plain"))

        assert "INFO" in output
        assert output.endswith("ssoadm.test - plain")
        assert "\033[" not in output


class TestLoggingManager:
    """Test LoggingManager setup."""

    def test_setup_installs_console_handler(self):
        manager = LoggingManager(LoggingConfig(level=LogLevel.DEBUG))
        manager.setup_logging()

        logger = logging.getLogger("ssoadm")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logging.getLogger("botocore").level == logging.WARNING

    def test_setup_is_idempotent(self):
        manager = LoggingManager(LoggingConfig())
        manager.setup_logging()
        manager.setup_logging()

        assert len(logging.getLogger("ssoadm").handlers) == 1

    def test_json_console_format(self):
        manager = LoggingManager(LoggingConfig(format_type=LogFormat.JSON))
        manager.setup_logging()

        handler = logging.getLogger("ssoadm").handlers[0]
        assert isinstance(handler.formatter, StructuredFormatter)

    def test_file_logging(self, tmp_path):
        config = LoggingConfig(
            level=LogLevel.INFO, enable_file_logging=True, log_directory=str(tmp_path / "logs")
        )
        LoggingManager(config).setup_logging()

        logging.getLogger("ssoadm.workflow").info("group updated")
        for handler in logging.getLogger("ssoadm").handlers:
            handler.flush()

        content = (tmp_path / "logs" / "ssoadm.log").read_text()
        assert "group updated" in content

    def test_get_logger_prefixes_name(self):
        manager = LoggingManager(LoggingConfig())

        assert manager.get_logger("cli").name == "ssoadm.cli"
        assert manager.get_logger("ssoadm.directory").name == "ssoadm.directory"


def test_setup_logging_replaces_global_manager():
    setup_logging(LoggingConfig(level=LogLevel.ERROR))

    assert get_logging_manager().config.level == LogLevel.ERROR
    assert get_logger("directory").name == "ssoadm.directory"


def test_config_from_settings():
    config = LoggingConfig.from_settings(
        {"file": True, "directory": "/tmp/ssoadm-logs", "aws_requests": True},
        level=LogLevel.INFO,
        format_type=LogFormat.SIMPLE,
    )

    assert config.level == LogLevel.INFO
    assert config.format_type == LogFormat.SIMPLE
    assert config.enable_file_logging is True
    assert config.log_directory == "/tmp/ssoadm-logs"
    assert config.log_aws_requests is True


def test_config_from_missing_settings():
    config = LoggingConfig.from_settings(None)

    assert config.enable_file_logging is False
    assert config.level == LogLevel.WARNING


@patch("ssoadm.utils.logging_config.logger")
def test_config_ignores_non_mapping_settings(mock_logger):
    config = LoggingConfig.from_settings(["file"], level=LogLevel.INFO)

    assert config.level == LogLevel.INFO
    assert config.enable_file_logging is False
    mock_logger.warning.assert_called_once()


@patch("ssoadm.utils.logging_config.logger")
def test_config_ignores_bad_integer_settings(mock_logger):
    config = LoggingConfig.from_settings({"max_file_size_mb": "big", "backup_count": "3"})

    assert config.max_file_size_mb == 10
    assert config.backup_count == 3
    mock_logger.warning.assert_called_once()
