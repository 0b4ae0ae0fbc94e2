"""Logging configuration for ssoadm.

All module loggers live under the "ssoadm" namespace. Console output goes to
stderr so it never mixes with command output printed through rich, and an
optional rotating JSON log file can be enabled from the "logging" section of
the configuration file.
"""

import json
import logging
import logging.handlers
import os
import re
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_LOG_DIRECTORY = str(Path.home() / ".ssoadm" / "logs")

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def numeric(self) -> int:
        return getattr(logging, self.value)


class LogFormat(str, Enum):
    """Log output formats."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


@dataclass
class LoggingConfig:
    """Configuration for logging system."""

    level: LogLevel = LogLevel.WARNING
    format_type: LogFormat = LogFormat.DETAILED
    enable_file_logging: bool = False
    enable_console_logging: bool = True
    log_directory: str = DEFAULT_LOG_DIRECTORY
    log_filename: str = "ssoadm.log"
    max_file_size_mb: int = 10
    backup_count: int = 5
    console_colors: bool = True
    log_aws_requests: bool = False
    sensitive_data_patterns: List[str] = field(
        default_factory=lambda: [r"password", r"secret", r"token", r"credential"]
    )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Dict[str, Any]],
        level: LogLevel = LogLevel.WARNING,
        format_type: LogFormat = LogFormat.DETAILED,
    ) -> "LoggingConfig":
        """
        Build a logging configuration from the "logging" section of the config file.

        Recognised keys are "file" (bool), "directory", "max_file_size_mb",
        "backup_count", "colors" and "aws_requests". The level and format come
        from the command line. Malformed values are ignored with a warning and
        their defaults used.

        Args:
            settings: The "logging" section, or None
            level: Log level chosen by the caller
            format_type: Console format chosen by the caller

        Returns:
            LoggingConfig instance
        """
        if settings is None:
            settings = {}
        elif not isinstance(settings, dict):
            logger.warning(
                f"Ignoring 'logging' config section: expected a mapping, "
                f"got {type(settings).__name__}"
            )
            settings = {}

        return cls(
            level=level,
            format_type=format_type,
            enable_file_logging=bool(settings.get("file", False)),
            log_directory=str(settings.get("directory", DEFAULT_LOG_DIRECTORY)),
            max_file_size_mb=_int_setting(settings, "max_file_size_mb", 10),
            backup_count=_int_setting(settings, "backup_count", 5),
            console_colors=bool(settings.get("colors", True)),
            log_aws_requests=bool(settings.get("aws_requests", False)),
        )


def _int_setting(settings: Dict[str, Any], key: str, default: int) -> int:
    value = settings.get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring logging.{key}={value!r}: expected an integer")
        return default


class SensitiveDataFilter(logging.Filter):
    """Replaces matches of the configured patterns with [REDACTED]."""

    def __init__(self, patterns: List[str]) -> None:
        super().__init__()
        self.patterns = [re.compile(pattern, re.IGNORECASE) for pattern in patterns]

    def _redact(self, text: str) -> str:
        for pattern in self.patterns:
            text = pattern.sub("[REDACTED]", text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._redact(record.msg)
        if record.args:
            record.args = tuple(
                self._redact(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        # Records are rewritten, never dropped
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter that renders each record as one JSON object."""

    # Attributes every LogRecord carries; anything else was passed via extra=
    RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in self.RESERVED_ATTRS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter that colors the level column on terminals."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = (
            use_colors
            and getattr(sys.stderr, "isatty", lambda: False)()
            and os.environ.get("TERM") != "dumb"
        )

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        prefix = f"[{timestamp}] {record.levelname:<8}"
        if self.use_colors:
            prefix = f"{self.LEVEL_COLORS.get(record.levelname, '')}{prefix}{self.RESET}"

        line = f"{prefix} - {record.name} - {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class LoggingManager:
    """
    Installs handlers on the "ssoadm" logger.

    Module loggers created with logging.getLogger(__name__) inherit these
    handlers. The namespace does not propagate to the root logger.
    """

    ROOT_LOGGER = "ssoadm"
    AWS_LOGGERS = ("boto3", "botocore", "urllib3")

    def __init__(self, config: Optional[LoggingConfig] = None):
        self.config = config or LoggingConfig()
        self._configured = False

    def setup_logging(self) -> None:
        """Configure the ssoadm logger. Repeated calls are no-ops."""
        if self._configured:
            return

        level = self.config.level.numeric
        logger = logging.getLogger(self.ROOT_LOGGER)
        logger.setLevel(level)
        logger.handlers.clear()
        logger.propagate = False

        handlers: List[logging.Handler] = []
        if self.config.enable_console_logging:
            handlers.append(self._console_handler())
        if self.config.enable_file_logging:
            handlers.append(self._file_handler())

        for handler in handlers:
            handler.setLevel(level)
            if self.config.sensitive_data_patterns:
                handler.addFilter(SensitiveDataFilter(self.config.sensitive_data_patterns))
            logger.addHandler(handler)

        aws_level = logging.DEBUG if self.config.log_aws_requests else logging.WARNING
        for name in self.AWS_LOGGERS:
            logging.getLogger(name).setLevel(aws_level)

        self._configured = True

    def _console_handler(self) -> logging.Handler:
        handler = logging.StreamHandler(sys.stderr)
        if self.config.format_type == LogFormat.JSON:
            handler.setFormatter(StructuredFormatter())
        elif self.config.format_type == LogFormat.SIMPLE:
            handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        else:
            handler.setFormatter(ColoredConsoleFormatter(use_colors=self.config.console_colors))
        return handler

    def _file_handler(self) -> logging.Handler:
        log_dir = Path(self.config.log_directory).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            filename=str(log_dir / self.config.log_filename),
            maxBytes=self.config.max_file_size_mb * 1024 * 1024,
            backupCount=self.config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(StructuredFormatter())
        return handler

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a logger under the ssoadm namespace.

        Args:
            name: Logger name, with or without the "ssoadm." prefix

        Returns:
            logging.Logger instance
        """
        self.setup_logging()
        if name != self.ROOT_LOGGER and not name.startswith(f"{self.ROOT_LOGGER}."):
            name = f"{self.ROOT_LOGGER}.{name}"
        return logging.getLogger(name)


_logging_manager: Optional[LoggingManager] = None


def get_logging_manager() -> LoggingManager:
    """Get the global logging manager instance."""
    global _logging_manager
    if _logging_manager is None:
        _logging_manager = LoggingManager()
    return _logging_manager


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Set up logging for ssoadm, replacing any earlier configuration.

    Args:
        config: Logging configuration
    """
    global _logging_manager
    _logging_manager = LoggingManager(config)
    _logging_manager.setup_logging()


def get_logger(name: str) -> logging.Logger:
    """Get a logger from the global logging manager."""
    return get_logging_manager().get_logger(name)
