"""Utility modules for ssoadm.

This package provides:
- YAML configuration management
- Logging setup
- Error classification and reporting
- Input validation
"""

from .config import Config
from .error_handler import (
    CommandError,
    ErrorHandler,
    get_error_handler,
    handle_aws_error,
    handle_directory_error,
    handle_network_error,
    handle_unexpected_error,
)
from .logging_config import LoggingConfig, get_logger, setup_logging
from .validators import (
    validate_group_description,
    validate_identity_store_id,
    validate_non_empty,
)

__all__ = [
    "Config",
    "CommandError",
    "ErrorHandler",
    "get_error_handler",
    "handle_aws_error",
    "handle_directory_error",
    "handle_network_error",
    "handle_unexpected_error",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
    "validate_group_description",
    "validate_identity_store_id",
    "validate_non_empty",
]
