"""Tests for command error handling."""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import (
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    NoRegionError,
    ParamValidationError,
    ReadTimeoutError,
    UnauthorizedSSOTokenError,
)

from ssoadm.exceptions import (
    DirectoryError,
    GroupNotFoundError,
    PrincipalNotFoundError,
    UnsupportedMemberError,
)
from ssoadm.utils.error_handler import (
    ErrorCategory,
    ErrorContext,
    ErrorHandler,
    ErrorSeverity,
    handle_aws_error,
    handle_directory_error,
    handle_unexpected_error,
)


@pytest.fixture
def handler():
    return ErrorHandler(logger=MagicMock())


@pytest.fixture
def context():
    return ErrorContext(component="test", operation="UpdateGroup")


def _client_error(code, message="message"):
    return ClientError(
        {
            "Error": {"Code": code, "Message": message},
            "ResponseMetadata": {"RequestId": "req-123"},
        },
        "UpdateGroup",
    )


class TestDirectoryErrors:
    """Test mapping of directory exceptions."""

    def test_principal_not_found(self, handler, context):
        error = handler.handle_error(PrincipalNotFoundError("bob", "user"), context)

        assert error.category == ErrorCategory.RESOURCE_NOT_FOUND
        assert error.message == 'user "bob" not found'
        assert error.context.resource_id == "bob"
        assert "user name" in error.remediation_steps[0].description

    def test_group_not_found(self, handler, context):
        error = handler.handle_error(GroupNotFoundError("eng"), context)

        assert error.error_id == "DIR_002"
        assert "eng" in error.message

    def test_unsupported_member(self, handler, context):
        error = handler.handle_error(UnsupportedMemberError("eng", "ops", "group"), context)

        assert error.category == ErrorCategory.VALIDATION

    def test_generic_directory_error_keeps_context(self, handler, context):
        error = handler.handle_error(DirectoryError("boom", context={"group": "eng"}), context)

        assert error.error_id == "DIR_000"
        assert error.context.additional_context == {"group": "eng"}


class TestAWSErrors:
    """Test mapping of botocore exceptions."""

    def test_access_denied(self, handler, context):
        error = handler.handle_error(_client_error("AccessDeniedException", "denied"), context)

        assert error.category == ErrorCategory.AUTHORIZATION
        assert error.context.request_id == "req-123"
        assert "denied" in error.message

    def test_resource_not_found(self, handler, context):
        error = handler.handle_error(_client_error("ResourceNotFoundException"), context)

        assert error.category == ErrorCategory.RESOURCE_NOT_FOUND

    def test_conflict(self, handler, context):
        error = handler.handle_error(_client_error("ConflictException"), context)

        assert error.error_id == "RES_002"

    def test_unknown_client_error(self, handler, context):
        error = handler.handle_error(_client_error("ValidationException", "bad"), context)

        assert error.category == ErrorCategory.SERVICE_ERROR
        assert "ValidationException" in error.message

    def test_no_credentials(self, handler, context):
        error = handler.handle_error(NoCredentialsError(), context)

        assert error.category == ErrorCategory.AUTHENTICATION
        assert error.severity == ErrorSeverity.CRITICAL

    def test_endpoint_connection(self, handler, context):
        error = handler.handle_error(EndpointConnectionError(endpoint_url="https://x"), context)

        assert error.category == ErrorCategory.CONNECTION

    def test_connection_subclass(self, handler, context):
        error = handler.handle_error(ConnectTimeoutError(endpoint_url="https://x"), context)

        assert error.category == ErrorCategory.CONNECTION

    def test_read_timeout(self, handler, context):
        error = handler.handle_error(ReadTimeoutError(endpoint_url="https://x"), context)

        assert error.category == ErrorCategory.CONNECTION

    def test_parameter_validation(self, handler, context):
        error = handler.handle_error(ParamValidationError(report="too long"), context)

        assert error.error_id == "VAL_002"
        assert "too long" in error.message

    def test_no_region(self, handler, context):
        error = handler.handle_error(NoRegionError(), context)

        assert error.error_id == "CFG_001"
        assert "--region" in error.remediation_steps[0].command

    def test_other_botocore_error(self, handler, context):
        error = handler.handle_error(UnauthorizedSSOTokenError(), context)

        assert error.error_id == "AWS_002"
        assert error.category == ErrorCategory.SERVICE_ERROR


class TestCommandError:
    """Test CommandError helpers."""

    def test_user_message_includes_first_remediation(self, handler, context):
        error = handler.handle_error(PrincipalNotFoundError("g1", "group"), context)

        assert error.get_user_message().startswith('group "g1" not found')
        assert "Recommended action" in error.get_user_message()

    def test_technical_details(self, handler, context):
        error = handler.handle_error(RuntimeError("oops"), context)
        details = error.get_technical_details()

        assert details["error_code"] == "INTERNAL_GEN_001"
        assert details["exception_type"] == "RuntimeError"
        assert details["operation"] == "UpdateGroup"

    def test_severity_controls_log_level(self, context):
        logger = MagicMock()
        ErrorHandler(logger=logger).handle_error(PrincipalNotFoundError("bob", "user"), context)

        logger.warning.assert_called_once()
        logger.error.assert_not_called()

    def test_severity_low_logs_info(self, context):
        logger = MagicMock()
        ErrorHandler(logger=logger).handle_error(ValueError("bad name"), context)

        logger.info.assert_called_once()


@patch("ssoadm.utils.error_handler.console")
def test_handle_aws_error_prints_message(mock_console):
    result = handle_aws_error(_client_error("AccessDeniedException", "denied"), "UpdateGroup")

    assert result.category == ErrorCategory.AUTHORIZATION
    printed = mock_console.print.call_args[0][0]
    assert "Insufficient permissions for UpdateGroup" in printed


@patch("ssoadm.utils.error_handler.console")
def test_handle_directory_error_escapes_markup(mock_console):
    handle_directory_error(PrincipalNotFoundError("[admin]", "user"), "UpdateGroup")

    printed = mock_console.print.call_args[0][0]
    assert "\\[admin]" in printed


@patch("ssoadm.utils.error_handler.console")
def test_handle_unexpected_error_prints_message(mock_console):
    result = handle_unexpected_error(RuntimeError("boom"), "UpdateGroup")

    assert result.error_id == "GEN_001"
    printed = mock_console.print.call_args[0][0]
    assert printed.startswith("[red]Error: Unexpected error in UpdateGroup: boom")
