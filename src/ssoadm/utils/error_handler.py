"""Error handling for ssoadm commands.

Exceptions raised by the directory workflow and the AWS SDK are mapped to a
CommandError carrying a category, a severity, a user message and remediation
steps. Commands print the user message and log the technical details.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError,
    EndpointConnectionError,
    HTTPClientError,
    NoCredentialsError,
    NoRegionError,
    ParamValidationError,
)
from rich.console import Console
from rich.markup import escape

from ..exceptions import (
    DirectoryError,
    GroupNotFoundError,
    PrincipalNotFoundError,
    UnsupportedMemberError,
)

console = Console()
logger = logging.getLogger(__name__)


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Categories of errors."""

    CONNECTION = "connection"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SERVICE_ERROR = "service_error"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where an error occurred."""

    component: str
    operation: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: Optional[str] = None
    resource_id: Optional[str] = None
    additional_context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RemediationStep:
    """A single remediation step shown to the user."""

    description: str
    command: Optional[str] = None


@dataclass
class CommandError:
    """Error information with context and remediation guidance."""

    error_id: str
    message: str
    category: ErrorCategory
    severity: ErrorSeverity
    context: ErrorContext
    original_exception: Optional[Exception] = None
    remediation_steps: List[RemediationStep] = field(default_factory=list)

    def get_error_code(self) -> str:
        """Generate an error code for tracking."""
        return f"{self.category.value.upper()}_{self.error_id}"

    def get_user_message(self) -> str:
        """Get a user-friendly error message."""
        message = self.message
        if self.remediation_steps:
            message += f"\n\nRecommended action: {self.remediation_steps[0].description}"
        return message

    def get_technical_details(self) -> Dict[str, Any]:
        """Get technical details for debugging."""
        details = {
            "error_id": self.error_id,
            "error_code": self.get_error_code(),
            "category": self.category.value,
            "severity": self.severity.value,
            "component": self.context.component,
            "operation": self.context.operation,
            "timestamp": self.context.timestamp.isoformat(),
        }

        if self.context.request_id:
            details["request_id"] = self.context.request_id

        if self.context.resource_id:
            details["resource_id"] = self.context.resource_id

        if self.original_exception:
            details["exception_type"] = type(self.original_exception).__name__
            details["exception_message"] = str(self.original_exception)

        if self.context.additional_context:
            details["additional_context"] = self.context.additional_context

        return details


class ErrorHandler:
    """
    Converts exceptions into CommandError records.

    Handlers are looked up by exact exception type first and then by the
    first mapped base class, so more specific types are listed before their
    bases.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._error_mappings: Dict[
            Type[Exception], Callable[[Exception, ErrorContext], CommandError]
        ] = {}
        self._setup_default_mappings()

    def _setup_default_mappings(self) -> None:
        self._error_mappings.update(
            {
                PrincipalNotFoundError: self._handle_principal_not_found_error,
                GroupNotFoundError: self._handle_group_not_found_error,
                UnsupportedMemberError: self._handle_unsupported_member_error,
                DirectoryError: self._handle_directory_error,
                NoCredentialsError: self._handle_credentials_error,
                EndpointConnectionError: self._handle_connection_error,
                ConnectionError: self._handle_connection_error,
                HTTPClientError: self._handle_connection_error,
                ParamValidationError: self._handle_param_validation_error,
                NoRegionError: self._handle_no_region_error,
                BotoCoreError: self._handle_botocore_error,
                ClientError: self._handle_client_error,
                ValueError: self._handle_validation_error,
                Exception: self._handle_generic_error,
            }
        )

    def handle_error(self, exception: Exception, context: ErrorContext) -> CommandError:
        """
        Convert an exception to a CommandError and log it.

        Args:
            exception: The exception that occurred
            context: Where the error occurred

        Returns:
            CommandError with remediation steps
        """
        handler = self._find_error_handler(type(exception))
        command_error = handler(exception, context)
        self._log_error(command_error)
        return command_error

    def _find_error_handler(
        self, exception_type: Type[Exception]
    ) -> Callable[[Exception, ErrorContext], CommandError]:
        if exception_type in self._error_mappings:
            return self._error_mappings[exception_type]

        for mapped_type, handler in self._error_mappings.items():
            if issubclass(exception_type, mapped_type):
                return handler

        return self._error_mappings[Exception]

    def _handle_principal_not_found_error(
        self, exception: PrincipalNotFoundError, context: ErrorContext
    ) -> CommandError:
        context.resource_id = exception.name
        return CommandError(
            error_id="DIR_001",
            message=str(exception),
            category=ErrorCategory.RESOURCE_NOT_FOUND,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(
                    description=f"Check that the {exception.kind} name is spelled correctly and exists"
                ),
                RemediationStep(
                    description="Use -g when the member is a group and omit it when the member is a user"
                ),
            ],
        )

    def _handle_group_not_found_error(
        self, exception: GroupNotFoundError, context: ErrorContext
    ) -> CommandError:
        context.resource_id = exception.group_name
        return CommandError(
            error_id="DIR_002",
            message=str(exception),
            category=ErrorCategory.RESOURCE_NOT_FOUND,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(description="Verify the group name matches its display name")
            ],
        )

    def _handle_unsupported_member_error(
        self, exception: UnsupportedMemberError, context: ErrorContext
    ) -> CommandError:
        return CommandError(
            error_id="DIR_003",
            message=str(exception),
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(description="Add the users of the nested group individually")
            ],
        )

    def _handle_directory_error(
        self, exception: DirectoryError, context: ErrorContext
    ) -> CommandError:
        context.additional_context.update(exception.context)
        return CommandError(
            error_id="DIR_000",
            message=str(exception),
            category=ErrorCategory.SERVICE_ERROR,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_exception=exception,
        )

    def _handle_credentials_error(
        self, exception: NoCredentialsError, context: ErrorContext
    ) -> CommandError:
        return CommandError(
            error_id="CREDS_001",
            message="AWS credentials not found or invalid",
            category=ErrorCategory.AUTHENTICATION,
            severity=ErrorSeverity.CRITICAL,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(
                    description="Configure AWS credentials using 'aws configure' or set environment variables",
                    command="aws configure",
                ),
                RemediationStep(
                    description="Verify AWS credentials are valid and not expired",
                    command="aws sts get-caller-identity",
                ),
            ],
        )

    def _handle_connection_error(self, exception: Exception, context: ErrorContext) -> CommandError:
        return CommandError(
            error_id="CONN_001",
            message=f"Cannot connect to the AWS Identity Store service: {str(exception)}",
            category=ErrorCategory.CONNECTION,
            severity=ErrorSeverity.HIGH,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(description="Check internet connectivity and DNS resolution"),
                RemediationStep(description="Verify the profile region is correctly configured"),
            ],
        )

    def _handle_param_validation_error(
        self, exception: ParamValidationError, context: ErrorContext
    ) -> CommandError:
        return CommandError(
            error_id="VAL_002",
            message=f"Request rejected before sending {context.operation}: {str(exception)}",
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(description="Check the length and characters of the names given")
            ],
        )

    def _handle_no_region_error(
        self, exception: NoRegionError, context: ErrorContext
    ) -> CommandError:
        return CommandError(
            error_id="CFG_001",
            message="No AWS region configured for this profile",
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.HIGH,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(
                    description="Set a region on the profile",
                    command="ssoadm profile update <name> --region <region>",
                )
            ],
        )

    def _handle_botocore_error(
        self, exception: BotoCoreError, context: ErrorContext
    ) -> CommandError:
        return CommandError(
            error_id="AWS_002",
            message=f"AWS SDK error in {context.operation}: {str(exception)}",
            category=ErrorCategory.SERVICE_ERROR,
            severity=ErrorSeverity.HIGH,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(
                    description="Refresh expired SSO credentials",
                    command="aws sso login --profile <aws-profile>",
                )
            ],
        )

    def _handle_client_error(self, exception: ClientError, context: ErrorContext) -> CommandError:
        error_code = exception.response.get("Error", {}).get("Code", "Unknown")
        error_message = exception.response.get("Error", {}).get("Message", str(exception))
        context.request_id = exception.response.get("ResponseMetadata", {}).get("RequestId")

        if error_code in ["AccessDenied", "AccessDeniedException", "UnauthorizedOperation"]:
            return CommandError(
                error_id="PERM_001",
                message=f"Insufficient permissions for {context.operation}: {error_message}",
                category=ErrorCategory.AUTHORIZATION,
                severity=ErrorSeverity.HIGH,
                context=context,
                original_exception=exception,
                remediation_steps=[
                    RemediationStep(
                        description="Verify the IAM user or role has identitystore permissions"
                    )
                ],
            )
        elif error_code in ["ResourceNotFoundException", "NoSuchEntity"]:
            return CommandError(
                error_id="RES_001",
                message=f"Resource not found in {context.operation}: {error_message}",
                category=ErrorCategory.RESOURCE_NOT_FOUND,
                severity=ErrorSeverity.MEDIUM,
                context=context,
                original_exception=exception,
                remediation_steps=[
                    RemediationStep(description="Verify the resource name is correct"),
                    RemediationStep(
                        description="Check that the member currently belongs to the group"
                    ),
                ],
            )
        elif error_code in ["ConflictException"]:
            return CommandError(
                error_id="RES_002",
                message=f"Conflict in {context.operation}: {error_message}",
                category=ErrorCategory.VALIDATION,
                severity=ErrorSeverity.MEDIUM,
                context=context,
                original_exception=exception,
                remediation_steps=[
                    RemediationStep(description="Check whether the member is already in the group")
                ],
            )
        return CommandError(
            error_id="AWS_001",
            message=f"AWS error in {context.operation} ({error_code}): {error_message}",
            category=ErrorCategory.SERVICE_ERROR,
            severity=ErrorSeverity.HIGH,
            context=context,
            original_exception=exception,
        )

    def _handle_validation_error(self, exception: ValueError, context: ErrorContext) -> CommandError:
        return CommandError(
            error_id="VAL_001",
            message=f"Invalid input for {context.operation}: {str(exception)}",
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            context=context,
            original_exception=exception,
        )

    def _handle_generic_error(self, exception: Exception, context: ErrorContext) -> CommandError:
        return CommandError(
            error_id="GEN_001",
            message=f"Unexpected error in {context.operation}: {str(exception)}",
            category=ErrorCategory.INTERNAL,
            severity=ErrorSeverity.HIGH,
            context=context,
            original_exception=exception,
            remediation_steps=[
                RemediationStep(description="Run again with --debug for more details")
            ],
        )

    def _log_error(self, command_error: CommandError) -> None:
        log_data = {
            "error_code": command_error.get_error_code(),
            "component": command_error.context.component,
            "operation": command_error.context.operation,
            "category": command_error.category.value,
        }

        if command_error.context.request_id:
            log_data["request_id"] = command_error.context.request_id

        if command_error.severity in (ErrorSeverity.CRITICAL, ErrorSeverity.HIGH):
            self.logger.error(command_error.message, extra=log_data)
        elif command_error.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(command_error.message, extra=log_data)
        else:
            self.logger.info(command_error.message, extra=log_data)


# Global error handler instance
_global_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _global_error_handler
    if _global_error_handler is None:
        _global_error_handler = ErrorHandler()
    return _global_error_handler


def _report(exception: Exception, operation: str, prefix: str) -> CommandError:
    context = ErrorContext(component="ssoadm", operation=operation)
    command_error = get_error_handler().handle_error(exception, context)
    console.print(f"[red]{prefix}{escape(command_error.get_user_message())}[/red]")
    logger.debug(f"{prefix}{operation}: {command_error.get_technical_details()}")
    return command_error


def handle_aws_error(exception: Exception, operation: str) -> CommandError:
    """
    Report an AWS SDK error to the user.

    Args:
        exception: The AWS exception that occurred
        operation: Name of the operation that failed

    Returns:
        The CommandError that was reported
    """
    return _report(exception, operation, "Error: ")


def handle_network_error(exception: Exception, operation: str = "NetworkOperation") -> CommandError:
    """Report a network error to the user."""
    return _report(exception, operation, "Network Error: ")


def handle_directory_error(exception: DirectoryError, operation: str) -> CommandError:
    """Report a directory error (such as an unknown member) to the user."""
    return _report(exception, operation, "Error: ")


def handle_unexpected_error(exception: Exception, operation: str) -> CommandError:
    """Report an error that no narrower handler covers."""
    return _report(exception, operation, "Error: ")
