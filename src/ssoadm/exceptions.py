"""Custom exception classes for directory operations."""

from typing import Any, Dict, Optional


class DirectoryError(Exception):
    """Base exception for directory operations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Initialize directory error.

        Args:
            message: Error message
            context: Additional context information
        """
        super().__init__(message)
        self.context = context or {}


class PrincipalNotFoundError(DirectoryError):
    """Exception raised when a named user or group does not exist."""

    def __init__(self, name: str, kind: str):
        """Initialize principal not found error.

        Args:
            name: The principal name that was looked up
            kind: The kind of principal that was expected ("user" or "group")
        """
        super().__init__(f'{kind} "{name}" not found', context={"name": name, "kind": kind})
        self.name = name
        self.kind = kind


class GroupNotFoundError(DirectoryError):
    """Exception raised when the group being updated does not exist."""

    def __init__(self, group_name: str):
        super().__init__(f"Group '{group_name}' does not exist", context={"group": group_name})
        self.group_name = group_name


class UnsupportedMemberError(DirectoryError):
    """Exception raised when a backend cannot hold a principal of the given kind."""

    def __init__(self, group_name: str, member_name: str, kind: str):
        """Initialize unsupported member error.

        Args:
            group_name: The group that was being modified
            member_name: The principal that could not be added or removed
            kind: The kind of the rejected principal
        """
        super().__init__(
            f"Group '{group_name}' cannot contain {kind} members ('{member_name}')",
            context={"group": group_name, "member": member_name, "kind": kind},
        )
        self.group_name = group_name
        self.member_name = member_name
        self.kind = kind
