"""Abstract interface for identity-service clients."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import PrincipalRef


class DirectoryClient(ABC):
    """
    Operations the group update workflow needs from an identity service.

    Lookups return None when the service answers that no such principal
    exists. Transport and service failures are raised as exceptions.
    """

    @abstractmethod
    def update_group_description(self, group_name: str, description: str) -> None:
        """
        Replace the description of a group.

        Args:
            group_name: Name of the group to update
            description: New description text
        """

    @abstractmethod
    def find_user(self, name: str) -> Optional[PrincipalRef]:
        """
        Look up a user by name.

        Args:
            name: User name

        Returns:
            PrincipalRef for the user, or None if no such user exists
        """

    @abstractmethod
    def find_group(self, name: str) -> Optional[PrincipalRef]:
        """
        Look up a group by name.

        Args:
            name: Group name

        Returns:
            PrincipalRef for the group, or None if no such group exists
        """

    @abstractmethod
    def add_principal_to_group(self, group_name: str, principal: PrincipalRef) -> None:
        """Add a resolved principal to a group."""

    @abstractmethod
    def remove_principal_from_group(self, group_name: str, principal: PrincipalRef) -> None:
        """Remove a resolved principal from a group."""
