"""Data models for directory principals and group change-sets."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class PrincipalKind(str, Enum):
    """Enumeration for the kinds of principal a directory holds."""

    USER = "user"
    GROUP = "group"


@dataclass(frozen=True)
class PrincipalRef:
    """
    Reference to a resolved principal.

    Only ever used as an argument to membership calls; the identifier is
    opaque and the domain is carried over unchanged from the lookup result.
    """

    id: str
    kind: PrincipalKind
    domain: str
    name: Optional[str] = None


@dataclass(frozen=True)
class MemberTarget:
    """A principal name paired with the kind it must resolve as."""

    name: str
    kind: PrincipalKind

    def __str__(self) -> str:
        return f"{self.kind.value} '{self.name}'"


@dataclass
class GroupChangeSet:
    """
    Changes requested for a single group update.

    Built once from caller input, consumed by the update workflow and then
    discarded. A field left as None means no change for that field.
    """

    description: Optional[str] = None
    add: Optional[MemberTarget] = None
    remove: Optional[MemberTarget] = None

    @classmethod
    def from_options(
        cls,
        description: Optional[str] = None,
        add: Optional[str] = None,
        remove: Optional[str] = None,
        target_is_group: bool = False,
    ) -> "GroupChangeSet":
        """
        Create a change-set from raw command options.

        Empty strings are treated the same as missing values. The kind selector
        applies to both the add and the remove target.

        Args:
            description: Replacement description text
            add: Name of the principal to add
            remove: Name of the principal to remove
            target_is_group: Whether add/remove name groups rather than users

        Returns:
            GroupChangeSet instance
        """
        kind = PrincipalKind.GROUP if target_is_group else PrincipalKind.USER
        return cls(
            description=description or None,
            add=MemberTarget(name=add, kind=kind) if add else None,
            remove=MemberTarget(name=remove, kind=kind) if remove else None,
        )

    def is_empty(self) -> bool:
        """Check whether no change was requested."""
        return self.description is None and self.add is None and self.remove is None

    def describe(self) -> List[str]:
        """Get one human-readable line per requested change."""
        lines = []
        if self.description is not None:
            lines.append(f'Set description to "{self.description}"')
        if self.add is not None:
            lines.append(f"Add {self.add}")
        if self.remove is not None:
            lines.append(f"Remove {self.remove}")
        return lines
