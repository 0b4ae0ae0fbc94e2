"""Group update workflow.

Applies a change-set to a group in a fixed order: description first, then the
member to add, then the member to remove. The first failure aborts the update
and earlier steps are not rolled back.
"""

import logging

from ..exceptions import PrincipalNotFoundError
from .client import DirectoryClient
from .models import GroupChangeSet, MemberTarget, PrincipalKind, PrincipalRef

logger = logging.getLogger(__name__)


def resolve_principal(client: DirectoryClient, target: MemberTarget) -> PrincipalRef:
    """
    Resolve a member target to a principal reference.

    Args:
        client: Identity-service client
        target: Name and kind of the principal to resolve

    Returns:
        The resolved PrincipalRef

    Raises:
        PrincipalNotFoundError: If the service reports no principal of that kind
    """
    if target.kind == PrincipalKind.GROUP:
        principal = client.find_group(target.name)
    else:
        principal = client.find_user(target.name)

    if principal is None:
        raise PrincipalNotFoundError(target.name, target.kind.value)

    logger.debug(f"Resolved {target} to {principal.id} in domain {principal.domain}")
    return principal


def update_group(client: DirectoryClient, group_name: str, changes: GroupChangeSet) -> None:
    """
    Update the description and membership of a group.

    Args:
        client: Identity-service client
        group_name: Name of the group to update
        changes: Requested changes

    Raises:
        PrincipalNotFoundError: If the add or remove target does not exist
        Exception: Any error raised by the client, unmodified
    """
    if changes.description is not None:
        logger.info(f"Updating description of group '{group_name}'")
        client.update_group_description(group_name, changes.description)

    if changes.add is not None:
        principal = resolve_principal(client, changes.add)
        logger.info(f"Adding {changes.add} to group '{group_name}'")
        client.add_principal_to_group(group_name, principal)

    if changes.remove is not None:
        principal = resolve_principal(client, changes.remove)
        logger.info(f"Removing {changes.remove} from group '{group_name}'")
        client.remove_principal_from_group(group_name, principal)

    logger.debug(f"Group '{group_name}' update complete")
