"""AWS Identity Store implementation of the directory client."""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import GroupNotFoundError, UnsupportedMemberError
from .client import DirectoryClient
from .models import PrincipalKind, PrincipalRef

logger = logging.getLogger(__name__)


class IdentityStoreDirectory(DirectoryClient):
    """
    Directory client backed by the AWS Identity Store API.

    Groups are addressed by display name and users by user name. Every call
    goes to the service; nothing is cached between calls.

    Args:
        identity_store_client: boto3 identitystore client (or wrapper)
        identity_store_id: ID of the Identity Store to operate on
    """

    def __init__(self, identity_store_client: Any, identity_store_id: str):
        self.client = identity_store_client
        self.identity_store_id = identity_store_id

    def _list_by_attribute(
        self, operation: str, result_key: str, attribute_path: str, value: str
    ) -> List[Dict[str, Any]]:
        """Run a filtered list call and return the matching items."""
        response = getattr(self.client, operation)(
            IdentityStoreId=self.identity_store_id,
            Filters=[{"AttributePath": attribute_path, "AttributeValue": value}],
        )
        items = response.get(result_key, [])
        if len(items) > 1:
            logger.warning(f"Multiple entries found matching '{value}', using the first match")
        return items

    def _get_group_id(self, group_name: str) -> str:
        group = self.find_group(group_name)
        if group is None:
            raise GroupNotFoundError(group_name)
        return group.id

    def _member_id(self, group_name: str, principal: PrincipalRef) -> Dict[str, str]:
        # Identity Store groups can only contain users
        if principal.kind != PrincipalKind.USER:
            raise UnsupportedMemberError(
                group_name, principal.name or principal.id, principal.kind.value
            )
        return {"UserId": principal.id}

    def update_group_description(self, group_name: str, description: str) -> None:
        group_id = self._get_group_id(group_name)
        self.client.update_group(
            IdentityStoreId=self.identity_store_id,
            GroupId=group_id,
            Operations=[{"AttributePath": "Description", "AttributeValue": description}],
        )
        logger.debug(f"Updated description of group {group_id}")

    def find_user(self, name: str) -> Optional[PrincipalRef]:
        users = self._list_by_attribute("list_users", "Users", "UserName", name)
        if not users:
            return None
        return PrincipalRef(
            id=users[0]["UserId"],
            kind=PrincipalKind.USER,
            domain=users[0].get("IdentityStoreId", self.identity_store_id),
            name=users[0].get("UserName", name),
        )

    def find_group(self, name: str) -> Optional[PrincipalRef]:
        groups = self._list_by_attribute("list_groups", "Groups", "DisplayName", name)
        if not groups:
            return None
        return PrincipalRef(
            id=groups[0]["GroupId"],
            kind=PrincipalKind.GROUP,
            domain=groups[0].get("IdentityStoreId", self.identity_store_id),
            name=groups[0].get("DisplayName", name),
        )

    def add_principal_to_group(self, group_name: str, principal: PrincipalRef) -> None:
        member_id = self._member_id(group_name, principal)
        group_id = self._get_group_id(group_name)
        response = self.client.create_group_membership(
            IdentityStoreId=self.identity_store_id,
            GroupId=group_id,
            MemberId=member_id,
        )
        logger.debug(f"Created membership {response.get('MembershipId')} in group {group_id}")

    def remove_principal_from_group(self, group_name: str, principal: PrincipalRef) -> None:
        member_id = self._member_id(group_name, principal)
        group_id = self._get_group_id(group_name)
        # Raises ResourceNotFoundException if the principal is not a member
        response = self.client.get_group_membership_id(
            IdentityStoreId=self.identity_store_id,
            GroupId=group_id,
            MemberId=member_id,
        )
        membership_id = response["MembershipId"]
        self.client.delete_group_membership(
            IdentityStoreId=self.identity_store_id, MembershipId=membership_id
        )
        logger.debug(f"Deleted membership {membership_id} from group {group_id}")
