"""boto3 session handling for ssoadm."""

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)


class AWSClientManager:
    """
    Owns the boto3 session used to reach the Identity Store.

    When no region is given, the region configured for the AWS profile is
    used. A missing AWS profile raises botocore's ProfileNotFound.

    Args:
        profile: AWS CLI profile name, or None for the default credential chain
        region: AWS region of the Identity Store
    """

    def __init__(self, profile: Optional[str] = None, region: Optional[str] = None):
        self.profile = profile
        self.region = region or self._profile_region()
        self.session = boto3.Session(profile_name=self.profile, region_name=self.region)
        self._identity_store_client: Optional["IdentityStoreClientWrapper"] = None

    def _profile_region(self) -> Optional[str]:
        if not self.profile:
            return None
        return boto3.Session(profile_name=self.profile).region_name

    def validate_session(self) -> bool:
        """
        Check that the session's credentials are usable.

        Returns:
            True if STS accepts the credentials, False otherwise
        """
        try:
            identity = self.session.client("sts").get_caller_identity()
        except (BotoCoreError, ClientError) as e:
            logger.debug(f"Session validation failed: {e}")
            return False

        logger.debug(f"Authenticated as {identity.get('Arn')}")
        return True

    def get_client(self, service_name: str) -> Any:
        """Create a boto3 client for a service from the managed session."""
        return self.session.client(service_name)

    def get_raw_identity_store_client(self) -> Any:
        """Create a boto3 identitystore client."""
        return self.get_client("identitystore")

    def get_identity_store_client(self) -> "IdentityStoreClientWrapper":
        """
        Get the Identity Store client for this session.

        The same wrapper is returned on every call. It creates the boto3
        client the first time an API method is used.
        """
        if self._identity_store_client is None:
            self._identity_store_client = IdentityStoreClientWrapper(self)
        return self._identity_store_client


class IdentityStoreClientWrapper:
    """Lazily created identitystore client that forwards API calls."""

    def __init__(self, client_manager: AWSClientManager):
        self.client_manager = client_manager
        self._client = None

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self.client_manager.get_raw_identity_store_client()
        return self._client

    def __getattr__(self, name: str) -> Any:
        return getattr(self.client, name)
