"""AWS service client management.

This package provides the boto3 session handling and the Identity Store
client wrapper used by the directory backend.
"""

from .manager import AWSClientManager, IdentityStoreClientWrapper

__all__ = [
    "AWSClientManager",
    "IdentityStoreClientWrapper",
]
