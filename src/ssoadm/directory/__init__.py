"""Directory model, client interface and group update workflow.

This package provides:
- Principal and change-set models
- The abstract identity-service client and its AWS Identity Store backend
- The group update workflow
"""

from .client import DirectoryClient
from .identity_store import IdentityStoreDirectory
from .models import GroupChangeSet, MemberTarget, PrincipalKind, PrincipalRef
from .workflow import resolve_principal, update_group

__all__ = [
    "DirectoryClient",
    "IdentityStoreDirectory",
    "GroupChangeSet",
    "MemberTarget",
    "PrincipalKind",
    "PrincipalRef",
    "resolve_principal",
    "update_group",
]
