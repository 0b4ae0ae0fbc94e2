"""Shared fixtures for ssoadm tests."""

from typing import Dict, List, Optional, Tuple

import pytest

from ssoadm.directory.client import DirectoryClient
from ssoadm.directory.models import PrincipalKind, PrincipalRef

DOMAIN = "d-1234567890"


def make_user(name: str, user_id: Optional[str] = None) -> PrincipalRef:
    return PrincipalRef(
        id=user_id or f"user-{name}", kind=PrincipalKind.USER, domain=DOMAIN, name=name
    )


def make_group(name: str, group_id: Optional[str] = None) -> PrincipalRef:
    return PrincipalRef(
        id=group_id or f"group-{name}", kind=PrincipalKind.GROUP, domain=DOMAIN, name=name
    )


class RecordingDirectory(DirectoryClient):
    """In-memory directory client that records every call in order."""

    def __init__(self, users: List[str] = (), groups: List[str] = ()):
        self.users: Dict[str, PrincipalRef] = {name: make_user(name) for name in users}
        self.groups: Dict[str, PrincipalRef] = {name: make_group(name) for name in groups}
        self.calls: List[Tuple] = []
        self.failures: Dict[str, Exception] = {}

    def fail_on(self, method: str, error: Exception) -> None:
        self.failures[method] = error

    def _record(self, method: str, *args) -> None:
        self.calls.append((method,) + args)
        if method in self.failures:
            raise self.failures[method]

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def update_group_description(self, group_name, description):
        self._record("update_group_description", group_name, description)

    def find_user(self, name):
        self._record("find_user", name)
        return self.users.get(name)

    def find_group(self, name):
        self._record("find_group", name)
        return self.groups.get(name)

    def add_principal_to_group(self, group_name, principal):
        self._record("add_principal_to_group", group_name, principal)

    def remove_principal_from_group(self, group_name, principal):
        self._record("remove_principal_from_group", group_name, principal)


@pytest.fixture
def directory():
    """Directory with users alice and bob and groups eng and ops."""
    return RecordingDirectory(users=["alice", "bob"], groups=["eng", "ops"])


@pytest.fixture
def empty_directory():
    """Directory with no users or groups."""
    return RecordingDirectory()


@pytest.fixture
def temp_config(tmp_path):
    """Config instance backed by a temporary directory."""
    from ssoadm.utils.config import Config

    config = Config()
    config._config_dir = tmp_path
    config._config_file = tmp_path / "config.yaml"
    return config
