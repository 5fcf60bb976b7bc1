"""Pytest fixtures for roleacl tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

from roleacl.application.acl import Acl
from roleacl.domain.entities import Role
from roleacl.domain.exceptions import NotFound
from roleacl.domain.value_objects import Permission
from roleacl.infrastructure.persistence.memory import InMemoryStore


# --- Fake store ---


class RecordingStore:
    """Dict-backed store that records every call made through the Store protocol."""

    def __init__(self) -> None:
        self._roles: dict[str, Role] = {}
        self.calls: list[tuple[str, ...]] = []

    def add_role(self, name: str, inherits: str) -> bool:
        self.calls.append(("add_role", name, inherits))
        self._roles.setdefault(name, Role(name=name, parent=inherits))
        return True

    def get_role(self, name: str) -> Role:
        self.calls.append(("get_role", name))
        if name not in self._roles:
            raise NotFound("Role", name)
        return self._roles[name]

    def exists(self, name: str) -> bool:
        self.calls.append(("exists", name))
        return name in self._roles

    def update_permissions(self, name: str, action: str, resource: str) -> bool:
        self.calls.append(("update_permissions", name, action, resource))
        if name not in self._roles:
            raise NotFound("Role", name)
        self._roles[name] = self._roles[name].with_permission(Permission(action, resource))
        return True

    def put(self, role: Role) -> None:
        """Helper to store a role with an arbitrary parent (for tests)."""
        self._roles[role.name] = role

    def drop(self, name: str) -> None:
        """Helper to remove a role behind the Acl's back (for tests)."""
        self._roles.pop(name, None)


# --- Fixtures ---


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh in-memory store for each test."""
    return InMemoryStore()


@pytest.fixture
def acl(store: InMemoryStore) -> Acl:
    """Acl over the in-memory store fixture."""
    return Acl(store)


@pytest.fixture
def recording_store() -> RecordingStore:
    """Fake store recording protocol calls."""
    return RecordingStore()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru records as 'LEVEL message' strings."""
    messages: list[str] = []
    sink_id = logger.add(
        lambda m: messages.append(f"{m.record['level'].name} {m.record['message']}"),
        level="DEBUG",
    )
    yield messages
    logger.remove(sink_id)
