"""In-memory store implementation."""

from loguru import logger

from roleacl.domain.entities import Role
from roleacl.domain.exceptions import NotFound
from roleacl.domain.value_objects import Permission


class InMemoryStore:
    """Store implementation backed by a dict keyed by role name."""

    def __init__(self) -> None:
        self._roles: dict[str, Role] = {}

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, name: object) -> bool:
        return name in self._roles

    def add_role(self, name: str, inherits: str) -> bool:
        """Insert role; an existing name keeps its original record."""
        if name in self._roles:
            logger.debug("Role {} already exists, ignoring re-add", name)
            return True
        self._roles[name] = Role(name=name, parent=inherits)
        logger.debug("Added role {} (parent={!r})", name, inherits)
        return True

    def get_role(self, name: str) -> Role:
        """Get role snapshot by name."""
        if not self._roles:
            raise NotFound("Role", name)
        role = self._roles.get(name)
        if role is None:
            raise NotFound("Role", name)
        return role

    def exists(self, name: str) -> bool:
        return name in self._roles

    def update_permissions(self, name: str, action: str, resource: str) -> bool:
        """Replace the stored role with a copy carrying the new permission."""
        role = self._roles.get(name)
        if role is None:
            raise NotFound("Role", name)
        self._roles[name] = role.with_permission(Permission(action, resource))
        logger.debug("Granted {}:{} to role {}", action, resource, name)
        return True
