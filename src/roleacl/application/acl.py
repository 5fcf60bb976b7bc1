"""Acl service - role registration, grants and permission evaluation."""

from collections.abc import Iterable

from loguru import logger

from roleacl.application.ports import Store
from roleacl.domain.exceptions import (
    CyclicInheritance,
    EmptyName,
    NotFound,
    PreconditionViolation,
)


class Acl:
    """Public RBAC API over a Store.

    Referencing an unknown role in ``allow`` or ``available`` is a caller bug
    and raises PreconditionViolation. Missing data met while walking a parent
    chain is an ordinary outcome and evaluates to False.
    """

    def __init__(self, store: Store, *, raise_on_cycle: bool = True) -> None:
        self._store = store
        self._raise_on_cycle = raise_on_cycle

    @property
    def store(self) -> Store:
        return self._store

    def add_role(self, name: str, inherits: str = "") -> None:
        """Register role ``name`` with optional parent ``inherits``.

        The parent does not have to exist yet. Re-adding a name keeps the
        first registration.
        """
        if not name:
            raise EmptyName()
        self._store.add_role(name, inherits)

    def allow(self, roles: Iterable[str], action: str, resource: str) -> None:
        """Grant (action, resource) to every role in ``roles``.

        All roles are checked before any grant is applied.
        """
        roles = list(roles)
        missing = [r for r in roles if not self._store.exists(r)]
        if missing:
            raise PreconditionViolation(f"allow() on unknown roles: {missing}")
        for role in roles:
            self._store.update_permissions(role, action, resource)

    def available(self, role: str, action: str, resource: str) -> bool:
        """Check whether ``role`` or one of its ancestors is granted (action, resource)."""
        if not self._store.exists(role):
            raise PreconditionViolation(f"available() on unknown role: {role!r}")

        chain: list[str] = []
        seen: set[str] = set()
        name = role
        while True:
            if name in seen:
                chain.append(name)
                if self._raise_on_cycle:
                    raise CyclicInheritance(chain)
                logger.warning("Cyclic inheritance {}, treating as denied", " -> ".join(chain))
                return False
            chain.append(name)
            seen.add(name)

            try:
                current = self._store.get_role(name)
            except NotFound:
                if name != role:
                    logger.warning("Role {} inherits from unregistered role {}", chain[-2], name)
                return False

            if current.grants(action, resource):
                logger.debug("{} may {} {} (granted on {})", role, action, resource, name)
                return True
            if not current.has_parent:
                logger.debug("{} may not {} {}", role, action, resource)
                return False
            name = current.parent
