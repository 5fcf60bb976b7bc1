"""Store port - role persistence."""

from typing import Protocol

from roleacl.domain.entities import Role


class Store(Protocol):
    """Port for role persistence.

    Implementations hand out immutable Role snapshots and replace the stored
    record on every mutation.
    """

    def add_role(self, name: str, inherits: str) -> bool:
        """Insert a role unless ``name`` exists; always returns True."""
        ...

    def get_role(self, name: str) -> Role:
        """Return the role snapshot or raise NotFound."""
        ...

    def exists(self, name: str) -> bool: ...

    def update_permissions(self, name: str, action: str, resource: str) -> bool:
        """Append a permission to the role or raise NotFound."""
        ...
