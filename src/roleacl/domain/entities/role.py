"""Role entity for RBAC."""

from dataclasses import dataclass, replace

from roleacl.domain.value_objects import Permission


@dataclass(frozen=True)
class Role:
    """Role snapshot - name, optional parent name and granted permissions.

    ``parent`` is a name reference resolved against the store at evaluation
    time; the empty string means the role has no parent.
    """

    name: str
    parent: str = ""
    permissions: tuple[Permission, ...] = ()

    @property
    def has_parent(self) -> bool:
        return self.parent != ""

    def grants(self, action: str, resource: str) -> bool:
        """Check own permissions only, ignoring the parent chain."""
        return any(p.matches(action, resource) for p in self.permissions)

    def with_permission(self, permission: Permission) -> "Role":
        """Return a new snapshot with ``permission`` appended."""
        return replace(self, permissions=(*self.permissions, permission))
