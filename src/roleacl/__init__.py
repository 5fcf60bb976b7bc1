"""roleacl - role-based access control with single-parent inheritance."""

from roleacl.application.acl import Acl
from roleacl.application.ports import Store
from roleacl.domain.entities import Role
from roleacl.domain.exceptions import (
    CyclicInheritance,
    EmptyName,
    NotFound,
    PreconditionViolation,
    RoleACLError,
    ValidationError,
)
from roleacl.domain.value_objects import Permission
from roleacl.infrastructure.persistence.memory import InMemoryStore

__version__ = "0.1.0"

__all__ = [
    "Acl",
    "CyclicInheritance",
    "EmptyName",
    "InMemoryStore",
    "NotFound",
    "Permission",
    "PreconditionViolation",
    "Role",
    "RoleACLError",
    "Store",
    "ValidationError",
    "__version__",
]
