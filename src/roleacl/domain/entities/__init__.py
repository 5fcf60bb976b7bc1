"""Domain entities."""

from roleacl.domain.entities.role import Role

__all__ = [
    "Role",
]
