"""Domain value objects."""

from roleacl.domain.value_objects.permission import Permission

__all__ = [
    "Permission",
]
