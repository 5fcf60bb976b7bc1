"""Permission value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Permission:
    """Granted (action, resource) pair."""

    action: str
    resource: str

    def matches(self, action: str, resource: str) -> bool:
        return self.action == action and self.resource == resource
