"""Domain exceptions."""


class RoleACLError(Exception):
    """Base exception for recoverable roleacl errors."""

    pass


class NotFound(RoleACLError):
    """Requested role was not found in the store."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(entity, key)
        self.entity = entity
        self.key = key

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key!r}"


class ValidationError(RoleACLError):
    """Validation failed for input data."""

    pass


class EmptyName(ValidationError):
    """Role name is the empty string."""

    def __init__(self, message: str = "role name must not be empty") -> None:
        super().__init__(message)


class CyclicInheritance(RoleACLError):
    """Parent chain loops back to a role already visited."""

    def __init__(self, chain: list[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(f"cyclic inheritance: {' -> '.join(self.chain)}")


class PreconditionViolation(AssertionError):
    """Caller referenced a role that does not exist.

    This signals a programming error, not a recoverable outcome. It does not
    derive from RoleACLError so handlers for recoverable errors never catch it.
    """

    pass
