"""Composition root."""

from roleacl.application.acl import Acl
from roleacl.application.ports import Store
from roleacl.config import Settings, get_settings
from roleacl.infrastructure.logging import configure_logging
from roleacl.infrastructure.persistence.memory import InMemoryStore


def create_acl(settings: Settings | None = None, store: Store | None = None) -> Acl:
    """Build an Acl with logging configured from settings.

    Uses a fresh InMemoryStore unless another Store is given.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, serialize=settings.log_json)
    return Acl(
        store if store is not None else InMemoryStore(),
        raise_on_cycle=settings.raise_on_cycle,
    )
