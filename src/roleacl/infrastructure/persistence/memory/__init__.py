"""In-memory persistence."""

from roleacl.infrastructure.persistence.memory.store import InMemoryStore

__all__ = [
    "InMemoryStore",
]
