"""Application ports - interfaces for external adapters."""

from roleacl.application.ports.store import Store

__all__ = [
    "Store",
]
