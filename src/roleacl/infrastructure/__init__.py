"""Infrastructure adapters - persistence and logging."""
