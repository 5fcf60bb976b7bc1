"""Loguru sink setup."""

import sys

from loguru import logger


def configure_logging(level: str = "WARNING", serialize: bool = False) -> int:
    """Replace loguru's default sink with a stderr sink at ``level``.

    Returns the sink id so callers can remove it again.
    """
    logger.remove()
    return logger.add(sys.stderr, level=level.upper(), serialize=serialize)
