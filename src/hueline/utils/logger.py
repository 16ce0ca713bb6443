"""Minimal logging utilities for hueline.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configure logging in the application.

Example:
    >>> from hueline.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Updating syntax")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "hueline." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scheduler")
        >>> logger.name
        'hueline.scheduler'
    """
    if not (name == "hueline" or name.startswith("hueline.")):
        name = f"hueline.{name}"
    return logging.getLogger(name)
