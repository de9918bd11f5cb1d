"""Minimal logging utilities for wikilex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from wikilex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing page")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "wikilex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'wikilex.mymodule'
    """
    if not (name == "wikilex" or name.startswith("wikilex.")):
        name = f"wikilex.{name}"
    return logging.getLogger(name)
