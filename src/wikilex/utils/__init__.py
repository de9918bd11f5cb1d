"""Utility modules for wikilex.

Provides:
- logger: get_logger for logging
"""

from wikilex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
