"""Exception classes for wikilex.

Tokenization itself never raises: malformed markup degrades to text tokens.
These exceptions cover the surrounding API (configuration and token stream
deserialization).
"""

from __future__ import annotations

from typing import Any


class WikilexError(Exception):
    """Base exception for all wikilex errors.

    Subclass this for specific error categories.
    """

    pass


class TokenDecodeError(WikilexError, ValueError):
    """Error while rebuilding tokens from serialized records.

    Raised when a record is missing fields or names an unknown token type.
    """

    def __init__(
        self,
        message: str,
        record: Any = None,
        lineno: int | None = None,
    ) -> None:
        """Initialize decode error.

        Args:
            message: Error description
            record: The offending record (optional)
            lineno: Line number stored in the record, when known
        """
        self.message = message
        self.record = record
        self.lineno = lineno

        location = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{location}{message}")


class ConfigError(WikilexError, ValueError):
    """Error in tokenizer configuration values."""

    def __init__(self, key: str, message: str) -> None:
        """Initialize config error.

        Args:
            key: Name of the offending configuration key
            message: Description of the problem
        """
        self.key = key
        super().__init__(f"Config '{key}': {message}")
