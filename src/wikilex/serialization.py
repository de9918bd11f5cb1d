"""Token stream serialization: JSON round-trip for wikilex tokens.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching token streams between a tokenize step and a parse step
- Golden-file tests for parsers consuming the stream
- Debugging and inspection

Token types are written as their stable string values (``"bold-toggle"``),
never as enum ordinals. All output is deterministic (sorted keys).

Example:
    from wikilex import tokenize
    from wikilex.serialization import to_json, from_json

    tokens = tokenize("'''bold'''")
    restored = from_json(to_json(tokens))
    assert restored == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from wikilex.errors import TokenDecodeError
from wikilex.tokens import Token, TokenType

_REQUIRED_FIELDS = ("type", "value")
_COORDINATE_DEFAULTS = {"lineno": 1, "col_offset": 1, "offset": 0}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Args:
        token: Any wikilex token.

    Returns:
        Dict with type, value and coordinates.

    """
    return {
        "type": token.type.value,
        "value": token.value,
        "lineno": token.lineno,
        "col_offset": token.col_offset,
        "offset": token.offset,
        "source_file": token.source_file,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Rebuild a token from a dict.

    Coordinates are optional and default to the start of the source.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        Token (frozen dataclass).

    Raises:
        TokenDecodeError: If a required field is missing, the type is
            unknown, the value is not a non-empty string, or a coordinate
            is not an integer.

    """
    if not isinstance(data, dict):
        raise TokenDecodeError(f"Expected a token record, got {type(data).__name__}", data)

    lineno = data.get("lineno")
    if not isinstance(lineno, int) or isinstance(lineno, bool):
        lineno = None
    for name in _REQUIRED_FIELDS:
        if name not in data:
            raise TokenDecodeError(f"Missing {name!r} field in token record", data, lineno)

    try:
        token_type = TokenType(data["type"])
    except ValueError:
        msg = f"Unknown token type: {data['type']!r}"
        raise TokenDecodeError(msg, data, lineno) from None

    value = data["value"]
    if not isinstance(value, str) or not value:
        msg = f"Token value must be a non-empty string, got {value!r}"
        raise TokenDecodeError(msg, data, lineno)

    coords = {name: data.get(name, default) for name, default in _COORDINATE_DEFAULTS.items()}
    for name, coord in coords.items():
        # bool is an int subclass but never a valid coordinate
        if not isinstance(coord, int) or isinstance(coord, bool):
            msg = f"Field {name!r} must be an integer, got {coord!r}"
            raise TokenDecodeError(msg, data, lineno)

    source_file = data.get("source_file")
    if source_file is not None and not isinstance(source_file, str):
        msg = f"Field 'source_file' must be a string or null, got {source_file!r}"
        raise TokenDecodeError(msg, data, lineno)

    return Token(
        type=token_type,
        value=value,
        _lineno=coords["lineno"],
        _col=coords["col_offset"],
        _offset=coords["offset"],
        _source_file=source_file,
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string holding a list of token records.

    """
    return json.dumps([to_dict(token) for token in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token stream from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        List of tokens.

    Raises:
        TokenDecodeError: If the JSON doesn't hold a list of token records.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a list of token records, got {type(raw).__name__}"
        raise TokenDecodeError(msg, raw)
    return [from_dict(record) for record in raw]
