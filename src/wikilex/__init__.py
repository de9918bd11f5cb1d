"""
wikilex: Wikitext Tokenizer for Python

Turns raw wiki markup into a flat, ordered list of typed tokens for a
parser to assemble into a document tree. Single pass, never raises,
and the token values always join back into the exact source.

Quick Start:
    >>> from wikilex import tokenize
    >>> for token in tokenize("'''bold''' text"):
    ...     print(token.type.value, repr(token.value))
    bold-toggle "'''"
    text 'bold'
    bold-toggle "'''"
    text ' text'

Configuration:
    >>> from wikilex import TokenizeConfig, tokenize_config_context
    >>> with tokenize_config_context(TokenizeConfig(extra_tags=frozenset({"quiz"}))):
    ...     tokens = tokenize("<quiz>")
    >>> tokens[1].tag_name
    'quiz'

Installation:
    pip install wikilex              # Tokenizer (zero deps)
"""

from wikilex.config import (
    TokenizeConfig,
    get_tokenize_config,
    reset_tokenize_config,
    set_tokenize_config,
    tokenize_config_context,
)
from wikilex.errors import ConfigError, TokenDecodeError, WikilexError
from wikilex.lexer import Cursor, TagTable, TokenBuffer, Tokenizer
from wikilex.lexer.tags import (
    EXTENSION_TAGS,
    HTML_TAGS,
    is_tag,
    is_tag_prefix,
    normalize_tag_name,
    tag_table_for,
)
from wikilex.location import SourceLocation
from wikilex.profiling import (
    TokenizeAccumulator,
    get_tokenize_accumulator,
    profiled_tokenize,
)
from wikilex.serialization import from_dict, from_json, to_dict, to_json
from wikilex.tokens import RESERVED_TOKEN_TYPES, Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize wikitext into a list of tokens.

    Uses the tag table selected by the active TokenizeConfig.

    Args:
        source: Wikitext source
        source_file: Optional source file path, copied to token locations

    Returns:
        Tokens in source order. ``"".join(t.value for t in tokens) == source``
        for every input; the empty string yields an empty list.

    Example:
        >>> [t.type.name for t in tokenize("{|\\n|}")]
        ['TABLE_BEGIN', 'EOL', 'TABLE_END']
    """
    config = get_tokenize_config()
    tokenizer = Tokenizer(source, source_file=source_file, tags=tag_table_for(config))
    tokens = tokenizer.tokenize()

    acc = get_tokenize_accumulator()
    if acc is not None:
        acc.record_tokenize(len(source), len(tokens), tokenizer.pushback_count)

    return tokens


__all__ = [
    # Main API
    "tokenize",
    "Tokenizer",
    # Tokens
    "Token",
    "TokenType",
    "RESERVED_TOKEN_TYPES",
    "SourceLocation",
    # Lexer building blocks
    "Cursor",
    "TokenBuffer",
    "TagTable",
    "HTML_TAGS",
    "EXTENSION_TAGS",
    "normalize_tag_name",
    "is_tag",
    "is_tag_prefix",
    "tag_table_for",
    # Configuration
    "TokenizeConfig",
    "get_tokenize_config",
    "set_tokenize_config",
    "reset_tokenize_config",
    "tokenize_config_context",
    # Profiling
    "TokenizeAccumulator",
    "get_tokenize_accumulator",
    "profiled_tokenize",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "WikilexError",
    "TokenDecodeError",
    "ConfigError",
    "__version__",
]
