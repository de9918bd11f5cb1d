"""Single-pass state-machine tokenizer for wikitext.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, Cursor, TokenBuffer, TagTable
├── core.py              # Tokenizer (driving loop + state host)
├── cursor.py            # Read position and line tracking
├── buffer.py            # Token storage, text merging, coordinates
├── tags.py              # HTML / extension tag tables
├── markers.py           # Marker strings
└── states/              # FSM states (see states/__init__.py)

Usage:
    >>> from wikilex.lexer import Tokenizer
    >>> for token in Tokenizer("{{tl|x}}").tokenize():
    ...     print(token)
Token(TEMPLATE_BEGIN, '{{', 1:1)
Token(TEXT, 'tl', 1:3)
Token(PIPE, '|', 1:5)
Token(TEXT, 'x', 1:6)
Token(TEMPLATE_END, '}}', 1:7)

"""

from wikilex.lexer.buffer import TokenBuffer
from wikilex.lexer.core import Tokenizer
from wikilex.lexer.cursor import Cursor
from wikilex.lexer.tags import DEFAULT_TAG_TABLE, TagTable

__all__ = ["Cursor", "DEFAULT_TAG_TABLE", "TagTable", "TokenBuffer", "Tokenizer"]
