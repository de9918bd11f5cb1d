"""Character-driven FSM tokenizer for wikitext.

Reads the source one character at a time and feeds each character to the
active state. A state answers with a Transition: the state to continue with,
and whether the character has to be read again because it belongs to the
next token (pushback). Pushback is the only backward movement, so every
character is read at most twice.

Malformed markup never raises. Unknown tags, incomplete markers and stray
symbols degrade to text or to standalone symbol tokens.

Thread Safety:
Tokenizer instances are single-use. Create one per source string.
All state is instance-local; the tag tables are immutable.

"""

from __future__ import annotations

from wikilex.lexer.buffer import TokenBuffer
from wikilex.lexer.cursor import Cursor
from wikilex.lexer.states import BaseState, TextState
from wikilex.lexer.tags import DEFAULT_TAG_TABLE, TagTable
from wikilex.tokens import Token, TokenType
from wikilex.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer:
    """FSM tokenizer for wikitext.

    Usage:
            >>> tokenizer = Tokenizer("''italic''")
            >>> for token in tokenizer.tokenize():
            ...     print(token)
        Token(ITALIC, "''", 1:1)
        Token(TEXT, 'italic', 1:3)
        Token(ITALIC, "''", 1:9)

    Thread Safety:
        Tokenizer instances are single-use. Create one per source string.

    """

    __slots__ = ("_cursor", "_buffer", "_tags", "_source_file", "_pushbacks")

    def __init__(
        self,
        source: str,
        *,
        source_file: str | None = None,
        tags: TagTable | None = None,
    ) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Wikitext source
            source_file: Optional source file path, copied to token locations
            tags: Tag table for tag recognition (defaults to the built-in tables)
        """
        self._cursor = Cursor(source)
        self._buffer = TokenBuffer(source_file)
        self._tags = tags if tags is not None else DEFAULT_TAG_TABLE
        self._source_file = source_file
        self._pushbacks = 0

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Tokens in source order. Joining their values gives the source.
        """
        cursor = self._cursor
        state: BaseState = self.default_state()

        while not cursor.at_end:
            char = cursor.read()
            state, pushback = state.consume(char)
            if pushback:
                cursor.retreat(1)
                self._pushbacks += 1

        # Give the last state a chance to store its token.
        state.finalize()

        tokens = self._buffer.tokens()
        logger.debug(
            "Tokenized %s: %d chars, %d tokens, %d pushbacks",
            self._source_file or "<string>",
            len(cursor.text),
            len(tokens),
            self._pushbacks,
        )
        return tokens

    # =========================================================================
    # State host interface
    # =========================================================================

    @property
    def tags(self) -> TagTable:
        return self._tags

    def emit(self, token_type: TokenType, value: str) -> None:
        """Store a token."""
        self._buffer.append(token_type, value)

    def look_back(self, count: int) -> str:
        """Return up to count characters before the one being processed."""
        return self._cursor.look_back(count)

    def default_state(self, pending: str = "") -> BaseState:
        """Create the default text state."""
        return TextState(self, pending)

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def pushback_count(self) -> int:
        """Number of characters that were read twice."""
        return self._pushbacks
