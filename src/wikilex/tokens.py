"""Token and TokenType definitions for the wikilex tokenizer.

The tokenizer produces a flat list of Token objects that a parser consumes.
Each Token has a type, the exact source substring it was made from, and
its source coordinates.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wikilex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the tokenizer.

    Values are stable strings rather than ordinals so token streams can be
    logged and persisted without versioning against the enum order.

    """

    # Text and line structure
    TEXT = "text"
    EOL = "eol"  # \n
    NEW_PARAGRAPH = "new-paragraph"  # blank line

    # Quote formatting
    ITALIC = "italic-toggle"  # ''
    BOLD = "bold-toggle"  # '''

    # HTML and extension tags
    OPEN_START_TAG = "open-start-tag"  # <
    OPEN_END_TAG = "open-end-tag"  # </
    CLOSE_ANGLE = "close-angle"  # >
    END_TAG = "end-tag"  # />
    TAG_NAME = "tag-name"

    # Comments
    COMMENT_BEGIN = "comment-begin"  # <!--
    COMMENT_END = "comment-end"  # -->

    # Signatures
    SIGNATURE = "signature"  # ~~~
    SIGNATURE_DATETIME = "signature-date-time"  # ~~~~
    DATE_TIME = "date-time"  # ~~~~~

    # Templates
    TEMPLATE_BEGIN = "template-begin"  # {{
    TEMPLATE_END = "template-end"  # }}

    # Headings
    HEADING_BEGIN = "heading-begin"  # = (up to 6)
    HEADING_END = "heading-end"  # =

    # Lists and definitions
    UNORDERED_LIST_ENTRY = "unordered-list-entry"  # * at start of line
    NUMBERED_LIST_ENTRY = "numbered-list-entry"  # # at start of line
    DEFINED_PHRASE = "defined-phrase"  # ; at start of line
    DEFINITION = "definition"  # : after defined phrase
    INDENT = "indent"  # : at start of line

    # Links
    LINK_BEGIN = "link-begin"  # [[
    LINK_END = "link-end"  # ]]
    OPEN_BRACKET = "open-bracket"  # [
    CLOSE_BRACKET = "close-bracket"  # ]

    # Context-dependent symbols, interpreted by the parser
    PIPE = "pipe"  # |
    EXCLAMATION_MARK = "exclamation-mark"  # !
    SPACES = "spaces"  # one or more ' '
    COLONS = "colons"  # ':'
    SEMICOLONS = "semicolons"  # one or more ';'
    DASHES = "dashes"  # one or more '-'
    HASHES = "hashes"  # one or more '#'
    ASTERISKS = "asterisks"  # one or more '*'

    # Magic words and special text
    EMAIL = "email"  # mailto:
    REDIRECT = "redirect"  # #REDIRECT
    FORCETOC = "forcetoc"  # __FORCETOC__
    TOC = "toc"  # __TOC__
    NOTOC = "notoc"  # __NOTOC__
    NBSP = "nbsp"  # &nbsp;
    SPECIAL_CHAR = "special-char"  # &quot; etc.
    UNICODE_CHAR = "unicode-char"  # &#<code>;

    # Tables
    TABLE_BEGIN = "table-begin"  # {|
    TABLE_END = "table-end"  # |}
    TABLE_CAPTION = "table-caption"  # |+
    TABLE_ROW = "table-row"  # |-


# Declared for the parser's benefit but never produced by the tokenizer.
# Recognition rules for these have to be defined before a state emits them.
RESERVED_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.NEW_PARAGRAPH,
        TokenType.END_TAG,
        TokenType.SIGNATURE,
        TokenType.SIGNATURE_DATETIME,
        TokenType.DATE_TIME,
        TokenType.HEADING_BEGIN,
        TokenType.HEADING_END,
        TokenType.UNORDERED_LIST_ENTRY,
        TokenType.NUMBERED_LIST_ENTRY,
        TokenType.DEFINED_PHRASE,
        TokenType.DEFINITION,
        TokenType.INDENT,
        TokenType.SEMICOLONS,
        TokenType.ASTERISKS,
        TokenType.EMAIL,
        TokenType.REDIRECT,
        TokenType.FORCETOC,
        TokenType.TOC,
        TokenType.NOTOC,
        TokenType.NBSP,
        TokenType.SPECIAL_CHAR,
        TokenType.UNICODE_CHAR,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Tokens are the atomic units passed from tokenizer to parser.
    The value is always the exact, non-empty source substring the token was
    made from, so joining the values of a token list restores the input.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _offset: Absolute start position in source
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    _lineno: int = 1
    _col: int = 1
    _offset: int = 0
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col_offset(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def offset(self) -> int:
        """Absolute start offset in the source."""
        return self._offset

    @property
    def end_offset(self) -> int:
        """Absolute end offset (exclusive) in the source."""
        return self._offset + len(self.value)

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def tag_name(self) -> str | None:
        """Normalized tag name for TAG_NAME tokens, None for other types.

        The raw value may carry padding and mixed case (``<  DIV >``);
        this returns the table spelling (``div``).
        """
        if self.type is not TokenType.TAG_NAME:
            return None
        from wikilex.lexer.tags import normalize_tag_name

        return normalize_tag_name(self.value)

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from wikilex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            end_offset=self.end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"
