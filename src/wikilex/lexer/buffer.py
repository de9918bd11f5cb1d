"""Append-only token buffer with text merging.

The buffer is where tokens get their coordinates. Token values cover the
source without gaps or overlap, so the start of each new token is exactly
where the previous one ended: the buffer advances its line, column and
offset over each stored value. This keeps coordinates correct no matter
how far a state read ahead before emitting.

Merge rule: a TEXT token stored right after a TEXT token replaces it with
one longer TEXT token that keeps the earlier token's coordinates.

Thread Safety:
TokenBuffer instances are local to each tokenize() call.

"""

from __future__ import annotations

from wikilex.lexer.markers import NEWLINE
from wikilex.tokens import Token, TokenType


class TokenBuffer:
    """Ordered token accumulator.

    Usage:
            >>> buf = TokenBuffer()
            >>> buf.append(TokenType.TEXT, "ab")
            >>> buf.append(TokenType.TEXT, "c")
            >>> buf.tokens()
            [Token(TEXT, 'abc', 1:1)]

    """

    __slots__ = ("_tokens", "_lineno", "_col", "_offset", "_source_file")

    def __init__(self, source_file: str | None = None) -> None:
        self._tokens: list[Token] = []
        self._lineno = 1
        self._col = 1
        self._offset = 0
        self._source_file = source_file

    def append(self, token_type: TokenType, value: str) -> None:
        """Store a token for value, merging consecutive text.

        Empty values carry no source text and are dropped.
        """
        if not value:
            return

        last = self._tokens[-1] if self._tokens else None
        if token_type is TokenType.TEXT and last is not None and last.type is TokenType.TEXT:
            self._tokens[-1] = Token(
                type=TokenType.TEXT,
                value=last.value + value,
                _lineno=last.lineno,
                _col=last.col_offset,
                _offset=last.offset,
                _source_file=self._source_file,
            )
        else:
            self._tokens.append(
                Token(
                    type=token_type,
                    value=value,
                    _lineno=self._lineno,
                    _col=self._col,
                    _offset=self._offset,
                    _source_file=self._source_file,
                )
            )
        self._advance_over(value)

    def _advance_over(self, value: str) -> None:
        newline_count = value.count(NEWLINE)
        if newline_count > 0:
            self._lineno += newline_count
            self._col = len(value) - value.rfind(NEWLINE)
        else:
            self._col += len(value)
        self._offset += len(value)

    @property
    def offset(self) -> int:
        """Number of source characters covered so far."""
        return self._offset

    def tokens(self) -> list[Token]:
        """Return the stored tokens as a new list."""
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)
