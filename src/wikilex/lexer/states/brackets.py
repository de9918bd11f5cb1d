"""Two-character structural markers: templates, tables and links.

Each state is entered on the opening character and decides with exactly
one character of lookahead. If the second character completes a marker,
the marker token is stored. Otherwise the opening character is stored on
its own (as text for braces, as a symbol token for brackets and pipes)
and the second character is read again by the text state.
"""

from __future__ import annotations

from typing import ClassVar

from wikilex.lexer.states.base import BaseState, Transition
from wikilex.tokens import TokenType


class _PairState(BaseState):
    """Resolves an opening character against its possible second characters."""

    __slots__ = ()

    # Second character -> token type for the completed marker
    pairs: ClassVar[dict[str, TokenType]]
    # Token type for the opening character on its own
    single_type: ClassVar[TokenType]

    def consume(self, char: str) -> Transition:
        token_type = self.pairs.get(char)
        if token_type is not None:
            self._emit(token_type, self.value + char)
            return self._resume()

        self._emit(self.single_type, self.value)
        return self._resume(pushback=True)

    def finalize(self) -> None:
        self._emit(self.single_type, self.value)


class BraceOpenState(_PairState):
    """Entered on '{': ``{{`` template or ``{|`` table."""

    __slots__ = ()

    pairs = {"{": TokenType.TEMPLATE_BEGIN, "|": TokenType.TABLE_BEGIN}
    single_type = TokenType.TEXT


class BraceCloseState(_PairState):
    """Entered on '}': ``}}`` template end."""

    __slots__ = ()

    pairs = {"}": TokenType.TEMPLATE_END}
    single_type = TokenType.TEXT


class BracketOpenState(_PairState):
    """Entered on '[': ``[[`` link or a lone bracket."""

    __slots__ = ()

    pairs = {"[": TokenType.LINK_BEGIN}
    single_type = TokenType.OPEN_BRACKET


class BracketCloseState(_PairState):
    """Entered on ']': ``]]`` link end or a lone bracket."""

    __slots__ = ()

    pairs = {"]": TokenType.LINK_END}
    single_type = TokenType.CLOSE_BRACKET


class PipeState(_PairState):
    """Entered on '|': table end, caption, row, or a lone pipe."""

    __slots__ = ()

    pairs = {
        "}": TokenType.TABLE_END,
        "+": TokenType.TABLE_CAPTION,
        "-": TokenType.TABLE_ROW,
    }
    single_type = TokenType.PIPE
