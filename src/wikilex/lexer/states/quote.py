"""Quote run state: bold and italic toggles."""

from __future__ import annotations

from wikilex.lexer.markers import (
    BOLD_ITALIC_QUOTES,
    BOLD_MARKER,
    BOLD_QUOTES,
    ITALIC_MARKER,
    ITALIC_QUOTES,
    SINGLE_QUOTE,
)
from wikilex.lexer.states.base import BaseState, Transition
from wikilex.tokens import TokenType


def split_quote_run(count: int) -> tuple[int, bool, bool]:
    """Split a run of quotes into plain quotes, bold and italic.

    Quotes beyond five are plain text before the style change. Four quotes
    are one plain quote followed by bold. A lone quote is an apostrophe.

    Args:
        count: Number of consecutive quote characters

    Returns:
        (plain_quote_count, is_bold, is_italic)

    Example:
        >>> split_quote_run(4)
        (1, True, False)
        >>> split_quote_run(7)
        (2, True, True)
    """
    if count < ITALIC_QUOTES:
        return count, False, False

    plain = 0
    if count > BOLD_ITALIC_QUOTES:
        plain = count - BOLD_ITALIC_QUOTES
    elif count == BOLD_QUOTES + 1:
        plain = 1
    is_bold = count >= BOLD_QUOTES
    is_italic = count == ITALIC_QUOTES or count >= BOLD_ITALIC_QUOTES
    return plain, is_bold, is_italic


class QuoteState(BaseState):
    """Entered on a single quote. Collects the run and emits style toggles."""

    __slots__ = ()

    def consume(self, char: str) -> Transition:
        if char == SINGLE_QUOTE:
            self.value += char
            return self._stay()

        self._store_tokens()
        return self._resume(pushback=True)

    def finalize(self) -> None:
        self._store_tokens()

    def _store_tokens(self) -> None:
        plain, is_bold, is_italic = split_quote_run(len(self.value))
        if plain > 0:
            self._emit(TokenType.TEXT, SINGLE_QUOTE * plain)
        if is_bold:
            self._emit(TokenType.BOLD, BOLD_MARKER)
        if is_italic:
            self._emit(TokenType.ITALIC, ITALIC_MARKER)
