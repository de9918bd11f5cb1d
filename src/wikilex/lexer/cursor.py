"""Read cursor over the source text with line tracking.

The cursor is the only owner of the read position. It moves forward one
character per FSM step and backs up by one when a state asks for a
character to be reprocessed, so the line counter is maintained in both
directions: newlines crossed while advancing are added, newlines crossed
while retreating are subtracted.

No operation fails. Counts are clamped so the position always stays within
``[0, len(text)]``.

Thread Safety:
Cursor instances are single-use. Create one per source string.

"""

from __future__ import annotations

from wikilex.lexer.markers import NEWLINE


class Cursor:
    """Position and line counter over a source string.

    Usage:
            >>> cursor = Cursor("a\\nb")
            >>> cursor.read(), cursor.read(), cursor.line
            ('a', '\\n', 2)
            >>> cursor.retreat(1), cursor.line
            (1, 1)

    """

    __slots__ = ("_text", "_text_len", "_pos", "_line")

    def __init__(self, text: str) -> None:
        self._text = text
        self._text_len = len(text)
        self._pos = 0
        self._line = 1

    @property
    def text(self) -> str:
        return self._text

    @property
    def position(self) -> int:
        """Index of the next character to be read."""
        return self._pos

    @property
    def line(self) -> int:
        """1-based line number of the next character to be read."""
        return self._line

    @property
    def at_end(self) -> bool:
        return self._pos >= self._text_len

    def read(self) -> str:
        """Return the next character and advance past it.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._text_len:
            return ""
        char = self._text[self._pos]
        self.advance(1)
        return char

    def advance(self, count: int) -> int:
        """Skip ahead by count characters.

        Returns:
            The new position.
        """
        prev = self._pos
        self._pos = min(self._pos + max(count, 0), self._text_len)
        self._line += self._text.count(NEWLINE, prev, self._pos)
        return self._pos

    def retreat(self, count: int) -> int:
        """Back up by count characters.

        The character at the new position becomes unread again, so it is
        part of the span whose newlines are subtracted.

        Returns:
            The new position.
        """
        prev = self._pos
        self._pos = max(self._pos - max(count, 0), 0)
        self._line -= self._text.count(NEWLINE, self._pos, prev)
        return self._pos

    def peek_ahead(self, count: int) -> str:
        """Return up to count characters from the position without moving."""
        return self._text[self._pos : self._pos + max(count, 0)]

    def look_back(self, count: int) -> str:
        """Return up to count characters before the character in flight.

        The character in flight is the one most recently read (at
        ``position - 1``) and is excluded. Returns empty string when
        nothing precedes it.
        """
        current = self._pos - 1
        if current <= 0 or count <= 0:
            return ""
        return self._text[max(current - count, 0) : current]
