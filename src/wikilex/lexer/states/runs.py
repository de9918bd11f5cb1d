"""Run-collecting states: dashes, hashes and spaces.

A run is a maximal sequence of one repeated character, stored as a single
token. The dash run also closes comments: a run ending in '>' is checked
for the ``-->`` suffix.
"""

from __future__ import annotations

from typing import ClassVar

from wikilex.lexer.markers import COMMENT_END_MARKER
from wikilex.lexer.states.base import BaseState, Transition
from wikilex.tokens import TokenType


class _RunState(BaseState):
    """Collects a run of run_char and stores it as one token."""

    __slots__ = ()

    run_char: ClassVar[str]
    token_type: ClassVar[TokenType]

    def consume(self, char: str) -> Transition:
        if char == self.run_char:
            self.value += char
            return self._stay()

        self._emit(self.token_type, self.value)
        return self._resume(pushback=True)

    def finalize(self) -> None:
        self._emit(self.token_type, self.value)


class DashRunState(_RunState):
    """Entered on '-'. Collects dashes; a trailing '>' may close a comment."""

    __slots__ = ()

    run_char = "-"
    token_type = TokenType.DASHES

    def consume(self, char: str) -> Transition:
        if char == ">":
            self._store_closing(char)
            return self._resume()
        return super().consume(char)

    def _store_closing(self, angle: str) -> None:
        candidate = self.value + angle
        if candidate.endswith(COMMENT_END_MARKER):
            # Dashes in front of the closing marker stay a separate run.
            leading = candidate[: -len(COMMENT_END_MARKER)]
            if leading:
                self._emit(TokenType.DASHES, leading)
            self._emit(TokenType.COMMENT_END, COMMENT_END_MARKER)
            return

        self._emit(TokenType.DASHES, self.value)
        self._emit(TokenType.CLOSE_ANGLE, angle)


class HashRunState(_RunState):
    """Entered on '#' at the start of a line."""

    __slots__ = ()

    run_char = "#"
    token_type = TokenType.HASHES


class SpaceRunState(_RunState):
    """Entered on ' ' at the start of a line."""

    __slots__ = ()

    run_char = " "
    token_type = TokenType.SPACES
