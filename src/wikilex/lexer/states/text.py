"""Default state: collects plain text and dispatches on special characters."""

from __future__ import annotations

from wikilex.lexer.markers import NEWLINE
from wikilex.lexer.states.angle import OpenAngleState
from wikilex.lexer.states.base import BaseState, Transition
from wikilex.lexer.states.brackets import (
    BraceCloseState,
    BraceOpenState,
    BracketCloseState,
    BracketOpenState,
    PipeState,
)
from wikilex.lexer.states.quote import QuoteState
from wikilex.lexer.states.runs import DashRunState, HashRunState, SpaceRunState
from wikilex.tokens import TokenType

# Characters that hand over to a dedicated state, anywhere in a line
TRANSITIONS: dict[str, type[BaseState]] = {
    "'": QuoteState,
    "{": BraceOpenState,
    "}": BraceCloseState,
    "[": BracketOpenState,
    "]": BracketCloseState,
    "|": PipeState,
    "<": OpenAngleState,
    "-": DashRunState,
}

# Characters that start a run only at the beginning of a line
LINE_START_TRANSITIONS: dict[str, type[BaseState]] = {
    "#": HashRunState,
    " ": SpaceRunState,
}

# Characters that are complete tokens by themselves
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    NEWLINE: TokenType.EOL,
    ">": TokenType.CLOSE_ANGLE,
    "!": TokenType.EXCLAMATION_MARK,
    ":": TokenType.COLONS,
}


class TextState(BaseState):
    """Collects plain text until a character for a different token appears.

    Default state of the FSM. Every other state returns here.

    The tokenizer is context unaware: it creates tokens for any special
    symbol, e.g. '|' or '!', no matter where it occurs. The parser decides
    what a symbol means from the surrounding structure.
    """

    __slots__ = ()

    def consume(self, char: str) -> Transition:
        single_type = SINGLE_CHAR_TOKENS.get(char)
        if single_type is not None:
            self._store_text()
            self._emit(single_type, char)
            return self._stay()

        state_cls = TRANSITIONS.get(char)
        if state_cls is None and self._at_line_start():
            state_cls = LINE_START_TRANSITIONS.get(char)
        if state_cls is not None:
            self._store_text()
            return Transition(state_cls(self._host, char))

        # Keep reading text.
        self.value += char
        return self._stay()

    def finalize(self) -> None:
        self._store_text()

    def _store_text(self) -> None:
        if self.value:
            self._emit(TokenType.TEXT, self.value)
            self.value = ""

    def _at_line_start(self) -> bool:
        # Looks at the source, so pending text and earlier tokens both count.
        last = self._host.look_back(1)
        return last in ("", NEWLINE)
