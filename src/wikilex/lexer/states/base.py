"""Common contract for the tokenizer FSM states.

Each state owns a small accumulation buffer (``value``) seeded with the
character that triggered it, and exposes two operations:

- ``consume(char)``: process one character and return a Transition naming
  the state to continue with and whether ``char`` must be read again.
- ``finalize()``: input has ended while this state is active; store any
  pending token.

States never move the read position themselves. When the character that
ended a run belongs to the next token, the state returns
``Transition(next_state, pushback=True)`` and the driving loop backs the
cursor up by one.

"""

from __future__ import annotations

from typing import NamedTuple, Protocol

from wikilex.lexer.tags import TagTable
from wikilex.tokens import TokenType


class StateHost(Protocol):
    """What states need from the tokenizer driving them."""

    @property
    def tags(self) -> TagTable:
        """Tag table used for tag recognition."""
        ...

    def emit(self, token_type: TokenType, value: str) -> None:
        """Store a token."""
        ...

    def look_back(self, count: int) -> str:
        """Characters before the one currently being processed."""
        ...

    def default_state(self, pending: str = "") -> BaseState:
        """Create the default text state, optionally with pending text."""
        ...


class Transition(NamedTuple):
    """Result of feeding one character to a state."""

    state: BaseState
    pushback: bool = False


class BaseState:
    """Base for all state classes. Holds the host and accumulated value."""

    __slots__ = ("_host", "value")

    def __init__(self, host: StateHost, value: str = "") -> None:
        self._host = host
        self.value = value

    def consume(self, char: str) -> Transition:
        """Process the next character. Implemented by subclasses."""
        raise NotImplementedError

    def finalize(self) -> None:
        """Store pending tokens at end of input. Implemented by subclasses."""
        raise NotImplementedError

    def _emit(self, token_type: TokenType, value: str) -> None:
        self._host.emit(token_type, value)

    def _stay(self) -> Transition:
        return Transition(self)

    def _resume(self, pending: str = "", *, pushback: bool = False) -> Transition:
        """Return to the default state."""
        return Transition(self._host.default_state(pending), pushback)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"
