"""States for tokens starting with '<': tags and comment openers.

Tag names are recognized incrementally. Each new character extends the
candidate name, and reading continues only while the normalized candidate
is a prefix of a known tag. Because normalization trims and lowercases,
padded or capitalized names such as ``<  table  >`` and ``<DIV>`` keep
matching until the first character that cannot belong to any name.
"""

from __future__ import annotations

from typing import ClassVar

from wikilex.lexer.markers import (
    COMMENT_BEGIN_MARKER,
    END_TAG_MARKER,
    START_TAG_MARKER,
)
from wikilex.lexer.states.base import BaseState, Transition
from wikilex.tokens import TokenType
from wikilex.utils.logger import get_logger

logger = get_logger(__name__)


class OpenAngleState(BaseState):
    """Entered on '<'. Decides which kind of tag-like token follows."""

    __slots__ = ()

    def consume(self, char: str) -> Transition:
        if char == "/":
            return Transition(EndTagState(self._host, self.value + char))
        if char == "!":
            return Transition(CommentStartState(self._host, self.value + char))
        if self._host.tags.is_tag_prefix(char):
            return Transition(StartTagState(self._host, self.value + char))

        # It's just plain text.
        self._emit(TokenType.TEXT, self.value)
        return self._resume(pushback=True)

    def finalize(self) -> None:
        self._emit(TokenType.TEXT, self.value)


class _TagState(BaseState):
    """Reads a tag name after a start or end marker."""

    __slots__ = ()

    marker: ClassVar[str]
    marker_type: ClassVar[TokenType]

    def consume(self, char: str) -> Transition:
        if self._host.tags.is_tag_prefix(self.tag_name + char):
            self.value += char
            return self._stay()

        self._store_tokens()
        return self._resume(pushback=True)

    def finalize(self) -> None:
        self._store_tokens()

    @property
    def tag_name(self) -> str:
        """Raw tag name read so far (without the marker)."""
        return self.value[len(self.marker) :]

    def _store_tokens(self) -> None:
        """Store the marker and name, or everything read as one text token.

        The TAG_NAME value is the name exactly as written, padding and case
        included, so token values still join back into the source. The
        normalized form is available as ``Token.tag_name``.
        """
        name = self.tag_name
        if self._host.tags.is_tag(name):
            self._emit(self.marker_type, self.marker)
            self._emit(TokenType.TAG_NAME, name)
            return

        logger.debug("Unrecognized tag %r kept as text", self.value)
        self._emit(TokenType.TEXT, self.value)


class StartTagState(_TagState):
    """Active while a prefix of a start tag ``<name`` is read."""

    __slots__ = ()

    marker = START_TAG_MARKER
    marker_type = TokenType.OPEN_START_TAG


class EndTagState(_TagState):
    """Active while a prefix of an end tag ``</name`` is read."""

    __slots__ = ()

    marker = END_TAG_MARKER
    marker_type = TokenType.OPEN_END_TAG


class CommentStartState(BaseState):
    """Active while a prefix of the comment opener ``<!--`` is read."""

    __slots__ = ()

    def consume(self, char: str) -> Transition:
        candidate = self.value + char

        if candidate == COMMENT_BEGIN_MARKER:
            self._emit(TokenType.COMMENT_BEGIN, candidate)
            return self._resume()
        if COMMENT_BEGIN_MARKER.startswith(candidate):
            self.value = candidate
            return self._stay()

        # Not a comment. What was read so far becomes text; the failing
        # character is read again by the text state.
        logger.debug("Incomplete comment opener %r kept as text", self.value)
        return self._resume(self.value, pushback=True)

    def finalize(self) -> None:
        self._emit(TokenType.TEXT, self.value)
