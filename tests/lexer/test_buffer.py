"""Tests for TokenBuffer: text merging and coordinate assignment."""

from wikilex.lexer.buffer import TokenBuffer
from wikilex.tokens import Token, TokenType


class TestAppend:
    def test_starts_empty(self) -> None:
        buf = TokenBuffer()
        assert len(buf) == 0
        assert not buf
        assert buf.tokens() == []

    def test_single_token(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.PIPE, "|")
        assert buf.tokens() == [Token(TokenType.PIPE, "|")]

    def test_empty_value_dropped(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.TEXT, "")
        buf.append(TokenType.DASHES, "")
        assert len(buf) == 0
        assert buf.offset == 0

    def test_tokens_returns_copy(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.TEXT, "a")
        buf.tokens().clear()
        assert len(buf) == 1


class TestTextMerge:
    def test_consecutive_text_merged(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.TEXT, "ab")
        buf.append(TokenType.TEXT, "c")
        assert buf.tokens() == [Token(TokenType.TEXT, "abc")]

    def test_merge_keeps_first_coordinates(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.EOL, "\n")
        buf.append(TokenType.TEXT, "ab")
        buf.append(TokenType.TEXT, "cd")
        merged = buf.tokens()[-1]
        assert merged.value == "abcd"
        assert (merged.lineno, merged.col_offset, merged.offset) == (2, 1, 1)

    def test_other_types_not_merged(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.PIPE, "|")
        buf.append(TokenType.PIPE, "|")
        buf.append(TokenType.DASHES, "-")
        buf.append(TokenType.DASHES, "-")
        assert [t.type for t in buf.tokens()] == [
            TokenType.PIPE,
            TokenType.PIPE,
            TokenType.DASHES,
            TokenType.DASHES,
        ]

    def test_text_after_other_type_not_merged(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.TEXT, "a")
        buf.append(TokenType.PIPE, "|")
        buf.append(TokenType.TEXT, "b")
        assert len(buf) == 3


class TestCoordinates:
    def test_columns_advance(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.TEMPLATE_BEGIN, "{{")
        buf.append(TokenType.TEXT, "tl")
        buf.append(TokenType.TEMPLATE_END, "}}")
        assert [t.col_offset for t in buf.tokens()] == [1, 3, 5]
        assert [t.offset for t in buf.tokens()] == [0, 2, 4]

    def test_newline_starts_next_line(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.TEXT, "abc")
        buf.append(TokenType.EOL, "\n")
        buf.append(TokenType.TEXT, "d")
        last = buf.tokens()[-1]
        assert (last.lineno, last.col_offset, last.offset) == (2, 1, 4)

    def test_value_with_embedded_newline(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.TAG_NAME, "\ndiv")
        buf.append(TokenType.CLOSE_ANGLE, ">")
        last = buf.tokens()[-1]
        assert (last.lineno, last.col_offset) == (2, 4)

    def test_source_file_on_every_token(self) -> None:
        buf = TokenBuffer("Main_Page.wiki")
        buf.append(TokenType.TEXT, "a")
        buf.append(TokenType.TEXT, "b")
        buf.append(TokenType.EOL, "\n")
        assert all(t.source_file == "Main_Page.wiki" for t in buf.tokens())

    def test_offset_tracks_covered_length(self) -> None:
        buf = TokenBuffer()
        buf.append(TokenType.TEXT, "abc")
        buf.append(TokenType.EOL, "\n")
        assert buf.offset == 4
