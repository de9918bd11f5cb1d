"""Tests for start and end tag recognition."""

from wikilex import TokenizeConfig, tokenize, tokenize_config_context
from wikilex.lexer import TagTable, Tokenizer
from wikilex.tokens import TokenType

TEXT = TokenType.TEXT
OPEN = TokenType.OPEN_START_TAG
OPEN_END = TokenType.OPEN_END_TAG
NAME = TokenType.TAG_NAME
CLOSE = TokenType.CLOSE_ANGLE


def _lex(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in tokenize(source)]


class TestStartTags:
    def test_html_tag(self) -> None:
        assert _lex("<code>") == [(OPEN, "<"), (NAME, "code"), (CLOSE, ">")]

    def test_single_letter_tag(self) -> None:
        assert _lex("<p>") == [(OPEN, "<"), (NAME, "p"), (CLOSE, ">")]

    def test_extension_tag(self) -> None:
        assert _lex("<inputbox>") == [(OPEN, "<"), (NAME, "inputbox"), (CLOSE, ">")]

    def test_tag_name_with_space(self) -> None:
        assert _lex("<math chem>") == [(OPEN, "<"), (NAME, "math chem"), (CLOSE, ">")]

    def test_padded_name_keeps_raw_value(self) -> None:
        tokens = tokenize("<  table  >")
        assert [(t.type, t.value) for t in tokens] == [
            (OPEN, "<"),
            (NAME, "  table  "),
            (CLOSE, ">"),
        ]
        assert tokens[1].tag_name == "table"

    def test_uppercase_name(self) -> None:
        tokens = tokenize("<DIV>")
        assert tokens[1].value == "DIV"
        assert tokens[1].tag_name == "div"

    def test_tag_between_text(self) -> None:
        assert _lex("before<h2>after") == [
            (TEXT, "before"),
            (OPEN, "<"),
            (NAME, "h2"),
            (CLOSE, ">"),
            (TEXT, "after"),
        ]

    def test_self_closing_slash_is_text(self) -> None:
        assert _lex("<br/>") == [(OPEN, "<"), (NAME, "br"), (TEXT, "/"), (CLOSE, ">")]

    def test_tag_at_end_of_input(self) -> None:
        assert _lex("a<b") == [(TEXT, "a"), (OPEN, "<"), (NAME, "b")]

    def test_attributes_follow_as_text(self) -> None:
        assert _lex('<ref name="x">') == [
            (OPEN, "<"),
            (NAME, "ref "),
            (TEXT, 'name="x"'),
            (CLOSE, ">"),
        ]


class TestEndTags:
    def test_end_tag(self) -> None:
        assert _lex("</code>") == [(OPEN_END, "</"), (NAME, "code"), (CLOSE, ">")]

    def test_unknown_end_tag(self) -> None:
        assert _lex("</invalid>") == [(TEXT, "</invalid"), (CLOSE, ">")]

    def test_bare_end_marker(self) -> None:
        assert _lex("</") == [(TEXT, "</")]

    def test_pair(self) -> None:
        assert _lex("<ref>x</ref>") == [
            (OPEN, "<"),
            (NAME, "ref"),
            (CLOSE, ">"),
            (TEXT, "x"),
            (OPEN_END, "</"),
            (NAME, "ref"),
            (CLOSE, ">"),
        ]


class TestNotATag:
    def test_unknown_start_tag(self) -> None:
        assert _lex("<invalid>") == [(TEXT, "<invalid"), (CLOSE, ">")]

    def test_lone_angle(self) -> None:
        assert _lex("<") == [(TEXT, "<")]

    def test_less_than_in_prose(self) -> None:
        assert _lex("a < 3") == [(TEXT, "a < 3")]

    def test_empty_name(self) -> None:
        assert _lex("< >") == [(TEXT, "< "), (CLOSE, ">")]

    def test_double_angle(self) -> None:
        assert _lex("<<code>") == [(TEXT, "<"), (OPEN, "<"), (NAME, "code"), (CLOSE, ">")]

    def test_tag_name_is_none_without_tag(self) -> None:
        assert all(t.tag_name is None for t in tokenize("<invalid>"))


class TestTagConfiguration:
    def test_extensions_disabled(self) -> None:
        with tokenize_config_context(TokenizeConfig(extension_tags_enabled=False)):
            assert _lex("<ref>") == [(TEXT, "<ref"), (CLOSE, ">")]
            assert _lex("<div>") == [(OPEN, "<"), (NAME, "div"), (CLOSE, ">")]

    def test_extra_tag(self) -> None:
        assert _lex("<rss>") == [(TEXT, "<rss"), (CLOSE, ">")]
        with tokenize_config_context(TokenizeConfig(extra_tags=frozenset({"rss"}))):
            assert _lex("<rss>") == [(OPEN, "<"), (NAME, "rss"), (CLOSE, ">")]

    def test_explicit_table(self) -> None:
        table = TagTable({"foo"})
        tokens = Tokenizer("<foo><div>", tags=table).tokenize()
        assert [(t.type, t.value) for t in tokens] == [
            (OPEN, "<"),
            (NAME, "foo"),
            (CLOSE, ">"),
            (TEXT, "<div"),
            (CLOSE, ">"),
        ]
