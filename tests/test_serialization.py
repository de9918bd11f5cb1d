"""Tests for token stream serialization."""

import json

import pytest

from wikilex import tokenize
from wikilex.errors import TokenDecodeError
from wikilex.serialization import from_dict, from_json, to_dict, to_json
from wikilex.tokens import Token, TokenType


class TestToDict:
    def test_fields(self) -> None:
        token = tokenize("a\n{{", source_file="page.wiki")[-1]
        assert to_dict(token) == {
            "type": "template-begin",
            "value": "{{",
            "lineno": 2,
            "col_offset": 1,
            "offset": 2,
            "source_file": "page.wiki",
        }

    def test_type_written_as_string_value(self) -> None:
        assert to_dict(Token(TokenType.BOLD, "'''"))["type"] == "bold-toggle"


class TestFromDict:
    def test_rebuilds_token(self) -> None:
        token = tokenize("x\n'''")[-1]
        assert from_dict(to_dict(token)) == token

    def test_coordinates_optional(self) -> None:
        token = from_dict({"type": "pipe", "value": "|"})
        assert token == Token(TokenType.PIPE, "|")
        assert (token.lineno, token.col_offset, token.offset) == (1, 1, 0)

    def test_not_a_dict(self) -> None:
        with pytest.raises(TokenDecodeError, match="Expected a token record"):
            from_dict(["pipe", "|"])  # type: ignore[arg-type]

    @pytest.mark.parametrize("missing", ["type", "value"])
    def test_missing_field(self, missing: str) -> None:
        record = {"type": "pipe", "value": "|", "lineno": 4}
        del record[missing]
        with pytest.raises(TokenDecodeError) as exc_info:
            from_dict(record)
        assert exc_info.value.lineno == 4
        assert exc_info.value.record is record
        assert str(exc_info.value).startswith("line 4: ")

    def test_unknown_type(self) -> None:
        with pytest.raises(TokenDecodeError, match="Unknown token type"):
            from_dict({"type": "heading", "value": "="})

    @pytest.mark.parametrize("value", ["", None, 3])
    def test_bad_value(self, value: object) -> None:
        with pytest.raises(TokenDecodeError, match="non-empty string"):
            from_dict({"type": "text", "value": value})

    @pytest.mark.parametrize(
        ("field", "bad"),
        [("lineno", "x"), ("col_offset", 1.5), ("offset", None), ("lineno", True)],
    )
    def test_non_integer_coordinate(self, field: str, bad: object) -> None:
        record = {"type": "text", "value": "a", field: bad}
        with pytest.raises(TokenDecodeError, match="must be an integer") as exc_info:
            from_dict(record)
        assert exc_info.value.lineno is None
        assert not str(exc_info.value).startswith("line ")

    def test_bad_column_reports_line(self) -> None:
        with pytest.raises(TokenDecodeError) as exc_info:
            from_dict({"type": "text", "value": "a", "lineno": 3, "col_offset": "2"})
        assert str(exc_info.value).startswith("line 3: ")

    @pytest.mark.parametrize("source_file", [7, ["page.wiki"]])
    def test_non_string_source_file(self, source_file: object) -> None:
        with pytest.raises(TokenDecodeError, match="source_file"):
            from_dict({"type": "text", "value": "a", "source_file": source_file})

    def test_decode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_dict({"type": "nope", "value": "x"})


class TestJson:
    def test_round_trip(self) -> None:
        tokens = tokenize("{|\n|+ ''Caption''\n|-\n| <code>x</code>\n|}")
        assert from_json(to_json(tokens)) == tokens

    def test_deterministic(self) -> None:
        tokens = tokenize("[[Page|label]]")
        assert to_json(tokens) == to_json(tokenize("[[Page|label]]"))

    def test_sorted_keys(self) -> None:
        records = json.loads(to_json(tokenize("a")))
        assert list(records[0]) == sorted(records[0])

    def test_indent(self) -> None:
        assert "\n" in to_json(tokenize("a"), indent=2)

    def test_empty_stream(self) -> None:
        assert to_json([]) == "[]"
        assert from_json("[]") == []

    def test_not_a_list(self) -> None:
        with pytest.raises(TokenDecodeError, match="Expected a list"):
            from_json('{"type": "text", "value": "a"}')

    def test_invalid_json(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            from_json("not json")
