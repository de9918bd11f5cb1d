"""Tests for wikilex utility modules."""

import logging

import pytest


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        from wikilex.utils.logger import get_logger

        assert get_logger("mymodule").name == "wikilex.mymodule"

    def test_keeps_package_names(self) -> None:
        from wikilex.utils.logger import get_logger

        assert get_logger("wikilex").name == "wikilex"
        assert get_logger("wikilex.lexer.core").name == "wikilex.lexer.core"

    def test_returns_stdlib_logger(self) -> None:
        from wikilex.utils import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_unrecognized_tag_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from wikilex import tokenize

        with caplog.at_level(logging.DEBUG, logger="wikilex"):
            tokenize("<invalid>")
        assert any("Unrecognized tag" in record.getMessage() for record in caplog.records)

    def test_silent_at_default_level(self, caplog: pytest.LogCaptureFixture) -> None:
        from wikilex import tokenize

        with caplog.at_level(logging.WARNING, logger="wikilex"):
            tokenize("<invalid> <!x")
        assert not [r for r in caplog.records if r.name.startswith("wikilex")]
