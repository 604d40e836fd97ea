"""Tests for Pygments-based highlighting."""

import logging

import pytest
from pygments.lexers import TextLexer

from codeview.classifier import SUPPORTED_LANGUAGES
from codeview.highlight import LEXER_ALIASES, get_lexer, highlight, highlight_lines
from codeview.listing import extract_lines


class TestGetLexer:
    """Test lexer lookup."""

    @pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
    def test_every_supported_language_has_lexer(self, language):
        """Each supported tag maps to a real Pygments lexer."""
        assert language in LEXER_ALIASES
        assert not isinstance(get_lexer(language), TextLexer)

    def test_pygments_alias_passthrough(self):
        """Pygments aliases work directly."""
        assert get_lexer("python").name == get_lexer("py").name

    def test_unknown_language_falls_back(self, caplog):
        """Unknown languages use plain text and log a warning."""
        with caplog.at_level(logging.WARNING, logger="codeview.highlight"):
            lexer = get_lexer("no-such-language")
        assert isinstance(lexer, TextLexer)
        assert "no-such-language" in caplog.text


class TestHighlight:
    """Test HTML output."""

    def test_keywords_get_spans(self):
        html = highlight("py", "def foo():\n    pass\n")
        assert '<span class="k">def</span>' in html
        assert "<pre" not in html

    def test_php_without_open_tag(self):
        """PHP snippets are highlighted without needing '<?php'."""
        html = highlight("php", "echo $name;")
        assert "<span" in html
        assert "$name" in html

    @pytest.mark.parametrize(
        "code",
        ["", "x", "x\n", "\n\nx\n\n", "a\r\nb", "a\rb", "/* one\ntwo */\nint x;"],
    )
    def test_one_entry_per_source_line(self, code):
        """Highlighted output lines up with the source lines."""
        assert len(highlight_lines("c", code)) == len(extract_lines(code))

    def test_multiline_tokens_close_spans_per_line(self):
        """A comment spanning lines is split into balanced spans."""
        lines = highlight_lines("c", "/* one\ntwo */\nint x;")
        for line in lines:
            assert line.count("<span") == line.count("</span>")
