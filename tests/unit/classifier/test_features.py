"""Unit tests for lexical feature extraction."""

import pytest

from codeview.classifier.features import (
    DEFAULT_LANGUAGE,
    FEATURE_TABLE,
    SIGIL_VARIABLE,
    SUPPORTED_LANGUAGES,
    features,
    tokenize,
)


class TestFeatureTable:
    """Test the built-in feature table."""

    def test_default_language_is_first_priority(self):
        """The default wins ties because it is first in priority order."""
        assert SUPPORTED_LANGUAGES[0] == DEFAULT_LANGUAGE

    def test_every_language_has_features(self):
        """Each supported language has an entry in the table and nothing else does."""
        assert set(FEATURE_TABLE) == set(SUPPORTED_LANGUAGES)
        for language in SUPPORTED_LANGUAGES:
            assert len(FEATURE_TABLE[language]) > 0

    def test_table_is_read_only(self):
        """The table cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            FEATURE_TABLE["kt"]["fun"] = 100
        with pytest.raises(TypeError):
            FEATURE_TABLE["new"] = {}

    def test_weights_are_positive_integers(self):
        """Weights are exact integers so ties are exact."""
        for weights in FEATURE_TABLE.values():
            for weight in weights.values():
                assert isinstance(weight, int)
                assert weight > 0


class TestTokenize:
    """Test the tokenizer."""

    def test_empty(self):
        """Empty and whitespace-only input produce no tokens."""
        assert tokenize("") == []
        assert tokenize("  \n\t ") == []

    def test_words_and_operators(self):
        """Identifiers and known operators are kept in order."""
        assert tokenize("x := a === b;") == ["x", ":=", "a", "===", "b", ";"]

    def test_arrow_operators(self):
        """Fat and thin arrows are distinct features."""
        assert tokenize("a => b -> c :: d") == ["a", "=>", "b", "->", "c", "::", "d"]

    def test_case_sensitive(self):
        """Keywords keep their case."""
        assert tokenize("SELECT select") == ["SELECT", "select"]

    def test_shebang(self):
        """A shebang is a single feature."""
        assert tokenize("#!/bin/bash\necho hi")[0] == "#!/bin/bash"

    def test_directives_and_annotations(self):
        """Preprocessor directives and annotations keep their prefix."""
        tokens = tokenize("#include <stdio.h>\n@Override\n@media screen")
        assert "#include" in tokens
        assert "<stdio" in tokens
        assert "@Override" in tokens
        assert "@media" in tokens

    def test_markup_tags(self):
        """Opening and closing tags are features."""
        tokens = tokenize("<!DOCTYPE html><div>text</div>")
        assert tokens[0] == "<!DOCTYPE"
        assert "<div" in tokens
        assert "</div" in tokens

    def test_generics_are_not_tags(self):
        """A '<' right after a word is a type argument, not markup."""
        tokens = tokenize("List<String> items")
        assert tokens == ["List", "String", "items"]

    def test_comparison_is_not_tag(self):
        """A '<' followed by a space is an operator."""
        assert tokenize("a < b") == ["a", "b"]

    def test_sigil_variables_collapse(self):
        """Every $name becomes the same feature."""
        assert tokenize("$name = $other") == [SIGIL_VARIABLE, SIGIL_VARIABLE]

    def test_interpolation_is_not_sigil(self):
        """'${' stays an operator."""
        assert tokenize("${HOME}") == ["${", "HOME", "}"]

    def test_php_markers(self):
        """PHP open and close tags are features."""
        assert tokenize("<?php echo 1; ?>") == ["<?php", "echo", ";", "?>"]

    def test_numbers_are_skipped(self):
        """Digits alone are not features, but units after them are."""
        assert tokenize("10px 42") == ["px"]

    def test_unicode_text(self):
        """Non-ASCII text does not break tokenization."""
        assert "print" in tokenize('print("héllo wörld ✓")')


class TestFeatures:
    """Test distinct feature extraction."""

    def test_features_are_distinct(self):
        """Repeated tokens count once."""
        assert features("a a a ; ;") == frozenset({"a", ";"})

    def test_features_returns_frozenset(self):
        """Result is immutable."""
        assert isinstance(features("fun main"), frozenset)
