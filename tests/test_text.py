"""Tests for capitalize and slugify"""

import pytest

from orgkit.domain.text import capitalize, slugify


class TestCapitalize:
    """Tests for capitalize"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("hello", "Hello"),
            ("HELLO", "Hello"),
            ("hELLO", "Hello"),
            ("a", "A"),
            ("123hello", "123hello"),
            ("hello123", "Hello123"),
            ("!hello", "!hello"),
            ("hello!", "Hello!"),
            ("typeScript", "Typescript"),
            ("  hello", "  hello"),
            ("hello  ", "Hello  "),
        ],
    )
    def test_first_letter_only(self, text, expected):
        """Test all_words=False capitalizes only the first character"""
        assert capitalize(text, False) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("hello world", "Hello World"),
            ("the quick brown fox", "The Quick Brown Fox"),
            ("hello   world", "Hello   World"),
            ("hELLO wORLD", "HELLO WORLD"),
            ("tHe QuIcK bRoWn FoX", "THe QuIcK BRoWn FoX"),
            ("mary-jane", "Mary-Jane"),
            ("it's", "It'S"),
            ("don't stop", "Don'T Stop"),
            ("o'brien", "O'Brien"),
            ("test2word", "Test2word"),
            ("2fast 2furious", "2fast 2furious"),
            ("  hello", "  Hello"),
            ("hello\nworld", "Hello\nWorld"),
            ("hello\tworld", "Hello\tWorld"),
            ("node.js framework", "Node.Js Framework"),
        ],
    )
    def test_all_words(self, text, expected):
        """Test the default capitalizes the start of every word"""
        assert capitalize(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "!@#$%"])
    def test_unchanged_inputs(self, text):
        """Test empty, blank and symbol-only strings"""
        assert capitalize(text) == text
        assert capitalize(text, False) == text

    @pytest.mark.parametrize("value", [None, 123, {}, [], True])
    def test_non_string_rejected(self, value):
        with pytest.raises(TypeError, match="Input must be a string"):
            capitalize(value)


class TestSlugify:
    """Tests for slugify"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("HELLO WORLD", "hello-world"),
            ("MixedCase", "mixedcase"),
            ("multiple   spaces", "multiple-spaces"),
            ("hello@world!", "helloworld"),
            ("test#$%^&*()", "test"),
            ("dots.and,commas", "dotsandcommas"),
            ("snake_case_text", "snake-case-text"),
            ("hello---world", "hello-world"),
            ("test - - - case", "test-case"),
            ("  hello world  ", "hello-world"),
            ("-hello-world-", "hello-world"),
            ("---test---", "test"),
            ("", ""),
            ("   ", ""),
            ("!@#$%^&*()", ""),
            ("café", "caf"),
            ("naïve", "nave"),
            ("123 456", "123-456"),
            ("a\u00a0b", "a-b"),
            ("line\u2028break", "line-break"),
            ("The Quick Brown Fox!", "the-quick-brown-fox"),
            ("C++ Programming Language", "c-programming-language"),
            ("Node.js v18.0.0", "nodejs-v1800"),
        ],
    )
    def test_slugify(self, text, expected):
        assert slugify(text) == expected

    @pytest.mark.parametrize("value", [None, 123, {}, []])
    def test_non_string_rejected(self, value):
        with pytest.raises(TypeError, match="Input must be a string"):
            slugify(value)
