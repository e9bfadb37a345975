"""Tests for the whitespace-preserving tokenizer."""

import pytest

from prose_redline.tokenizer import count_words, is_whitespace_token, tokenize


class TestTokenizer:
    """Tests for the tokenize function."""

    def test_simple_words(self):
        """Test tokenizing simple words."""
        assert tokenize("hello world") == ["hello", " ", "world"]

    def test_multiple_spaces(self):
        """Test whitespace runs are kept as single tokens."""
        assert tokenize("hello  world") == ["hello", "  ", "world"]

    def test_punctuation_stays_attached(self):
        """Test punctuation is not split from its word."""
        assert tokenize("Hello, world!") == ["Hello,", " ", "world!"]

    def test_leading_and_trailing_whitespace(self):
        """Test whitespace at either end is kept."""
        assert tokenize("  padded\n") == ["  ", "padded", "\n"]

    def test_mixed_whitespace(self):
        """Test tabs and newlines form one run."""
        assert tokenize("one\t\n two") == ["one", "\t\n ", "two"]

    def test_empty_string(self):
        """Test empty input yields no tokens."""
        assert tokenize("") == []

    def test_none(self):
        """Test None is treated as empty."""
        assert tokenize(None) == []

    @pytest.mark.parametrize(
        "text",
        [
            "The quick brown fox",
            "  leading",
            "trailing  ",
            "line one\nline two\r\n\r\nline three",
            "\t",
            "naïve café — résumé",
            "It's a non-trivial, well-known fact.",
        ],
    )
    def test_round_trip(self, text):
        """Test joining tokens reconstructs the input exactly."""
        assert "".join(tokenize(text)) == text


class TestTokenHelpers:
    """Tests for token classification and word counting."""

    def test_is_whitespace_token(self):
        """Test whitespace detection."""
        assert is_whitespace_token(" \n")
        assert not is_whitespace_token("word")

    def test_count_words(self):
        """Test words are counted, whitespace is not."""
        assert count_words("  The quick\nbrown fox. ") == 4

    def test_count_words_empty(self):
        """Test empty text has no words."""
        assert count_words("") == 0
        assert count_words(None) == 0
