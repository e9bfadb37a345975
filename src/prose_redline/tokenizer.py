"""
Whitespace-preserving tokenizer for prose.

Words are split on whitespace only; whitespace runs are kept as their own
tokens so that joining the tokens always gives back the input exactly.
"""

import re

# Tokenizer pattern:
# - \s+ : whitespace runs
# - \S+ : everything between whitespace runs (words with punctuation attached)
TOKENIZER_PATTERN = re.compile(r"\s+|\S+")


def tokenize(text: str | None) -> list[str]:
    """Tokenize text into alternating word and whitespace tokens.

    Handles:
    - Whitespace runs preserved as single tokens (spaces, tabs, newlines)
    - Punctuation stays attached to its word (e.g., "fox.")
    - Leading and trailing whitespace kept as tokens

    Args:
        text: The text to tokenize (None is treated as empty)

    Returns:
        List of tokens preserving the original text when joined

    Example:
        >>> tokenize("The  quick fox.")
        ['The', '  ', 'quick', ' ', 'fox.']
    """
    if not text:
        return []
    return TOKENIZER_PATTERN.findall(text)


def is_whitespace_token(token: str) -> bool:
    """Check if a token is whitespace-only."""
    return token.isspace()


def count_words(text: str | None) -> int:
    """Count the non-whitespace tokens in text."""
    return sum(1 for token in tokenize(text) if not is_whitespace_token(token))
