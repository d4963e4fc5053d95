"""Tokenizer for splitting raw text into the words paced by the engine."""

import re
from typing import Tuple

_WHITESPACE_RUN = re.compile(r"\s+")


def tokenize(text: str) -> Tuple[str, ...]:
    """
    Split text into words for RSVP display.

    Runs of whitespace (spaces, tabs, newlines) collapse to a single
    separator. Empty or whitespace-only input yields an empty tuple.

    Args:
        text: The input text to tokenize.

    Returns:
        Tuple of words in reading order.

    Examples:
        >>> tokenize("  a  b   c ")
        ('a', 'b', 'c')
        >>> tokenize("   ")
        ()
    """
    if not text:
        return ()

    collapsed = _WHITESPACE_RUN.sub(" ", text).strip()
    if not collapsed:
        return ()

    return tuple(collapsed.split(" "))


class Tokenizer:
    """Service for tokenizing text for RSVP reading."""

    def tokenize(self, text: str) -> Tuple[str, ...]:
        return tokenize(text)

    def count_words(self, text: str) -> int:
        """
        Count the number of words in text.

        Args:
            text: Input text.

        Returns:
            Word count.
        """
        return len(self.tokenize(text))
