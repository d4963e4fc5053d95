"""
Shared text helpers for the pacing package.

Used by the delay strategies to look at a word's trailing punctuation
and its length without surrounding quotes or brackets.
"""

from typing import Optional, Set

from .constants import (
    ALL_QUOTES,
    BRACKET_CLOSERS,
    BRACKET_OPENERS,
    ELLIPSIS_STRINGS,
    MAJOR_PAUSE_PUNCTUATION,
    MINOR_PAUSE_PUNCTUATION,
    TRAILING_CLOSERS,
)

_PUNCTUATION_CHARS = ".,!?;:…—–"
_STRIP_CHARS = "".join(ALL_QUOTES | BRACKET_OPENERS | BRACKET_CLOSERS) + _PUNCTUATION_CHARS
_TRAILING_CLOSER_CHARS = "".join(TRAILING_CLOSERS)


def get_terminal_punctuation(word: str) -> Optional[str]:
    """
    Get the terminal punctuation, ignoring trailing quotes/brackets.

    Args:
        word: The word to check.

    Returns:
        The punctuation character (or ellipsis string), or None.

    Examples:
        >>> get_terminal_punctuation("hello.")
        '.'
        >>> get_terminal_punctuation('said."')
        '.'
        >>> get_terminal_punctuation("wait...")
        '...'
    """
    if not word:
        return None

    stripped = word.rstrip(_TRAILING_CLOSER_CHARS)
    if not stripped:
        return None

    for ellipsis in ELLIPSIS_STRINGS:
        if stripped.endswith(ellipsis):
            return ellipsis

    char = stripped[-1]
    if char in MAJOR_PAUSE_PUNCTUATION or char in MINOR_PAUSE_PUNCTUATION:
        return char

    return None


def is_abbreviation(word: str, abbreviations: Set[str]) -> bool:
    """
    Check if a word is a known abbreviation.

    Examples:
        >>> is_abbreviation("Mr.", {"mr"})
        True
        >>> is_abbreviation("Hello.", {"mr"})
        False
    """
    clean = word.rstrip(_TRAILING_CLOSER_CHARS).rstrip(".")
    clean = clean.lstrip("".join(ALL_QUOTES | BRACKET_OPENERS))
    return clean.lower() in abbreviations


def clean_word(word: str) -> str:
    """
    Remove leading/trailing punctuation and quotes from a word.

    Examples:
        >>> clean_word('"Hello,"')
        'Hello'
    """
    if not word:
        return ""

    return word.strip().strip(_STRIP_CHARS)


def get_clean_word_length(word: str) -> int:
    """Length of a word without surrounding punctuation."""
    return len(clean_word(word))
