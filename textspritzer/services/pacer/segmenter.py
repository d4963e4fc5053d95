"""
Long-word segmentation for RSVP display.

Words longer than the display limit are shown across consecutive ticks.
The head segment is marked with a hyphen unless it already carries one
or ends a dotted part (e.g. ``example.`` in ``example.com``).
"""

import logging
from typing import List, Optional, Tuple

from .constants import MAX_WORD_LENGTH, SPLIT_CHARACTERS, SPLIT_MARKER

logger = logging.getLogger(__name__)


def _check_max_len(max_len: int) -> None:
    # A limit of 1 would produce an empty head for words over 2 chars
    if max_len < 2:
        raise ValueError(f"max_len must be at least 2, got {max_len}")


def _contains_split_character(word: str) -> bool:
    return any(char in word for char in SPLIT_CHARACTERS)


def find_split_index(word: str, max_len: int = MAX_WORD_LENGTH) -> int:
    """
    Determine where to split a word that exceeds ``max_len``.

    The split lands right after the first hyphen, else right after the
    first period, else at ``max_len - 1`` for very long words (leaving a
    column for the appended hyphen), else near the middle. An index past
    ``max_len`` is searched again within the prefix before it.

    Args:
        word: The word to split.
        max_len: Longest head segment allowed, measured before a hyphen
            is appended.

    Returns:
        The index at which to split ``word``.

    Examples:
        >>> find_split_index("well-known")
        5
        >>> find_split_index("floccinaucinihilipilification")
        12
    """
    _check_max_len(max_len)

    if "-" in word:
        split_index = word.index("-") + 1
    elif "." in word:
        split_index = word.index(".") + 1
    elif len(word) > max_len * 2:
        split_index = max_len - 1
    else:
        # Half-up rounding; len(word) / 2 is always a whole or half number
        split_index = (len(word) + 1) // 2

    if split_index > max_len:
        # The +1 that keeps a splitting char with the head must come off,
        # otherwise the prefix still contains it and never shrinks
        if _contains_split_character(word):
            split_index -= 1
        return find_split_index(word[:split_index], max_len)

    return split_index


def has_inner_hyphen(word: str) -> bool:
    """True when the first hyphen sits between two characters of ``word``."""
    return 0 < word.find("-") < len(word) - 1


def split_if_needed(
    word: str,
    max_len: int = MAX_WORD_LENGTH,
    *,
    break_at_hyphens: bool = True,
) -> Tuple[str, Optional[str]]:
    """
    Split a word into a displayable head and the remainder.

    Words within ``max_len`` are kept whole, except that a compound with an
    inner hyphen is broken after its first hyphen when ``break_at_hyphens``
    is set.

    Args:
        word: The word to check.
        max_len: Longest word shown whole.
        break_at_hyphens: Break short hyphenated compounds at the hyphen.

    Returns:
        ``(head, remainder)``; remainder is None when no split was needed.

    Examples:
        >>> split_if_needed("cat")
        ('cat', None)
        >>> split_if_needed("well-known")
        ('well-', 'known')
        >>> split_if_needed("well-known", break_at_hyphens=False)
        ('well-known', None)
    """
    _check_max_len(max_len)

    if len(word) <= max_len and not (break_at_hyphens and has_inner_hyphen(word)):
        return word, None

    split_index = find_split_index(word, max_len)
    head = word[:split_index]
    remainder = word[split_index:]

    if SPLIT_MARKER not in head and not head.endswith("."):
        head = head + SPLIT_MARKER

    logger.debug("Splitting long word %r into %r and %r", word, head, remainder)
    return head, remainder


def segment_word(
    word: str,
    max_len: int = MAX_WORD_LENGTH,
    *,
    break_at_hyphens: bool = True,
) -> List[str]:
    """
    Split a word repeatedly until every segment is displayable.

    Returns:
        The segments in display order.

    Examples:
        >>> segment_word("mother-in-law")
        ['mother-', 'in-', 'law']
    """
    segments: List[str] = []
    remainder: Optional[str] = word

    while remainder is not None:
        head, remainder = split_if_needed(
            remainder, max_len, break_at_hyphens=break_at_hyphens
        )
        segments.append(head)

    return segments
