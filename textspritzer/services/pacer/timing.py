"""
Delay strategies and pacing arithmetic for RSVP display.

A delay strategy maps each displayed word to an integer multiplier of the
base inter-word delay (derived from the WPM setting). Strategies are
pluggable; the engine swaps them at any time and reads the current one on
every tick.
"""

from abc import ABC, abstractmethod
from typing import Optional, Set

from .constants import (
    ABBREVIATIONS,
    ELLIPSIS_STRINGS,
    LONG_WORD_EXTRA,
    LONG_WORD_THRESHOLD,
    MAJOR_PAUSE_MULTIPLIER,
    MAJOR_PAUSE_PUNCTUATION,
    MINOR_PAUSE_MULTIPLIER,
    MINOR_PAUSE_PUNCTUATION,
    MS_PER_MINUTE,
)
from .text_utils import (
    get_clean_word_length,
    get_terminal_punctuation,
    is_abbreviation,
)


class DelayStrategy(ABC):
    """Policy deciding how many base delays a word stays on screen."""

    @abstractmethod
    def delay_multiplier(self, word: str) -> int:
        """
        Return the delay multiplier for a displayed word.

        Values below 1 are clamped to 1 by the engine.
        """


class DefaultDelayStrategy(DelayStrategy):
    """Every word gets exactly one base delay."""

    def delay_multiplier(self, word: str) -> int:
        return 1


class PunctuationDelayStrategy(DelayStrategy):
    """
    Linger on words that end clauses or sentences, and on long words.

    Factors:
    - Terminal punctuation (major pause: . ! ? :  minor pause: , ; em/en dash)
    - Ellipses get a major pause
    - Abbreviation periods ("Mr.", "etc.") get a minor pause
    - Long words add one extra base delay on top of any punctuation pause

    Example usage:
        >>> strategy = PunctuationDelayStrategy()
        >>> strategy.delay_multiplier("hello")
        1
        >>> strategy.delay_multiplier("sentence.")
        3
        >>> strategy.delay_multiplier("word,")
        2
    """

    def __init__(
        self,
        *,
        abbreviations: Optional[Set[str]] = None,
        long_word_threshold: int = LONG_WORD_THRESHOLD,
    ) -> None:
        self._abbreviations: Set[str] = (
            ABBREVIATIONS if abbreviations is None else abbreviations
        )
        self.long_word_threshold = long_word_threshold

    def delay_multiplier(self, word: str) -> int:
        if not word:
            return 1

        multiplier = 1
        terminal = get_terminal_punctuation(word)

        if terminal:
            if terminal in ELLIPSIS_STRINGS:
                multiplier = MAJOR_PAUSE_MULTIPLIER
            elif terminal in MAJOR_PAUSE_PUNCTUATION:
                if terminal == "." and is_abbreviation(word, self._abbreviations):
                    multiplier = MINOR_PAUSE_MULTIPLIER
                else:
                    multiplier = MAJOR_PAUSE_MULTIPLIER
            elif terminal in MINOR_PAUSE_PUNCTUATION:
                multiplier = MINOR_PAUSE_MULTIPLIER

        if get_clean_word_length(word) >= self.long_word_threshold:
            multiplier += LONG_WORD_EXTRA

        return multiplier


def clamp_multiplier(multiplier: int) -> int:
    """Raise multipliers below 1 to 1 so a word is never shown for 0 ms."""
    return multiplier if multiplier >= 1 else 1


def calculate_base_delay_ms(wpm: int) -> int:
    """
    Calculate the base inter-word delay from WPM (words per minute).

    Raises:
        ValueError: If wpm is not positive.

    Examples:
        >>> calculate_base_delay_ms(500)
        120
        >>> calculate_base_delay_ms(300)
        200
    """
    if wpm <= 0:
        raise ValueError(f"WPM must be positive, got {wpm}")

    return MS_PER_MINUTE // wpm


def calculate_word_delay_ms(wpm: int, multiplier: int) -> int:
    """
    Calculate how long a word stays on screen.

    Examples:
        >>> calculate_word_delay_ms(500, 3)
        360
        >>> calculate_word_delay_ms(500, 0)
        120
    """
    return calculate_base_delay_ms(wpm) * clamp_multiplier(multiplier)


def estimate_reading_time_ms(word_count: int, wpm: int) -> int:
    """
    Estimate reading time for ``word_count`` words at one base delay each.

    Examples:
        >>> estimate_reading_time_ms(300, 300)
        60000
    """
    return word_count * calculate_base_delay_ms(wpm)


def estimate_reading_time_formatted(word_count: int, wpm: int) -> str:
    """
    Estimate reading time and return it as a short string.

    Returns:
        Formatted string like "5 min" or "1 hr 23 min"; anything under a
        minute reads "<1 min" and an empty count reads "0 min".

    Examples:
        >>> estimate_reading_time_formatted(1500, 300)
        '5 min'
        >>> estimate_reading_time_formatted(25000, 300)
        '1 hr 23 min'
    """
    if word_count <= 0:
        return "0 min"

    total_minutes = estimate_reading_time_ms(word_count, wpm) // MS_PER_MINUTE

    if total_minutes < 1:
        return "<1 min"

    if total_minutes < 60:
        return f"{total_minutes} min"

    hours = total_minutes // 60
    minutes = total_minutes % 60

    if minutes == 0:
        return f"{hours} hr"

    return f"{hours} hr {minutes} min"
