"""Pivot-character layout keeping one screen column fixed across words."""

from typing import Optional, Tuple

from textspritzer.schemas.frame import PivotFrame, PivotStyle

from .constants import CHARS_LEFT_OF_PIVOT


class PivotLayout:
    """
    Left-pad words so their pivot character lands in a fixed column.

    Short words are padded with spaces; words longer than twice the
    left-of-pivot width already reach the column and are left as is.

    Example:
        >>> layout = PivotLayout(chars_left_of_pivot=3)
        >>> frame = layout.layout("a")
        >>> frame.padded_word, frame.pivot_start, frame.pivot_end
        ('   a', 3, 4)
    """

    def __init__(
        self,
        chars_left_of_pivot: int = CHARS_LEFT_OF_PIVOT,
        style: Optional[PivotStyle] = None,
    ) -> None:
        if chars_left_of_pivot < 1:
            raise ValueError(
                f"chars_left_of_pivot must be positive, got {chars_left_of_pivot}"
            )
        self.chars_left_of_pivot = chars_left_of_pivot
        self.style = style or PivotStyle()

    def layout(self, word: str) -> PivotFrame:
        """
        Pad ``word`` and locate its pivot character.

        Args:
            word: The word to display; surrounding whitespace is dropped.

        Returns:
            PivotFrame with the padded word, the half-open pivot span and
            this layout's highlight style.
        """
        word = word.strip()
        length = len(word)
        left = self.chars_left_of_pivot

        if length == 0:
            return PivotFrame(
                word=word, padded_word="", pivot_start=0, pivot_end=0, style=self.style
            )

        if length == 1:
            padded = " " * left + word
            pivot_start = left
        elif length <= left * 2:
            half = length // 2
            pad = left - half
            padded = " " * (pad + 1) + word
            pivot_start = half + pad
        else:
            padded = word
            pivot_start = left

        return PivotFrame(
            word=word,
            padded_word=padded,
            pivot_start=pivot_start,
            pivot_end=pivot_start + 1,
            style=self.style,
        )

    def split_for_display(self, word: str) -> Tuple[str, str, str]:
        """
        Split a laid-out word into three parts for highlighting.

        Returns:
            Tuple of (before_pivot, pivot_char, after_pivot) taken from the
            padded word.

        Example:
            >>> PivotLayout(3).split_for_display("reading")
            ('rea', 'd', 'ing')
        """
        frame = self.layout(word)
        padded = frame.padded_word
        return (
            padded[:frame.pivot_start],
            padded[frame.pivot_start:frame.pivot_end],
            padded[frame.pivot_end:],
        )


def layout(word: str, chars_left_of_pivot: int = CHARS_LEFT_OF_PIVOT) -> PivotFrame:
    """Lay out ``word`` with a one-off :class:`PivotLayout`."""
    return PivotLayout(chars_left_of_pivot).layout(word)
