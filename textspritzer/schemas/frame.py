"""Pydantic schemas for values handed from the pacing loop to the consumer."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FrozenBase(BaseModel):
    """Base schema for immutable values crossing thread boundaries."""

    model_config = ConfigDict(frozen=True)


class PivotStyle(FrozenBase):
    """Highlight style for the pivot character, fixed per engine."""

    color: str = "red"


class PivotFrame(FrozenBase):
    """A word laid out for display with its half-open pivot span.

    Attributes:
        word: The trimmed word before padding.
        padded_word: The word left-padded with spaces so the pivot aligns.
        pivot_start: Index of the pivot character in ``padded_word``.
        pivot_end: ``pivot_start + 1`` (``0`` for an empty word).
        style: How the display should highlight the pivot character.
    """

    word: str
    padded_word: str
    pivot_start: int = Field(ge=0)
    pivot_end: int = Field(ge=0)
    style: PivotStyle = Field(default_factory=PivotStyle)

    @model_validator(mode="after")
    def check_span(self) -> "PivotFrame":
        if self.pivot_end - self.pivot_start not in (0, 1):
            raise ValueError(
                f"pivot span must cover at most one character: "
                f"({self.pivot_start}, {self.pivot_end})"
            )
        return self


class ProgressUpdate(FrozenBase):
    current: int = Field(ge=0)
    total: int = Field(ge=0)
