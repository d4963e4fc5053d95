"""Services for the RSVP word pacer."""

from textspritzer.services.pacer import (
    DefaultDelayStrategy,
    DelayStrategy,
    PacerEngine,
    PivotLayout,
    PunctuationDelayStrategy,
    Tokenizer,
    tokenize,
)

__all__ = [
    "PacerEngine",
    "DelayStrategy",
    "DefaultDelayStrategy",
    "PunctuationDelayStrategy",
    "PivotLayout",
    "Tokenizer",
    "tokenize",
]
