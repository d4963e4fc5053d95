"""
Word pacing package for RSVP display.

This package contains:
- tokenizer: splits raw text into words
- segmenter: splits over-long words across ticks
- timing: delay strategies and WPM arithmetic
- pivot: pivot-character alignment
- handler: hand-off from the pacing thread to the consumer context
- engine: PacerEngine, the play/pause state machine and timing loop

Primary usage:
    >>> from textspritzer.services.pacer import PacerEngine
    >>> engine = PacerEngine(display)
    >>> engine.set_text("Hello world.")
    >>> engine.start()
"""

from .engine import PacerEngine, WordDisplay
from .handler import ConsumerHandler, DirectHandler, Message
from .pivot import PivotLayout, layout
from .segmenter import find_split_index, segment_word, split_if_needed
from .timing import (
    DefaultDelayStrategy,
    DelayStrategy,
    PunctuationDelayStrategy,
    calculate_base_delay_ms,
    calculate_word_delay_ms,
    estimate_reading_time_formatted,
    estimate_reading_time_ms,
)
from .tokenizer import Tokenizer, tokenize

__all__ = [
    # Engine
    "PacerEngine",
    "WordDisplay",
    "ConsumerHandler",
    "DirectHandler",
    "Message",
    # Text processing
    "Tokenizer",
    "tokenize",
    "find_split_index",
    "split_if_needed",
    "segment_word",
    "PivotLayout",
    "layout",
    # Timing
    "DelayStrategy",
    "DefaultDelayStrategy",
    "PunctuationDelayStrategy",
    "calculate_base_delay_ms",
    "calculate_word_delay_ms",
    "estimate_reading_time_ms",
    "estimate_reading_time_formatted",
]
