"""textspritzer - paces text one word at a time for speed reading."""

from textspritzer.config import PacerSettings, get_settings
from textspritzer.logging_config import configure_logging
from textspritzer.models.enums import PlaybackState
from textspritzer.services.pacer import (
    ConsumerHandler,
    DefaultDelayStrategy,
    DelayStrategy,
    DirectHandler,
    PacerEngine,
    PunctuationDelayStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "PacerEngine",
    "PacerSettings",
    "PlaybackState",
    "ConsumerHandler",
    "DirectHandler",
    "DelayStrategy",
    "DefaultDelayStrategy",
    "PunctuationDelayStrategy",
    "get_settings",
    "configure_logging",
]
