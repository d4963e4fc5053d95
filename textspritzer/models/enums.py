"""Enums shared by the pacing engine."""

from enum import Enum


class PlaybackState(str, Enum):
    """Playback state of a pacer engine.

    IDLE is both the initial and the terminal state for a given text.
    """

    IDLE = "idle"
    PLAY_REQUESTED = "play_requested"
    PLAYING = "playing"
    PAUSED = "paused"


class MessageKind(str, Enum):
    """Kinds of messages the background loop posts to the consumer context."""

    WORD_READY = "word_ready"
    PROGRESS = "progress"
    COMPLETE = "complete"
