"""Enums and value types for the pacing engine."""

from textspritzer.models.enums import MessageKind, PlaybackState

__all__ = ["MessageKind", "PlaybackState"]
