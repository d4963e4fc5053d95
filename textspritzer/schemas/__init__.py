"""Immutable value schemas emitted by the pacing engine."""

from textspritzer.schemas.frame import PivotFrame, PivotStyle, ProgressUpdate

__all__ = ["PivotFrame", "PivotStyle", "ProgressUpdate"]
