"""Transcription layer - Note-level detection from audio."""

from .base import Transcriber
from .monophonic import MonophonicTranscriber, PitchFrame

__all__ = ["Transcriber", "MonophonicTranscriber", "PitchFrame"]
