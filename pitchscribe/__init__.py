"""Pitchscribe - monophonic audio to note transcription.

Architecture Layers:
    1. core/          - Note types, constants and errors
    2. input/         - Audio buffers and WAV decoding
    3. analysis/      - Framing, NSDF, pitch and onset detection
    4. transcription/ - Note-level transcription pipeline
"""

__version__ = "0.1.0"

# Core types
from .core import Note, NoteName, PitchClass

# Input layer
from .input import AudioData, AudioLoader

# Analysis layer
from .analysis import FrameExtractor, MpmPitchDetector, OnsetDetector, PitchDetector

# Transcription layer
from .transcription import MonophonicTranscriber

__all__ = [
    # Core
    "Note",
    "NoteName",
    "PitchClass",
    # Input
    "AudioData",
    "AudioLoader",
    # Analysis
    "FrameExtractor",
    "MpmPitchDetector",
    "OnsetDetector",
    "PitchDetector",
    # Transcription
    "MonophonicTranscriber",
]
