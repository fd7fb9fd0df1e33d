"""Core types and constants for Pitchscribe."""

from .note import Note, NoteName, PitchClass
from .constants import (
    NOTE_NAMES,
    DEFAULT_MPM_THRESHOLD,
    MAX_FRAME_WIDTH,
    SILENCE_RMS_RATIO,
    ONSET_FRAME_WIDTH,
    ONSET_THRESHOLD,
)
from .errors import (
    FrameError,
    FrameIndicesNotSorted,
    FrameIndexOutOfBounds,
    DuplicateFrameIndices,
    WavFileError,
    UnsupportedBitDepth,
    UnsupportedChannelCount,
)

__all__ = [
    "Note",
    "NoteName",
    "PitchClass",
    "NOTE_NAMES",
    "DEFAULT_MPM_THRESHOLD",
    "MAX_FRAME_WIDTH",
    "SILENCE_RMS_RATIO",
    "ONSET_FRAME_WIDTH",
    "ONSET_THRESHOLD",
    "FrameError",
    "FrameIndicesNotSorted",
    "FrameIndexOutOfBounds",
    "DuplicateFrameIndices",
    "WavFileError",
    "UnsupportedBitDepth",
    "UnsupportedChannelCount",
]
