"""Note data class - the fundamental unit of musical transcription."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math

from .constants import A4_FREQUENCY


class PitchClass(Enum):
    """The twelve pitch classes, in note-number order starting at A."""

    A = "A"
    A_SHARP = "A#"
    B = "B"
    C = "C"
    C_SHARP = "C#"
    D = "D"
    D_SHARP = "D#"
    E = "E"
    F = "F"
    F_SHARP = "F#"
    G = "G"
    G_SHARP = "G#"

    @classmethod
    def from_index(cls, index: int) -> "PitchClass":
        """Get the pitch class for a note index in [0, 12)."""
        return _PITCH_CLASSES[index]

    def __str__(self) -> str:
        return self.value


_PITCH_CLASSES = list(PitchClass)


@dataclass(frozen=True)
class NoteName:
    """A pitch class paired with an octave (e.g. 'A4', 'C#3')."""

    pitch_class: PitchClass
    octave: int

    @classmethod
    def from_pitch(cls, pitch: float) -> "NoteName":
        """
        Get the note name closest to a frequency.

        Args:
            pitch: Frequency in Hz (must be positive)

        Returns:
            NoteName for the frequency
        """
        note_number = NoteName.note_number(pitch)
        note_index = note_number % 12
        if note_index < 0:
            note_index += 12
        # Octaves change at C, which sits 9 semitones above A; sub-audio
        # pitches saturate at octave 0
        octave = max(0, math.floor((note_number + 9) / 12))
        return cls(PitchClass.from_index(note_index), octave)

    @staticmethod
    def note_number(pitch: float) -> int:
        """Note number relative to A0 (A4 = 48)."""
        return math.floor(12 * math.log2(pitch / A4_FREQUENCY) + 48.5)

    def __str__(self) -> str:
        return f"{self.pitch_class}{self.octave}"


@dataclass(frozen=True)
class Note:
    """Represents a detected musical note."""

    name: NoteName
    start: int  # Start position in samples
    duration: int  # Length in samples

    @property
    def end(self) -> int:
        """Sample position just past the end of the note."""
        return self.start + self.duration

    @property
    def pitch_name(self) -> str:
        """Get note name (e.g., 'C4', 'A#3')."""
        return str(self.name)

    def start_time(self, sample_rate: int) -> float:
        """Start of the note in seconds."""
        return self.start / sample_rate

    def duration_time(self, sample_rate: int) -> float:
        """Note duration in seconds."""
        return self.duration / sample_rate

    def to_dict(self, sample_rate: Optional[int] = None) -> dict:
        """Convert to dictionary for JSON output."""
        data = {"name": self.pitch_name, "start": self.start, "duration": self.duration}
        if sample_rate:
            data["start_time"] = self.start_time(sample_rate)
            data["duration_time"] = self.duration_time(sample_rate)
        return data

    def __str__(self) -> str:
        return f"Note: {self.name}, Start: {self.start}, Duration: {self.duration}"
