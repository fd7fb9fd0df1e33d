"""Monophonic transcription using MPM pitch detection and onset detection."""

import warnings
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from .base import Transcriber
from ..analysis import (
    Frame,
    FrameExtractor,
    MpmPitchDetector,
    OnsetDetector,
    PitchDetector,
    peak_normalize,
    root_mean_square,
)
from ..core import Note, NoteName
from ..core.constants import (
    DEFAULT_FRAME_WIDTH,
    DEFAULT_MPM_THRESHOLD,
    DEFAULT_STEP_SIZE,
    MAX_FRAME_WIDTH,
    SILENCE_RMS_RATIO,
)
from ..input import AudioData


@dataclass
class PitchFrame:
    """Pitch estimate for one analysis frame."""

    start_pos: int
    frame_width: int
    pitch: Optional[float] = None  # Hz, None if no pitch was detected


class MonophonicTranscriber(Transcriber):
    """Transcribes monophonic audio using the McLeod Pitch Method."""

    def __init__(
        self,
        threshold: float = DEFAULT_MPM_THRESHOLD,
        max_frame_width: int = MAX_FRAME_WIDTH,
        silence_ratio: float = SILENCE_RMS_RATIO,
        onset_detector: Optional[OnsetDetector] = None,
        detector_factory: Optional[Callable[[int], PitchDetector]] = None,
        max_workers: int = 1,
    ):
        """
        Initialize MonophonicTranscriber.

        Args:
            threshold: MPM peak threshold (fraction of the highest NSDF peak)
            max_frame_width: Frames are truncated to this many samples
                before pitch detection
            silence_ratio: Frames with RMS below this fraction of the whole
                buffer's RMS are dropped
            onset_detector: Detector used to split the audio into notes
            detector_factory: Builds a PitchDetector for a sample rate
                (default: MpmPitchDetector with `threshold`)
            max_workers: Threads used for per-frame pitch detection
        """
        self.threshold = threshold
        self.max_frame_width = max_frame_width
        self.silence_ratio = silence_ratio
        self.onset_detector = onset_detector or OnsetDetector()
        self.detector_factory = detector_factory or self._default_detector
        self.max_workers = max_workers

    def _default_detector(self, sample_rate: int) -> PitchDetector:
        return MpmPitchDetector(sample_rate, threshold=self.threshold)

    def transcribe(self, audio: np.ndarray, sr: int) -> List[Note]:
        """
        Transcribe monophonic audio to notes.

        Args:
            audio: Audio array (mono)
            sr: Sample rate

        Returns:
            Notes in order of onset
        """
        samples = peak_normalize(audio)
        if not np.any(samples):
            warnings.warn("Audio is empty or silent; no notes transcribed")
            return []

        # Split at onsets
        onsets = self.onset_detector.detect(samples)
        frames = FrameExtractor(samples).get_frames_by_index(onsets)
        frames = [frame.truncate(self.max_frame_width) for frame in frames]

        # Drop quiet frames
        frames = self._filter_silent_frames(frames, samples)

        pitch_frames = self._detect_pitches(frames, sr)

        return self._frames_to_notes(pitch_frames)

    def get_notes(self, audio_data: AudioData) -> List[Note]:
        """Transcribe a decoded audio buffer."""
        return self.transcribe(audio_data.samples, audio_data.sample_rate)

    def transcribe_frames(
        self,
        audio_data: AudioData,
        frame_width: int = DEFAULT_FRAME_WIDTH,
        step_size: int = DEFAULT_STEP_SIZE,
    ) -> List[PitchFrame]:
        """
        Estimate a pitch for every fixed-width frame of the audio.

        Returns:
            One PitchFrame per frame, including frames without a pitch
        """
        frames = audio_data.get_frames(frame_width, step_size)
        return self._detect_pitches(frames, audio_data.sample_rate)

    def _filter_silent_frames(self, frames: List[Frame], samples: np.ndarray) -> List[Frame]:
        """Keep frames whose RMS reaches `silence_ratio` of the buffer RMS."""
        min_rms = self.silence_ratio * root_mean_square(samples)
        return [
            frame
            for frame in frames
            if frame.width > 0 and root_mean_square(frame.samples) >= min_rms
        ]

    def _detect_pitches(self, frames: List[Frame], sr: int) -> List[PitchFrame]:
        """Run pitch detection on each frame, preserving frame order."""

        def detect(frame: Frame) -> PitchFrame:
            detector = self.detector_factory(sr)
            return PitchFrame(
                start_pos=frame.start_pos,
                frame_width=frame.width,
                pitch=detector.get_pitch(frame.samples),
            )

        if self.max_workers > 1 and len(frames) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(detect, frames))

        return [detect(frame) for frame in frames]

    def _frames_to_notes(self, pitch_frames: List[PitchFrame]) -> List[Note]:
        """Convert frames with a detected pitch into notes."""
        return [
            Note(
                name=NoteName.from_pitch(frame.pitch),
                start=frame.start_pos,
                duration=frame.frame_width,
            )
            for frame in pitch_frames
            if frame.pitch is not None
        ]
