"""Onset detection from the amplitude envelope."""

from typing import List, Sequence

import numpy as np

from .frames import FrameExtractor
from ..core.constants import ONSET_FRAME_WIDTH, ONSET_THRESHOLD


class OnsetDetector:
    """Finds note starts where the peak amplitude rises sharply."""

    def __init__(
        self,
        frame_width: int = ONSET_FRAME_WIDTH,
        threshold: float = ONSET_THRESHOLD,
    ):
        """
        Initialize OnsetDetector.

        Args:
            frame_width: Width of the non-overlapping envelope frames
            threshold: Minimum envelope rise between consecutive frames
        """
        self.frame_width = frame_width
        self.threshold = threshold

    def envelope(self, samples: Sequence[float]):
        """
        Compute the peak amplitude envelope.

        A trailing partial frame is not included.

        Returns:
            Tuple of (frame center positions, envelope values)
        """
        frames = FrameExtractor(samples).get_frames(self.frame_width, self.frame_width)
        centers = np.array(
            [frame.start_pos + self.frame_width // 2 for frame in frames], dtype=int
        )
        values = np.array([np.abs(frame.samples).max() for frame in frames])
        return centers, values

    @staticmethod
    def envelope_difference(values: np.ndarray) -> np.ndarray:
        """First difference of the envelope, with the first entry 0."""
        if len(values) == 0:
            return np.zeros(0)
        return np.concatenate([[0.0], np.diff(values)])

    def detect(self, samples: Sequence[float]) -> List[int]:
        """
        Detect onsets in peak-normalized audio.

        An onset is reported at the center of a frame whose envelope rises
        by more than `threshold` over the previous frame. The frame right
        after an onset cannot hold another one.

        Returns:
            Ascending list of onset sample positions
        """
        centers, values = self.envelope(samples)
        differences = self.envelope_difference(values)

        onsets = []
        armed = True
        for center, difference in zip(centers, differences):
            if not armed:
                armed = True
                continue
            if difference > self.threshold:
                onsets.append(int(center))
                armed = False

        return onsets
