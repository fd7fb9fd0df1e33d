"""Pitch detection using the McLeod Pitch Method (MPM).

The method is described by Philip McLeod and Geoff Wyvill in
"A Smarter Way to Find Pitch" (2005).
"""

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .autocorrelation import nsdf as compute_nsdf
from ..core.constants import DEFAULT_MPM_THRESHOLD

EPSILON = np.finfo(np.float64).eps


class Peak(NamedTuple):
    """Location and height of a point on the NSDF curve."""

    lag: float
    value: float


class PitchDetector(ABC):
    """Abstract base class for single-frame pitch estimators."""

    @abstractmethod
    def get_pitch(self, samples: Sequence[float]) -> Optional[float]:
        """
        Estimate the pitch of a frame.

        Args:
            samples: Frame samples

        Returns:
            Frequency in Hz, or None if no pitch was detected
        """
        pass


def quadratic_peak_interp(
    p0: Tuple[float, float],
    p1: Tuple[float, float],
    p2: Tuple[float, float],
) -> Optional[Peak]:
    """
    Estimate the vertex of the parabola through three points.

    Returns:
        Vertex as a Peak, or None if two points share an x-coordinate
        or the points are colinear
    """
    (x0, y0), (x1, y1), (x2, y2) = p0, p1, p2
    x0, x1, x2 = float(x0), float(x1), float(x2)

    div = (x0 - x1) * (x0 - x2) * (x1 - x2)
    if abs(div) < EPSILON:
        return None

    a = (y0 * (x1 - x2) + y1 * (x2 - x0) + y2 * (x0 - x1)) / div
    if abs(a) < EPSILON:
        return None

    b = -(y0 * (x1 * x1 - x2 * x2) + y1 * (x2 * x2 - x0 * x0) + y2 * (x0 * x0 - x1 * x1)) / div
    c = (y0 * x1 * x2 * (x1 - x2) + y1 * x2 * x0 * (x2 - x0) + y2 * x0 * x1 * (x0 - x1)) / div

    x = -b / (2.0 * a)
    return Peak(x, a * x * x + b * x + c)


class MpmPitchDetector(PitchDetector):
    """Detects pitch with the McLeod Pitch Method."""

    def __init__(self, sample_rate: int, threshold: float = DEFAULT_MPM_THRESHOLD):
        """
        Initialize MpmPitchDetector.

        Args:
            sample_rate: Sample rate of the audio the detector runs on
            threshold: Fraction of the highest NSDF peak a candidate must
                exceed to be chosen as the period
        """
        self.sample_rate = sample_rate
        self.threshold = threshold

    def get_pitch(self, samples: Sequence[float]) -> Optional[float]:
        peak = self.get_mpm_peak(compute_nsdf(samples))
        if peak is None:
            return None
        return self.sample_rate / peak.lag

    def find_peaks(self, nsdf: Sequence[float]) -> Tuple[List[Peak], float]:
        """
        Collect one interpolated peak per positive lobe of the NSDF.

        Returns:
            Tuple of (interpolated peaks in ascending lag order,
            highest raw local maximum)
        """
        values = [float(v) for v in nsdf]
        n = len(values)

        # Skip the zero-lag lobe
        i = 0
        while i < n and values[i] > 0.0:
            i += 1

        peaks = []
        max_value = 0.0

        while i < n:
            if values[i] < 0.0:
                i += 1
                continue

            local_value = 0.0
            interp_peak = Peak(0.0, 0.0)

            while i < n and values[i] >= 0.0:
                if (
                    values[i] > local_value
                    and 0 < i < n - 1
                    and values[i - 1] < values[i]
                    and values[i + 1] < values[i]
                ):
                    local_value = values[i]
                    refined = quadratic_peak_interp(
                        (i - 1, values[i - 1]),
                        (i, values[i]),
                        (i + 1, values[i + 1]),
                    )
                    if refined is not None:
                        interp_peak = refined
                    if local_value > max_value:
                        max_value = local_value
                i += 1

            if interp_peak.value > 0.0:
                peaks.append(interp_peak)
            i += 1

        return peaks, max_value

    def get_mpm_peak(self, nsdf: Sequence[float]) -> Optional[Peak]:
        """Pick the first peak above `threshold` times the highest peak."""
        peaks, max_value = self.find_peaks(nsdf)
        cutoff = self.threshold * max_value

        for peak in peaks:
            if peak.value > cutoff:
                return peak
        return None
