"""Analysis layer - Low-level signal analysis.

This layer extracts frame-level information from sample buffers:
- Framing (fixed-width and onset-delimited)
- Autocorrelation / NSDF
- Pitch detection (McLeod Pitch Method)
- Onset detection
"""

from .frames import Frame, FrameExtractor
from .autocorrelation import fast_autocorrelation, square_sums, nsdf
from .pitch import Peak, PitchDetector, MpmPitchDetector, quadratic_peak_interp
from .onset import OnsetDetector
from .energy import root_mean_square, peak_normalize

__all__ = [
    "Frame",
    "FrameExtractor",
    "fast_autocorrelation",
    "square_sums",
    "nsdf",
    "Peak",
    "PitchDetector",
    "MpmPitchDetector",
    "quadratic_peak_interp",
    "OnsetDetector",
    "root_mean_square",
    "peak_normalize",
]
