"""Amplitude and energy helpers."""

from typing import Optional, Sequence

import numpy as np


def root_mean_square(samples: Sequence[float]) -> Optional[float]:
    """RMS of the samples, or None for an empty sequence."""
    samples = np.asarray(samples, dtype=np.float64)
    if len(samples) == 0:
        return None
    return float(np.sqrt(np.mean(samples**2)))


def peak_normalize(samples: Sequence[float]) -> np.ndarray:
    """
    Scale samples so the largest absolute value becomes 1.

    Buffers whose peak is at or below machine epsilon map to all zeros.
    """
    samples = np.asarray(samples, dtype=np.float64)
    if len(samples) == 0:
        return samples.copy()

    peak = np.abs(samples).max()
    if peak <= np.finfo(np.float64).eps:
        return np.zeros_like(samples)
    return samples / peak
