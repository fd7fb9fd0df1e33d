"""Autocorrelation and normalized square difference function (NSDF).

The NSDF is described by Philip McLeod and Geoff Wyvill in
"A Smarter Way to Find Pitch" (2005).
"""

import numpy as np


def fast_autocorrelation(samples: np.ndarray) -> np.ndarray:
    """
    Compute the autocorrelation of a frame via the Wiener-Khinchin theorem.

    The frame is zero-padded to twice its length, so no circular wrap-around
    leaks into lags below the frame length. Both transforms are unnormalized
    and each is scaled by 1/sqrt(2N), so the result is the raw sum
    r(tau) = sum_i x[i] * x[i+tau].

    Args:
        samples: Frame samples (length N)

    Returns:
        Autocorrelation for lags 0..N-1
    """
    samples = np.asarray(samples, dtype=np.float64)
    n = len(samples)
    if n == 0:
        return np.zeros(0)

    fft_length = 2 * n
    scale = 1.0 / np.sqrt(fft_length)

    spectrum = np.fft.fft(samples, n=fft_length)
    power_spectrum = scale * spectrum * np.conj(spectrum)

    # norm="forward" leaves the inverse transform unscaled
    autocorrelation = scale * np.fft.ifft(power_spectrum, norm="forward").real

    return autocorrelation[:n]


def square_sums(samples: np.ndarray) -> np.ndarray:
    """
    Compute m(tau) = sum_{i=0}^{N-tau-1} (x[i]^2 + x[i+tau]^2) for each lag.

    Args:
        samples: Frame samples (length N)

    Returns:
        Square sums for lags 0..N-1
    """
    squares = np.asarray(samples, dtype=np.float64) ** 2
    n = len(squares)
    if n == 0:
        return np.zeros(0)

    prefix = np.concatenate([[0.0], np.cumsum(squares)])
    total = prefix[-1]
    tau = np.arange(n)

    # Head of the frame, x[0..N-tau), plus tail, x[tau..N)
    return prefix[n - tau] + (total - prefix[tau])


def nsdf(samples: np.ndarray) -> np.ndarray:
    """
    Compute the normalized square difference function of a frame.

    NSDF(tau) = 2 * r(tau) / m(tau). Divisors at or below machine epsilon
    are replaced by 1.0, so silent frames give values near zero.

    Returns:
        NSDF values, one per lag, same length as the input
    """
    autoc = fast_autocorrelation(samples)
    sq_sums = square_sums(samples)

    sq_sums = np.where(sq_sums > np.finfo(np.float64).eps, sq_sums, 1.0)

    return 2.0 * autoc / sq_sums
