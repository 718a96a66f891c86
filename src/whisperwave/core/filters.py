"""
Post-Processing Filters

Smoothing and amplitude limiting applied to the LMS output.
"""

import numpy as np

from .. import config


def moving_average(signal: np.ndarray, radius: int = config.SMOOTHING_RADIUS) -> np.ndarray:
    """
    Centered box filter over the interior of a signal.

    Only indices [radius, len - radius - 1] are averaged; the first and last
    `radius` samples are copied through unchanged. Every average reads from
    the unmodified input.

    Args:
        signal: Input signal
        radius: Half-width of the window (window = 2 * radius + 1 taps)

    Returns:
        Smoothed copy of the signal
    """
    x = np.asarray(signal)
    out = np.array(x, dtype=np.float32, copy=True)
    window = 2 * radius + 1

    if radius < 1 or len(x) < window:
        return out

    # Sum in float64, store back at the signal precision
    kernel = np.ones(window) / window
    out[radius:len(x) - radius] = np.convolve(x.astype(np.float64), kernel, mode='valid')
    return out


def limit_peak(signal: np.ndarray, ceiling: float = config.PEAK_CEILING) -> np.ndarray:
    """
    Scale a signal down so its peak absolute amplitude is at most `ceiling`.

    Signals already at or below the ceiling are returned unchanged.

    Args:
        signal: Input signal
        ceiling: Maximum allowed peak amplitude

    Returns:
        Scaled copy of the signal
    """
    out = np.array(signal, dtype=np.float32, copy=True)
    if out.size == 0:
        return out

    peak = float(np.max(np.abs(out)))
    if peak > ceiling:
        out *= np.float32(ceiling / peak)
    return out


def smooth_and_normalize(signal: np.ndarray) -> np.ndarray:
    """
    Reduce high-frequency artifacts, then prevent clipping.

    1. 7-tap moving average over the interior samples
    2. Peak limiting to 0.9

    Args:
        signal: Filtered signal

    Returns:
        New post-processed signal, same length
    """
    return limit_peak(moving_average(signal, config.SMOOTHING_RADIUS), config.PEAK_CEILING)
