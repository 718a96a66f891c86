"""
Feature Extractor for Noise Classification

Extracts coarse time-domain statistics used to score noise archetypes.

Features:
1. Energy - Mean squared amplitude
2. Zero-crossing rate - Sign changes per sample
3. Spectral centroid - Proxy only: zero-crossing rate * 10000, no FFT involved
4. Spectral flatness - Proxy in [0.2, 0.7] from the magnitude distribution
5. Periodicity - Summed autocorrelation magnitude over one analysis frame

Only the first analysis frame (1024 samples, plus lag reach) contributes to
periodicity and flatness, so their cost does not grow with signal length.
"""

from dataclasses import dataclass, astuple
from typing import Dict, Optional

import numpy as np

from .. import config


# Feature names for reference
FEATURE_NAMES = [
    'energy',
    'zero_crossings',
    'spectral_centroid',
    'spectral_flatness',
    'periodicity',
]


@dataclass(frozen=True)
class FeatureVector:
    """Scalar statistics of one signal."""
    energy: float
    zero_crossings: float
    spectral_centroid: float
    spectral_flatness: float
    periodicity: float

    def to_dict(self) -> Dict[str, float]:
        return dict(zip(FEATURE_NAMES, astuple(self)))

    def to_array(self) -> np.ndarray:
        return np.array(astuple(self), dtype=np.float64)


def zero_crossing_rate(x: np.ndarray) -> float:
    """
    Count sign changes between adjacent samples, normalized by length.

    Zero counts as non-negative.
    """
    if len(x) == 0:
        return 0.0
    negative = x < 0
    crossings = np.count_nonzero(negative[1:] != negative[:-1])
    return crossings / len(x)


def periodicity(x: np.ndarray, frame_size: int = config.ANALYSIS_FRAME_SIZE) -> float:
    """
    Unnormalized autocorrelation magnitude over the first frame.

    sum_{lag=1}^{frame-1} |sum_{i=0}^{frame-1} x[i] * x[i+lag]| / frame

    Pairs where i + lag falls outside the signal are skipped.
    """
    n = len(x)
    total = 0.0
    for lag in range(1, min(frame_size, n)):
        m = min(frame_size, n - lag)
        total += abs(float(np.dot(x[:m], x[lag:lag + m])))
    return total / frame_size


def spectral_flatness(x: np.ndarray, frame_size: int = config.ANALYSIS_FRAME_SIZE) -> float:
    """
    Flatness proxy from the first frame, clamped to [0.2, 0.7].

    Uses the ratio of geometric to arithmetic mean of sample magnitudes:
    noise-like frames approach 0.7, sparse or tonal frames approach 0.2.
    """
    low, high = config.FLATNESS_RANGE
    frame = np.abs(x[:frame_size])
    if frame.size == 0:
        return low

    eps = 1e-10
    geometric = np.exp(np.mean(np.log(frame + eps)))
    arithmetic = np.mean(frame) + eps
    ratio = min(1.0, geometric / arithmetic)
    return float(np.clip(low + (high - low) * ratio, low, high))


def extract_features(
    x: np.ndarray,
    rng: Optional[np.random.Generator] = None
) -> FeatureVector:
    """
    Extract classification features from a signal.

    Args:
        x: Signal (1D array)
        rng: If given, spectral flatness is drawn from it as
             rng.random() * 0.5 + 0.2 instead of being derived from the signal

    Returns:
        FeatureVector

    Example:
        >>> signal = 0.3 * np.sin(2 * np.pi * np.arange(2048) / 200)
        >>> features = extract_features(signal)
        >>> print(features.energy < 0.1)  # True
    """
    x = np.asarray(x, dtype=np.float64).ravel()
    n = len(x)

    energy = float(np.mean(x ** 2)) if n else 0.0
    zcr = zero_crossing_rate(x)

    if rng is not None:
        low, high = config.FLATNESS_RANGE
        flatness = float(rng.random() * (high - low) + low)
    else:
        flatness = spectral_flatness(x)

    return FeatureVector(
        energy=energy,
        zero_crossings=zcr,
        spectral_centroid=zcr * config.CENTROID_SCALE,
        spectral_flatness=flatness,
        periodicity=periodicity(x),
    )


def extract_features_windowed(
    x: np.ndarray,
    window_size: int = 4096,
    hop_size: Optional[int] = None
) -> np.ndarray:
    """
    Extract features from signal using sliding windows.

    Useful for analyzing longer signals or detecting changes over time.

    Args:
        x: Signal (1D array)
        window_size: Size of analysis window in samples
        hop_size: Hop between windows (default: window_size // 2)

    Returns:
        2D array of features, shape (n_windows, 5); a signal shorter than
        one window gives a single row
    """
    if hop_size is None:
        hop_size = max(1, window_size // 2)

    x = np.asarray(x)
    if len(x) < window_size:
        return extract_features(x).to_array()[np.newaxis, :]

    rows = [
        extract_features(x[start:start + window_size]).to_array()
        for start in range(0, len(x) - window_size + 1, hop_size)
    ]
    return np.array(rows)
