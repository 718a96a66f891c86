"""
Broadband Noise Generators

Traffic, crowd and construction noise: non-tonal sources built from
filtered random noise.

Characteristics:
- Traffic: steady band-limited rumble, 20-1000 Hz
- Crowd: speech-band babble (300-3400 Hz) with slow level fluctuation
- Construction: broadband bursts (hammering, drilling) over a noise floor
"""

from typing import Optional

import numpy as np
from scipy import signal as scipy_signal


def _normalize(noise: np.ndarray, amplitude: float) -> np.ndarray:
    peak = np.max(np.abs(noise), initial=0.0)
    if peak > 0:
        return amplitude * noise / peak
    return noise


class BroadbandNoiseGenerator:
    """
    Generates band-limited broadband noise.
    """

    def __init__(self, sample_rate: float = 44100, rng: Optional[np.random.Generator] = None):
        """
        Initialize broadband noise generator.

        Args:
            sample_rate: Sampling rate in Hz
            rng: Random generator
        """
        self.fs = sample_rate
        self.rng = rng if rng is not None else np.random.default_rng()

    def _bandpass(self, noise: np.ndarray, low_hz: float, high_hz: float, order: int = 4) -> np.ndarray:
        nyq = self.fs / 2
        low = low_hz / nyq
        high = min(high_hz / nyq, 0.99)
        # filtfilt needs a few times the filter order in samples
        if high > low and len(noise) > 3 * (2 * order + 1):
            b, a = scipy_signal.butter(order, [low, high], btype='band')
            noise = scipy_signal.filtfilt(b, a, noise)
        return noise

    def traffic(self, duration: float, amplitude: float = 1.0) -> np.ndarray:
        """Road traffic rumble."""
        n_samples = int(duration * self.fs)
        noise = self.rng.standard_normal(n_samples)
        return _normalize(self._bandpass(noise, 20, 1000), amplitude)

    def crowd(self, duration: float, amplitude: float = 1.0) -> np.ndarray:
        """Babble of many overlapping voices."""
        n_samples = int(duration * self.fs)
        noise = self._bandpass(self.rng.standard_normal(n_samples), 300, 3400)

        # Syllable-rate level fluctuation (~4 Hz)
        t = np.arange(n_samples) / self.fs
        envelope = 0.7 + 0.3 * np.sin(2 * np.pi * 4.0 * t + self.rng.random() * 2 * np.pi)
        return _normalize(noise * envelope, amplitude)

    def construction(
        self,
        duration: float,
        amplitude: float = 1.0,
        impacts_per_second: float = 6.0
    ) -> np.ndarray:
        """Impulsive broadband bursts over a broadband floor."""
        n_samples = int(duration * self.fs)
        noise = self.rng.standard_normal(n_samples)

        # Exponentially decaying bursts at random positions
        envelope = np.full(n_samples, 0.2)
        burst_len = max(1, int(0.03 * self.fs))
        decay = np.exp(-np.arange(burst_len) / (burst_len / 5))
        n_impacts = max(1, int(duration * impacts_per_second))
        for start in self.rng.integers(0, max(1, n_samples), size=n_impacts):
            end = min(n_samples, start + burst_len)
            envelope[start:end] = np.maximum(envelope[start:end], decay[:end - start])

        return _normalize(noise * envelope, amplitude)
