"""
Wind Noise Generator

Generates low-frequency aerodynamic noise.

Wind noise characteristics:
- Low-frequency dominated
- Turbulent, random
- Slow gusting in level
"""

from typing import Optional

import numpy as np
from scipy import signal as scipy_signal


class WindNoiseGenerator:
    """
    Generates wind noise.
    """

    def __init__(self, sample_rate: float = 44100, rng: Optional[np.random.Generator] = None):
        """
        Initialize wind noise generator.

        Args:
            sample_rate: Sampling rate in Hz
            rng: Random generator
        """
        self.fs = sample_rate
        self.rng = rng if rng is not None else np.random.default_rng()

    def generate(
        self,
        duration: float,
        cutoff_hz: float = 150,
        gust_hz: float = 0.5,
        amplitude: float = 1.0
    ) -> np.ndarray:
        """
        Generate wind noise signal.

        Args:
            duration: Duration in seconds
            cutoff_hz: Low-pass cutoff
            gust_hz: Rate of level fluctuation
            amplitude: Peak amplitude

        Returns:
            Wind noise signal
        """
        n_samples = int(duration * self.fs)
        nyq = self.fs / 2

        # Base noise
        noise = self.rng.standard_normal(n_samples)

        # Low-pass filter (wind noise is low-frequency dominated)
        cutoff = min(cutoff_hz / nyq, 0.99)
        if cutoff > 0 and n_samples > 12:
            b, a = scipy_signal.butter(3, cutoff, btype='low')
            noise = scipy_signal.filtfilt(b, a, noise)

        # Gusts
        t = np.arange(n_samples) / self.fs
        noise *= 0.6 + 0.4 * np.sin(2 * np.pi * gust_hz * t + self.rng.random() * 2 * np.pi)

        # Normalize and scale
        if np.max(np.abs(noise), initial=0.0) > 0:
            noise = amplitude * noise / np.max(np.abs(noise))

        return noise
