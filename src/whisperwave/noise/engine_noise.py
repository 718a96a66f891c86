"""
Engine Noise Generator

Generates tonal noise with RPM-dependent harmonics: small petrol engines
(lawnmowers) and motor-driven fans share this structure.

Engine noise characteristics:
- Fundamental frequency from RPM: f = (RPM / 60) * firings per revolution
- Multiple harmonics (2x, 3x, 4x, etc.) with falling weights
"""

from typing import List, Optional

import numpy as np


class EngineNoiseGenerator:
    """
    Generates engine/motor noise with harmonics based on RPM.
    """

    def __init__(
        self,
        sample_rate: float = 44100,
        firings_per_rev: float = 1.0,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize engine noise generator.

        Args:
            sample_rate: Sampling rate in Hz
            firings_per_rev: Firing events per revolution (1 for a
                             single-cylinder two-stroke, blades for a fan)
            rng: Random generator for harmonic phases
        """
        self.fs = sample_rate
        self.firings_per_rev = firings_per_rev
        self.rng = rng if rng is not None else np.random.default_rng()

    def rpm_to_fundamental(self, rpm: float) -> float:
        """
        Convert RPM to fundamental frequency.

        Examples:
        - Two-stroke mower at 3000 RPM: 3000 / 60 = 50 Hz
        - 5-blade fan at 1200 RPM: (1200 / 60) * 5 = 100 Hz
        """
        return (rpm / 60) * self.firings_per_rev

    def generate(
        self,
        duration: float,
        rpm: float = 3000,
        harmonic_weights: List[float] = None,
        amplitude: float = 1.0
    ) -> np.ndarray:
        """
        Generate engine noise signal.

        Args:
            duration: Signal duration in seconds
            rpm: Engine RPM
            harmonic_weights: Relative amplitude of each harmonic
            amplitude: Peak amplitude

        Returns:
            Engine noise signal
        """
        n_samples = int(duration * self.fs)
        t = np.arange(n_samples) / self.fs

        f0 = self.rpm_to_fundamental(rpm)

        # Default harmonic weights (typical engine spectrum)
        if harmonic_weights is None:
            harmonic_weights = [1.0, 0.6, 0.35, 0.2, 0.12, 0.08]

        signal = np.zeros(n_samples)
        for k, weight in enumerate(harmonic_weights, 1):
            freq = f0 * k
            if freq < self.fs / 2:
                phase = self.rng.random() * 2 * np.pi
                signal += weight * np.sin(2 * np.pi * freq * t + phase)

        # Normalize and scale
        if np.max(np.abs(signal), initial=0.0) > 0:
            signal = amplitude * signal / np.max(np.abs(signal))

        return signal
