"""
Archetype Noise Mixer

Generates example noise for each classifier archetype, for demos and tests.
No particular classification outcome is guaranteed for the generated audio.
"""

from typing import Dict, Optional, Union

import numpy as np

from ..classifier.noise_classifier import NoiseArchetype
from ..core.buffer import AudioBuffer
from .broadband_noise import BroadbandNoiseGenerator
from .engine_noise import EngineNoiseGenerator
from .wind_noise import WindNoiseGenerator


class ArchetypeNoiseGenerator:
    """
    Synthesizes noise resembling each archetype.
    """

    def __init__(
        self,
        sample_rate: float = 44100,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize archetype generator.

        Args:
            sample_rate: Sampling rate in Hz
            rng: Random generator shared by all sources
            seed: Seed for a new generator (ignored if rng is given)
        """
        self.fs = sample_rate
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.mower = EngineNoiseGenerator(sample_rate, firings_per_rev=1.0, rng=self.rng)
        self.fan = EngineNoiseGenerator(sample_rate, firings_per_rev=5.0, rng=self.rng)
        self.broadband = BroadbandNoiseGenerator(sample_rate, rng=self.rng)
        self.wind = WindNoiseGenerator(sample_rate, rng=self.rng)

    def generate(
        self,
        archetype: Union[NoiseArchetype, str],
        duration: float,
        amplitude: float = 0.5
    ) -> np.ndarray:
        """
        Generate noise for an archetype.

        Args:
            archetype: NoiseArchetype or its label (case-insensitive)
            duration: Duration in seconds
            amplitude: Peak amplitude

        Returns:
            Noise signal
        """
        if not isinstance(archetype, NoiseArchetype):
            archetype = NoiseArchetype.from_label(archetype)

        if archetype is NoiseArchetype.LAWNMOWER:
            return self.mower.generate(duration, rpm=3000, amplitude=amplitude)
        if archetype is NoiseArchetype.FAN_HVAC:
            return self.fan.generate(duration, rpm=1200, harmonic_weights=[1.0, 0.2, 0.05], amplitude=amplitude)
        if archetype is NoiseArchetype.TRAFFIC:
            return self.broadband.traffic(duration, amplitude=amplitude)
        if archetype is NoiseArchetype.CONSTRUCTION:
            return self.broadband.construction(duration, amplitude=amplitude)
        if archetype is NoiseArchetype.CROWD:
            return self.broadband.crowd(duration, amplitude=amplitude)
        return self.wind.generate(duration, amplitude=amplitude)

    def generate_buffer(
        self,
        archetype: Union[NoiseArchetype, str],
        duration: float,
        amplitude: float = 0.5,
        num_channels: int = 1
    ) -> AudioBuffer:
        """Generate an AudioBuffer with independent noise per channel."""
        channels = tuple(
            self.generate(archetype, duration, amplitude) for _ in range(num_channels)
        )
        return AudioBuffer(channels, self.fs)

    def generate_all(self, duration: float, amplitude: float = 0.5) -> Dict[str, np.ndarray]:
        """Generate one signal per archetype, keyed by label."""
        return {a.value: self.generate(a, duration, amplitude) for a in NoiseArchetype}
