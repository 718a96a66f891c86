import numpy as np
import pytest

from whisperwave import AudioBuffer


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def noisy_tone(rng):
    """2000 samples: 300 Hz tone plus white noise at 8 kHz."""
    n = 2000
    t = np.arange(n) / 8000
    return (0.3 * np.sin(2 * np.pi * 300 * t) + 0.05 * rng.standard_normal(n)).astype(np.float32)


@pytest.fixture
def stereo_buffer(noisy_tone, rng):
    right = (0.2 * rng.standard_normal(len(noisy_tone))).astype(np.float32)
    return AudioBuffer((noisy_tone, right), 8000)
