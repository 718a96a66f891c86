# tests/test_noise.py
import numpy as np
import pytest

from whisperwave import NoiseArchetype
from whisperwave.noise import ArchetypeNoiseGenerator, EngineNoiseGenerator


@pytest.mark.parametrize("archetype", list(NoiseArchetype))
def test_each_archetype_has_length_and_peak(archetype):
    signal = ArchetypeNoiseGenerator(8000, seed=0).generate(archetype, 0.5, amplitude=0.4)
    assert len(signal) == 4000
    assert np.max(np.abs(signal)) == pytest.approx(0.4)


def test_label_strings_accepted():
    gen = ArchetypeNoiseGenerator(8000, seed=0)
    assert len(gen.generate('fan/hvac', 0.1)) == 800
    with pytest.raises(ValueError):
        gen.generate('jackhammer', 0.1)


def test_seeded_generation_is_reproducible():
    a = ArchetypeNoiseGenerator(8000, seed=3).generate_all(0.2)
    b = ArchetypeNoiseGenerator(8000, seed=3).generate_all(0.2)
    assert list(a) == [x.value for x in NoiseArchetype]
    for label in a:
        np.testing.assert_array_equal(a[label], b[label])


def test_generate_buffer():
    buf = ArchetypeNoiseGenerator(8000, seed=1).generate_buffer('Wind', 0.25, num_channels=2)
    assert buf.num_channels == 2
    assert buf.length == 2000
    assert buf.sample_rate == 8000


def test_rpm_to_fundamental():
    assert EngineNoiseGenerator(firings_per_rev=5).rpm_to_fundamental(1200) == pytest.approx(100.0)
