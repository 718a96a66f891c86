# tests/test_features.py
import numpy as np
import pytest

from whisperwave.classifier.features import (
    FEATURE_NAMES,
    extract_features,
    extract_features_windowed,
    periodicity,
    zero_crossing_rate,
)


def brute_periodicity(x, frame):
    total = 0.0
    for lag in range(1, frame):
        corr = 0.0
        for i in range(frame):
            if i + lag < len(x):
                corr += x[i] * x[i + lag]
        total += abs(corr)
    return total / frame


def test_energy_is_mean_square():
    f = extract_features(np.full(100, 0.5))
    assert f.energy == pytest.approx(0.25)


@pytest.mark.parametrize("x,expected", [
    ([1.0, -1.0, 1.0, -1.0], 3 / 4),
    ([0.0, -1.0], 1 / 2),      # zero counts as non-negative
    ([-1.0, 0.0], 1 / 2),
    ([0.0, 0.0, 0.0], 0.0),
    ([0.2, 0.5, 0.1], 0.0),
])
def test_zero_crossings(x, expected):
    assert zero_crossing_rate(np.array(x)) == pytest.approx(expected)


def test_spectral_centroid_is_scaled_zcr(rng):
    f = extract_features(rng.standard_normal(500))
    assert f.spectral_centroid == pytest.approx(f.zero_crossings * 10000)


def test_periodicity_two_samples():
    assert periodicity(np.array([1.0, 1.0])) == pytest.approx(1 / 1024)


def test_periodicity_matches_definition_short_signal(rng):
    x = rng.uniform(-1, 1, 300)
    assert periodicity(x) == pytest.approx(brute_periodicity(x, 1024))


def test_periodicity_only_uses_first_frame(rng):
    x = rng.uniform(-1, 1, 40)
    assert periodicity(x, frame_size=16) == pytest.approx(brute_periodicity(x, 16))

    # Samples beyond frame + lag reach never contribute
    y = x.copy()
    y[32:] = 100.0
    assert periodicity(y, frame_size=16) == pytest.approx(periodicity(x, frame_size=16))


def test_flatness_is_deterministic_and_in_range(rng):
    x = rng.standard_normal(2048)
    a = extract_features(x).spectral_flatness
    b = extract_features(x).spectral_flatness
    assert a == b
    assert 0.2 <= a <= 0.7


def test_flatness_from_rng_when_given():
    x = np.zeros(100)
    f = extract_features(x, rng=np.random.default_rng(9))
    expected = np.random.default_rng(9).random() * 0.5 + 0.2
    assert f.spectral_flatness == pytest.approx(expected)


def test_empty_signal_gives_zero_features():
    f = extract_features(np.zeros(0))
    assert f.energy == 0.0
    assert f.zero_crossings == 0.0
    assert f.periodicity == 0.0
    assert 0.2 <= f.spectral_flatness <= 0.7


def test_to_dict_and_array_order():
    f = extract_features(np.full(10, 0.1))
    assert list(f.to_dict()) == FEATURE_NAMES
    assert f.to_array()[0] == pytest.approx(f.energy)


def test_windowed_shape(rng):
    x = rng.standard_normal(4096)
    assert extract_features_windowed(x, window_size=1024).shape == (7, 5)
    assert extract_features_windowed(x[:100], window_size=1024).shape == (1, 5)
