# tests/test_metrics.py
import numpy as np
import pytest

from whisperwave import AudioBuffer
from whisperwave.utils import generate_metrics_report, noise_reduction_db, peak_amplitude, rms


def test_half_amplitude_is_six_db(rng):
    x = rng.standard_normal(1000)
    assert noise_reduction_db(x, 0.5 * x) == pytest.approx(6.02, abs=0.01)


def test_silent_output_is_capped():
    assert noise_reduction_db(np.ones(10), np.zeros(10)) == 60.0


def test_silent_input_is_zero():
    assert noise_reduction_db(np.zeros(10), np.ones(10)) == 0.0


def test_window_uses_tail():
    original = np.concatenate([np.full(10, 10.0), np.ones(10)])
    assert noise_reduction_db(original, np.ones(20), window=10) == pytest.approx(0.0)


def test_peak_and_rms():
    x = np.array([0.5, -1.0, 0.5, 0.0])
    assert peak_amplitude(x) == 1.0
    assert rms(x) == pytest.approx(np.sqrt(1.5 / 4))
    assert peak_amplitude(np.zeros(0)) == 0.0


def test_report_lists_channels(stereo_buffer):
    text = generate_metrics_report(stereo_buffer, stereo_buffer, noise_type='Traffic')
    assert 'Noise type: Traffic' in text
    assert 'Channel 0' in text
    assert 'Channel 1' in text
