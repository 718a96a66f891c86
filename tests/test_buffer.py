# tests/test_buffer.py
import numpy as np
import pytest

from whisperwave import AudioBuffer, InvalidInputError


def test_from_array_stereo_shape():
    data = np.zeros((2, 500))
    buf = AudioBuffer.from_array(data, 44100)
    assert buf.num_channels == 2
    assert buf.length == 500
    assert len(buf) == 500
    assert buf.sample_rate == 44100
    assert buf.to_array().shape == (2, 500)


def test_mono_and_duration():
    buf = AudioBuffer.mono(np.ones(22050), 44100)
    assert buf.num_channels == 1
    assert buf.duration == pytest.approx(0.5)
    assert buf.channel(0).dtype == np.float32


def test_buffer_copies_caller_data():
    samples = np.linspace(-1, 1, 100)
    buf = AudioBuffer.mono(samples, 16000)
    samples[:] = 0.0
    assert buf.channel(0)[0] == pytest.approx(-1.0)


def test_channels_are_read_only():
    buf = AudioBuffer.mono(np.zeros(10), 16000)
    with pytest.raises(ValueError):
        buf.channel(0)[0] = 1.0


def test_zero_channels_rejected():
    with pytest.raises(InvalidInputError):
        AudioBuffer((), 44100)


@pytest.mark.parametrize("rate", [0, -44100, float('nan'), float('inf')])
def test_bad_sample_rate_rejected(rate):
    with pytest.raises(InvalidInputError):
        AudioBuffer.mono(np.zeros(10), rate)


def test_mismatched_lengths_rejected():
    with pytest.raises(InvalidInputError):
        AudioBuffer((np.zeros(10), np.zeros(11)), 44100)


def test_empty_channel_rejected():
    with pytest.raises(InvalidInputError):
        AudioBuffer.mono(np.zeros(0), 44100)


def test_multidimensional_channel_rejected():
    with pytest.raises(InvalidInputError):
        AudioBuffer((np.zeros((2, 5)),), 44100)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidInputError, ValueError)
