"""
Audio File Utilities

Read and write WAV files as AudioBuffers.
"""

import os
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from scipy.io import wavfile

from ..core.buffer import AudioBuffer, InvalidInputError

PathLike = Union[str, Path]


def _to_float(data: np.ndarray) -> np.ndarray:
    """Convert PCM samples of any wavfile dtype to float32 in [-1, 1]."""
    if data.dtype == np.uint8:
        return (data.astype(np.float32) - 128.0) / 128.0
    if np.issubdtype(data.dtype, np.integer):
        return data.astype(np.float32) / float(np.iinfo(data.dtype).max + 1)
    return data.astype(np.float32)


def load_wav(filename: PathLike) -> AudioBuffer:
    """
    Load a WAV file as an AudioBuffer.

    Integer PCM is scaled to float32 in [-1, 1].

    Args:
        filename: Path to the WAV file

    Returns:
        AudioBuffer with one channel per WAV channel
    """
    sample_rate, data = wavfile.read(str(filename))
    samples = _to_float(data)

    # wavfile gives (samples, channels); buffers are (channels, samples)
    if samples.ndim == 2:
        samples = samples.T
    return AudioBuffer.from_array(samples, sample_rate)


def save_wav(
    filename: PathLike,
    buffer: AudioBuffer,
    bit_depth: int = 16
) -> str:
    """
    Save an AudioBuffer as a WAV audio file.

    Args:
        filename: Output filename (with or without .wav extension)
        buffer: Audio to write
        bit_depth: Bit depth (16 for PCM, 32 for float)

    Returns:
        Full path to saved file
    """
    filename = str(filename)
    if not filename.endswith('.wav'):
        filename += '.wav'

    # Create directory if needed
    os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)

    audio = np.clip(buffer.to_array().T, -1.0, 1.0)
    if buffer.num_channels == 1:
        audio = audio[:, 0]

    if bit_depth == 16:
        data = (audio * 32767).astype(np.int16)
    elif bit_depth == 32:
        data = audio.astype(np.float32)
    else:
        raise InvalidInputError(f"Unsupported bit depth: {bit_depth}")

    wavfile.write(filename, int(buffer.sample_rate), data)
    return filename


def save_comparison_wav(
    filename_prefix: str,
    original: AudioBuffer,
    processed: AudioBuffer,
    output_dir: PathLike = "output/audio",
    gap_seconds: float = 0.5
) -> Tuple[str, str, str]:
    """
    Save original, processed, and combined comparison audio files.

    Creates three files:
    - {prefix}_original.wav: The input
    - {prefix}_processed.wav: After noise cancellation
    - {prefix}_comparison.wav: Original then processed (with silence gap)

    Returns:
        Tuple of (original_path, processed_path, comparison_path)
    """
    output_dir = str(output_dir)
    os.makedirs(output_dir, exist_ok=True)

    original_path = save_wav(os.path.join(output_dir, f"{filename_prefix}_original.wav"), original)
    processed_path = save_wav(os.path.join(output_dir, f"{filename_prefix}_processed.wav"), processed)

    silence = np.zeros((original.num_channels, int(gap_seconds * original.sample_rate)), dtype=np.float32)
    comparison = AudioBuffer.from_array(
        np.concatenate([original.to_array(), silence, processed.to_array()], axis=1),
        original.sample_rate,
    )
    comparison_path = save_wav(os.path.join(output_dir, f"{filename_prefix}_comparison.wav"), comparison)

    return original_path, processed_path, comparison_path


def generate_test_tone(
    frequency: float = 440.0,
    duration: float = 1.0,
    sample_rate: int = 44100,
    amplitude: float = 0.5
) -> np.ndarray:
    """
    Generate a simple test tone.

    Args:
        frequency: Tone frequency in Hz
        duration: Duration in seconds
        sample_rate: Sample rate in Hz
        amplitude: Peak amplitude (0-1)

    Returns:
        Tone signal array
    """
    t = np.arange(int(duration * sample_rate)) / sample_rate
    return amplitude * np.sin(2 * np.pi * frequency * t)
