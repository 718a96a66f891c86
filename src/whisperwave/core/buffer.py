"""
Audio Buffer and Error Types

Container for decoded multi-channel audio handed to the core by callers.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np


class WhisperwaveError(Exception):
    """Base class for all errors raised by whisperwave."""


class InvalidInputError(WhisperwaveError, ValueError):
    """Raised when a buffer or filter parameter is structurally invalid."""


class ProcessingCancelled(WhisperwaveError):
    """Raised when a caller cancels processing between channels."""


def _as_channel(data) -> np.ndarray:
    channel = np.array(data, dtype=np.float32, copy=True)
    if channel.ndim != 1:
        raise InvalidInputError(
            f"Each channel must be one-dimensional, got shape {channel.shape}"
        )
    channel.setflags(write=False)
    return channel


@dataclass(frozen=True, eq=False)
class AudioBuffer:
    """
    Ordered collection of equal-length channels sharing one sample rate.

    Channels are copied to read-only float32 arrays on construction, so a
    buffer never aliases caller-owned memory.

    Attributes:
        channels: One 1-D float32 array per channel
        sample_rate: Sampling rate in Hz
    """

    channels: Tuple[np.ndarray, ...]
    sample_rate: int

    def __post_init__(self):
        if isinstance(self.channels, np.ndarray):
            raise InvalidInputError(
                "channels must be a sequence of arrays; use AudioBuffer.from_array()"
            )
        channels = tuple(_as_channel(c) for c in self.channels)

        if len(channels) == 0:
            raise InvalidInputError("AudioBuffer needs at least one channel")

        rate = self.sample_rate
        if isinstance(rate, bool) or not isinstance(rate, (int, float, np.integer, np.floating)):
            raise InvalidInputError(f"sample_rate must be a number, got {rate!r}")
        if not math.isfinite(rate) or rate <= 0:
            raise InvalidInputError(f"sample_rate must be positive, got {rate}")

        lengths = {len(c) for c in channels}
        if len(lengths) != 1:
            raise InvalidInputError(
                f"All channels must have the same length, got {sorted(lengths)}"
            )
        if lengths.pop() == 0:
            raise InvalidInputError("Channels must contain at least one sample")

        object.__setattr__(self, 'channels', channels)
        object.__setattr__(self, 'sample_rate', int(rate) if float(rate).is_integer() else float(rate))

    @classmethod
    def from_array(cls, data: np.ndarray, sample_rate: Union[int, float]) -> 'AudioBuffer':
        """
        Build a buffer from an array.

        Args:
            data: 1-D mono signal or 2-D array of shape (channels, samples)
            sample_rate: Sampling rate in Hz

        Returns:
            New AudioBuffer
        """
        data = np.asarray(data)
        if data.ndim == 1:
            return cls((data,), sample_rate)
        if data.ndim == 2:
            return cls(tuple(data), sample_rate)
        raise InvalidInputError(f"Expected a 1-D or 2-D array, got shape {data.shape}")

    @classmethod
    def mono(cls, signal: Sequence[float], sample_rate: Union[int, float]) -> 'AudioBuffer':
        """Build a single-channel buffer."""
        return cls((signal,), sample_rate)

    @property
    def num_channels(self) -> int:
        return len(self.channels)

    @property
    def length(self) -> int:
        return len(self.channels[0])

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return self.length / self.sample_rate

    def channel(self, index: int) -> np.ndarray:
        return self.channels[index]

    def to_array(self) -> np.ndarray:
        """Return a writable (channels, samples) copy."""
        return np.stack(self.channels).astype(np.float32)

    def __len__(self) -> int:
        return self.length
