"""
Noise Cancellation Controller

Orchestrates label-driven LMS filtering and post-processing over every
channel of an audio buffer.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np
from loguru import logger

from .buffer import AudioBuffer, ProcessingCancelled
from .filters import smooth_and_normalize
from .lms import FeedbackLMS
from ..classifier.parameter_lookup import LMSParams, get_params, is_known
from ..utils.metrics import noise_reduction_db


ProgressCallback = Callable[[int, int], None]
CancelCheck = Callable[[], bool]


@dataclass
class ProcessingReport:
    """Processed buffer plus the parameters and per-channel reduction."""
    output: AudioBuffer
    noise_type: str
    params: LMSParams
    noise_reduction_db: List[float]


class NoiseCanceller:
    """
    Label-driven noise canceller for multi-channel buffers.

    Every channel is filtered by its own FeedbackLMS instance, built inside
    process_channel(), so no filter state is shared between channels.
    """

    def __init__(self, noise_type: Optional[str] = None, max_workers: int = 1):
        """
        Initialize noise canceller.

        Args:
            noise_type: Noise label used to look up (μ, L); unknown labels
                        use the default parameters
            max_workers: Threads used across channels (1 = serial)
        """
        self.noise_type = noise_type or ''
        self.params = get_params(self.noise_type)
        self.max_workers = max(1, int(max_workers))

        if self.noise_type and not is_known(self.noise_type):
            logger.debug(f"No parameters for noise type {self.noise_type!r}, using defaults")
        logger.debug(
            f"Noise type {self.noise_type!r}: mu={self.params.step_size}, "
            f"L={self.params.filter_length}"
        )

    def process_channel(self, signal: np.ndarray) -> np.ndarray:
        """
        Filter and post-process a single channel.

        Args:
            signal: Input channel

        Returns:
            New processed channel, same length
        """
        lms = FeedbackLMS(self.params.filter_length, self.params.step_size)
        return smooth_and_normalize(lms.filter_signal(signal))

    def process(
        self,
        buffer: AudioBuffer,
        progress_callback: Optional[ProgressCallback] = None,
        should_cancel: Optional[CancelCheck] = None
    ) -> AudioBuffer:
        """
        Process every channel of a buffer.

        Args:
            buffer: Input audio
            progress_callback: Called as (channels_done, total) after each channel
            should_cancel: Polled before each channel; returning True raises
                           ProcessingCancelled

        Returns:
            New AudioBuffer with the same shape and sample rate
        """
        total = buffer.num_channels
        outputs: List[Optional[np.ndarray]] = [None] * total

        def check_cancel():
            if should_cancel is not None and should_cancel():
                raise ProcessingCancelled("Processing cancelled by caller")

        if self.max_workers > 1 and total > 1:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, total)) as executor:
                futures = []
                for index in range(total):
                    check_cancel()
                    futures.append(executor.submit(self.process_channel, buffer.channel(index)))
                for index, future in enumerate(futures):
                    outputs[index] = future.result()
                    if progress_callback is not None:
                        progress_callback(index + 1, total)
        else:
            for index in range(total):
                check_cancel()
                outputs[index] = self.process_channel(buffer.channel(index))
                logger.debug(f"Channel {index + 1}/{total} done")
                if progress_callback is not None:
                    progress_callback(index + 1, total)

        return AudioBuffer(tuple(outputs), buffer.sample_rate)

    def process_with_report(self, buffer: AudioBuffer, **kwargs) -> ProcessingReport:
        """
        Process a buffer and measure per-channel noise reduction.

        Returns:
            ProcessingReport
        """
        output = self.process(buffer, **kwargs)
        reductions = [
            noise_reduction_db(buffer.channel(i), output.channel(i))
            for i in range(buffer.num_channels)
        ]
        return ProcessingReport(
            output=output,
            noise_type=self.noise_type,
            params=self.params,
            noise_reduction_db=reductions,
        )

    def get_info(self) -> Dict[str, object]:
        """Get information about the current configuration."""
        return {
            'noise_type': self.noise_type,
            'step_size': self.params.step_size,
            'filter_length': self.params.filter_length,
            'known_noise_type': is_known(self.noise_type),
            'max_workers': self.max_workers,
        }


def process(
    buffer: AudioBuffer,
    noise_type: Optional[str],
    progress_callback: Optional[ProgressCallback] = None,
    should_cancel: Optional[CancelCheck] = None
) -> AudioBuffer:
    """
    Cancel noise in a buffer using parameters chosen by noise type.

    Args:
        buffer: Input audio
        noise_type: Classification label, e.g. 'Traffic'

    Returns:
        New AudioBuffer with the same channel count, length and sample rate
    """
    return NoiseCanceller(noise_type).process(
        buffer,
        progress_callback=progress_callback,
        should_cancel=should_cancel,
    )
