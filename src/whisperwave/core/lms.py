"""
Feedback LMS Adaptive Filter Implementation

Single-microphone Least Mean Square filter for noise cancellation.

Update equations, per sample n:
    y(n)   = w^T(n) * x(n)
    e(n)   = x(n) + y(n-1)
    w(n+1) = w(n) - mu * e(n) * x(n)

Where:
    w(n): Adaptive filter weights at time n
    x(n): Delay line [x(n), x(n-1), ..., x(n-L+1)]
    mu: Step-size (learning rate)
    e(n): Error signal, which is also the cancelled output

The error is formed by adding the previous filter output onto the current
input. There is no separate desired signal: the secondary path is modelled
as a one-sample delay and the input doubles as the primary noise, which is
the simplified feedback topology this filter implements.

Stability: large step sizes let the weights grow without bound. Nothing
guards against this; a diverged run produces non-finite output.
"""

from typing import List

import numpy as np
from loguru import logger

from .buffer import InvalidInputError


class FeedbackLMS:
    """
    Feedback LMS adaptive filter.

    One instance owns one filter state (weights + delay line) and is meant to
    process exactly one channel. Build a new instance for every channel.

    Attributes:
        filter_length (int): Number of FIR filter taps (L)
        step_size (float): Adaptation step-size (mu)
        weights (np.ndarray): Adaptive filter coefficients w(n)
    """

    def __init__(self, filter_length: int, step_size: float, track_mse: bool = False):
        """
        Initialize feedback LMS filter.

        Args:
            filter_length: Number of adaptive filter taps (L), at least 1
            step_size: Learning rate mu (0 disables adaptation)
            track_mse: Record e(n)^2 per sample for get_mse(); off by default
                       since the history grows with the signal
        """
        if int(filter_length) != filter_length or filter_length < 1:
            raise InvalidInputError(f"filter_length must be a positive integer, got {filter_length}")
        if not np.isfinite(step_size) or step_size < 0:
            raise InvalidInputError(f"step_size must be finite and non-negative, got {step_size}")

        self.L = int(filter_length)
        self.mu = float(step_size)

        # Weights and delay line are stored as float32; arithmetic runs in float64
        self.weights = np.zeros(self.L, dtype=np.float32)

        # Delay line x(n), x(n-1), ..., x(n-L+1); zero before the signal starts
        self.x_buffer = np.zeros(self.L, dtype=np.float32)

        # y(n-1), fed back into the next error
        self.prev_output = 0.0

        self.track_mse = track_mse
        self.mse_history: List[float] = []

    def generate_output(self, x: float) -> float:
        """
        Push a sample into the delay line and compute y(n) = w^T(n) * x(n).

        Args:
            x: Current input sample x(n)

        Returns:
            Filter output y(n)
        """
        # Shift right by one and insert the new sample
        self.x_buffer[1:] = self.x_buffer[:-1]
        self.x_buffer[0] = x

        return float(np.dot(self.weights.astype(np.float64), self.x_buffer.astype(np.float64)))

    def compute_error(self, x: float, y: float) -> float:
        """
        Form e(n) = x(n) + y(n-1) and remember y(n) for the next sample.

        Args:
            x: Current input sample x(n)
            y: Filter output y(n) just computed

        Returns:
            Error sample e(n)
        """
        e = x + self.prev_output
        self.prev_output = y
        return e

    def update_weights(self, e: float) -> None:
        """
        Update weights using w(n+1) = w(n) - mu * e(n) * x(n).

        The update is computed in float64 and rounded back to float32.

        Args:
            e: Error signal sample e(n)
        """
        step = (self.mu * e) * self.x_buffer.astype(np.float64)
        self.weights = (self.weights.astype(np.float64) - step).astype(np.float32)
        if self.track_mse:
            self.mse_history.append(e * e)

    def process_sample(self, x: float) -> float:
        """
        Run one full step of the recursion.

        Args:
            x: Input sample x(n)

        Returns:
            Output sample e(n)
        """
        x = float(x)
        y = self.generate_output(x)
        e = self.compute_error(x, y)
        self.update_weights(e)
        return e

    def filter_signal(self, signal: np.ndarray) -> np.ndarray:
        """
        Filter an entire signal sample by sample.

        Args:
            signal: Input signal

        Returns:
            Error signal e(n) as float32, same length as the input
        """
        samples = np.asarray(signal, dtype=np.float32)
        output = np.zeros(len(samples), dtype=np.float32)

        for n, x in enumerate(samples):
            output[n] = self.process_sample(x)

        if output.size and not np.all(np.isfinite(output)):
            logger.warning(
                f"LMS diverged (mu={self.mu}, L={self.L}); output contains non-finite samples"
            )

        return output

    def get_mse(self, window: int = 100) -> float:
        """
        Get recent mean squared error.

        Requires track_mse=True; otherwise no history exists and inf is returned.

        Args:
            window: Number of recent samples to average

        Returns:
            Mean squared error over the window
        """
        if len(self.mse_history) < window:
            return float(np.mean(self.mse_history)) if self.mse_history else float('inf')
        return float(np.mean(self.mse_history[-window:]))

    def get_weights(self) -> np.ndarray:
        """Get current adaptive filter weights."""
        return self.weights.copy()

    def reset(self) -> None:
        """Reset filter state to initial conditions."""
        self.weights = np.zeros(self.L, dtype=np.float32)
        self.x_buffer = np.zeros(self.L, dtype=np.float32)
        self.prev_output = 0.0
        self.mse_history = []


def run_lms(signal: np.ndarray, step_size: float, filter_length: int) -> np.ndarray:
    """
    Run the feedback LMS recursion over a complete signal.

    A fresh filter state is built for every call, so identical inputs always
    give identical outputs.

    Args:
        signal: Input signal x(n)
        step_size: Learning rate mu
        filter_length: Number of taps L

    Returns:
        Output signal e(n), float32, same length as the input
    """
    return FeedbackLMS(filter_length, step_size).filter_signal(signal)
