"""
Metrics for Noise Cancellation Results

Functions to quantify how much a processed buffer differs from its input.
"""

from typing import Dict

import numpy as np


def noise_reduction_db(
    original: np.ndarray,
    processed: np.ndarray,
    window: int = None
) -> float:
    """
    Calculate noise reduction in decibels.

    Args:
        original: Input signal
        processed: Signal after noise cancellation
        window: Optional window size for calculation (uses last N samples)

    Returns:
        Noise reduction in dB, capped at 60 dB (0 dB for a silent input)
    """
    original = np.asarray(original, dtype=np.float64)
    processed = np.asarray(processed, dtype=np.float64)

    if window is not None:
        original = original[-window:]
        processed = processed[-window:]

    original_power = np.mean(original ** 2) if original.size else 0.0
    processed_power = np.mean(processed ** 2) if processed.size else 0.0

    if original_power < 1e-10:
        return 0.0
    if processed_power < 1e-10:
        return 60.0  # Cap at 60 dB

    return float(10 * np.log10(original_power / processed_power))


def peak_amplitude(signal: np.ndarray) -> float:
    """Peak absolute amplitude (0 for an empty signal)."""
    signal = np.asarray(signal)
    return float(np.max(np.abs(signal))) if signal.size else 0.0


def rms(signal: np.ndarray) -> float:
    """Root-mean-square amplitude (0 for an empty signal)."""
    signal = np.asarray(signal, dtype=np.float64)
    return float(np.sqrt(np.mean(signal ** 2))) if signal.size else 0.0


def channel_metrics(original: np.ndarray, processed: np.ndarray) -> Dict[str, float]:
    """
    Collect metrics for one channel.

    Returns:
        Dict with noise reduction, input/output peak and RMS
    """
    return {
        'noise_reduction_db': noise_reduction_db(original, processed),
        'input_peak': peak_amplitude(original),
        'output_peak': peak_amplitude(processed),
        'input_rms': rms(original),
        'output_rms': rms(processed),
    }


def generate_metrics_report(original, processed, noise_type: str = None) -> str:
    """
    Generate a text report comparing two AudioBuffers channel by channel.

    Args:
        original: Input AudioBuffer
        processed: Processed AudioBuffer
        noise_type: Optional label included in the header

    Returns:
        Formatted string report
    """
    report_lines = [
        "=" * 50,
        "NOISE CANCELLATION METRICS REPORT",
        "=" * 50,
    ]
    if noise_type:
        report_lines.append(f"Noise type: {noise_type}")
    report_lines.append(
        f"Channels: {original.num_channels} | Samples: {original.length} | "
        f"Sample rate: {original.sample_rate} Hz"
    )
    report_lines.append("")

    for i in range(original.num_channels):
        m = channel_metrics(original.channel(i), processed.channel(i))
        report_lines.append(
            f"Channel {i}: {m['noise_reduction_db']:.1f} dB reduction | "
            f"peak {m['input_peak']:.3f} -> {m['output_peak']:.3f} | "
            f"RMS {m['input_rms']:.4f} -> {m['output_rms']:.4f}"
        )

    report_lines.append("")
    report_lines.append("=" * 50)

    return "\n".join(report_lines)
