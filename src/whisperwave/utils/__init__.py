"""Utility functions for audio I/O, metrics and logging"""
from .metrics import (
    noise_reduction_db,
    peak_amplitude,
    rms,
    channel_metrics,
    generate_metrics_report
)
from .audio import (
    load_wav,
    save_wav,
    save_comparison_wav,
    generate_test_tone
)
from .log import configure_logging
