"""
Global Configuration for Whisperwave Noise Cancellation
"""

import os
from pathlib import Path

# Project paths
PACKAGE_ROOT = Path(__file__).parent
OUTPUT_DIR = Path(os.environ.get('WHISPERWAVE_OUTPUT_DIR', 'output'))

# Logging
LOG_LEVEL = os.environ.get('WHISPERWAVE_LOG_LEVEL', 'INFO')

# Audio parameters
DEFAULT_SAMPLE_RATE = 44100  # Hz
DEFAULT_BIT_DEPTH = 16

# Feature extraction
ANALYSIS_FRAME_SIZE = 1024          # samples examined by the periodicity proxy
CENTROID_SCALE = 10000              # spectral centroid = zcr * scale
FLATNESS_RANGE = (0.2, 0.7)

# Classification
BASE_SCORE_MIN = 0.1
BASE_SCORE_SPREAD = 0.2             # base = min + rng.random() * spread
SCORE_DECIMALS = 2
HIGH_CONFIDENCE = 0.6
MEDIUM_CONFIDENCE = 0.3
UNCLASSIFIED_THRESHOLD = 0.4        # below this the caller should report "unable to classify"

# LMS defaults (unknown noise type)
LMS_STEP_SIZE = 0.01
LMS_FILTER_LENGTH = 128

# Post-processing
SMOOTHING_RADIUS = 3                # 7-tap box filter
PEAK_CEILING = 0.9
