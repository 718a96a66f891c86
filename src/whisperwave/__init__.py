"""
Whisperwave: adaptive LMS noise cancellation with heuristic noise classification.

    from whisperwave import AudioBuffer, classify, process

    buffer = AudioBuffer.mono(samples, 44100)
    result = classify(buffer)
    cleaned = process(buffer, result.label)
"""

from loguru import logger

from .core import (
    AudioBuffer,
    WhisperwaveError,
    InvalidInputError,
    ProcessingCancelled,
    FeedbackLMS,
    run_lms,
    smooth_and_normalize,
    NoiseCanceller,
    process,
)
from .classifier import (
    NoiseArchetype,
    NoiseClassifier,
    ClassificationResult,
    classify,
    extract_features,
    get_params,
)
from .utils import configure_logging, load_wav, save_wav

# Library stays quiet unless the application opts in via configure_logging()
logger.disable("whisperwave")

__all__ = [
    'AudioBuffer',
    'WhisperwaveError',
    'InvalidInputError',
    'ProcessingCancelled',
    'FeedbackLMS',
    'run_lms',
    'smooth_and_normalize',
    'NoiseCanceller',
    'process',
    'NoiseArchetype',
    'NoiseClassifier',
    'ClassificationResult',
    'classify',
    'extract_features',
    'get_params',
    'configure_logging',
    'load_wav',
    'save_wav',
]

__version__ = "1.0.0"
