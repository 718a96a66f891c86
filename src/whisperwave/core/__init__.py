"""Core noise-cancellation algorithms and controller"""
from .buffer import AudioBuffer, WhisperwaveError, InvalidInputError, ProcessingCancelled
from .lms import FeedbackLMS, run_lms
from .filters import moving_average, limit_peak, smooth_and_normalize
from .controller import NoiseCanceller, ProcessingReport, process
