"""
Noise Classification

Classifies noise type from time-domain features and selects LMS parameters.
"""

from .features import (
    FEATURE_NAMES,
    FeatureVector,
    extract_features,
    extract_features_windowed,
)

from .noise_classifier import (
    NoiseArchetype,
    NoiseClassifier,
    ClassificationResult,
    SCORING_RULES,
    classify,
    confidence_level,
    is_confident,
    matching_archetypes,
)

from .parameter_lookup import (
    LMSParams,
    OPTIMAL_PARAMS,
    DEFAULT_PARAMS,
    get_params,
    get_params_dict,
    get_step_size,
    get_filter_length,
    get_all_params,
    print_params_table,
)

__all__ = [
    # Features
    'FEATURE_NAMES',
    'FeatureVector',
    'extract_features',
    'extract_features_windowed',
    # Classifier
    'NoiseArchetype',
    'NoiseClassifier',
    'ClassificationResult',
    'SCORING_RULES',
    'classify',
    'confidence_level',
    'is_confident',
    'matching_archetypes',
    # Parameters
    'LMSParams',
    'OPTIMAL_PARAMS',
    'DEFAULT_PARAMS',
    'get_params',
    'get_params_dict',
    'get_step_size',
    'get_filter_length',
    'get_all_params',
    'print_params_table',
]
