"""
Noise Type Classifier

Scores extracted features against six fixed noise archetypes.

Every archetype starts from a jittered base score in [0.1, 0.3] and gains a
fixed bonus when the features satisfy its threshold rule. The jitter comes
from an injected numpy Generator, so seeded classifiers are reproducible.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

import numpy as np
from loguru import logger

from .. import config
from ..core.buffer import AudioBuffer
from .features import FeatureVector, extract_features


class NoiseArchetype(str, Enum):
    """Noise categories, in scoring order."""
    LAWNMOWER = 'Lawnmower'
    TRAFFIC = 'Traffic'
    CONSTRUCTION = 'Construction'
    FAN_HVAC = 'Fan/HVAC'
    CROWD = 'Crowd'
    WIND = 'Wind'

    @classmethod
    def from_label(cls, label: str) -> 'NoiseArchetype':
        """Case-insensitive lookup by display label."""
        key = label.strip().lower()
        for archetype in cls:
            if archetype.value.lower() == key:
                return archetype
        raise ValueError(f"Unknown noise archetype: {label!r}")


@dataclass(frozen=True)
class ScoringRule:
    """Threshold predicate and bonus for one archetype."""
    predicate: Callable[[FeatureVector], bool]
    bonus: float
    description: str = ''


SCORING_RULES: Dict[NoiseArchetype, ScoringRule] = {
    # High energy, high periodicity
    NoiseArchetype.LAWNMOWER: ScoringRule(
        lambda f: f.energy > 0.1 and f.periodicity > 0.5,
        0.5, 'energy > 0.1 and periodicity > 0.5'),
    # Medium energy, low periodicity
    NoiseArchetype.TRAFFIC: ScoringRule(
        lambda f: 0.05 < f.energy < 0.2 and f.periodicity < 0.3,
        0.4, '0.05 < energy < 0.2 and periodicity < 0.3'),
    # High energy, high zero crossings
    NoiseArchetype.CONSTRUCTION: ScoringRule(
        lambda f: f.energy > 0.15 and f.zero_crossings > 0.3,
        0.3, 'energy > 0.15 and zero_crossings > 0.3'),
    # Medium-low energy, low zero crossings, high periodicity
    NoiseArchetype.FAN_HVAC: ScoringRule(
        lambda f: f.energy < 0.1 and f.zero_crossings < 0.2 and f.periodicity > 0.6,
        0.6, 'energy < 0.1 and zero_crossings < 0.2 and periodicity > 0.6'),
    # Low periodicity
    NoiseArchetype.CROWD: ScoringRule(
        lambda f: f.periodicity < 0.2,
        0.3, 'periodicity < 0.2'),
    # Low-medium energy, low zero crossings
    NoiseArchetype.WIND: ScoringRule(
        lambda f: f.energy < 0.15 and f.zero_crossings < 0.15,
        0.4, 'energy < 0.15 and zero_crossings < 0.15'),
}


@dataclass
class ClassificationResult:
    """Outcome of one classification call."""
    label: str
    scores: Dict[str, float]
    features: Optional[FeatureVector] = field(default=None, compare=False)

    @property
    def archetype(self) -> NoiseArchetype:
        return NoiseArchetype(self.label)

    @property
    def confidence(self) -> float:
        return self.scores[self.label]

    def to_dict(self) -> Dict[str, object]:
        return {'label': self.label, 'scores': dict(self.scores)}


def confidence_level(score: float) -> str:
    """Bucket a score into 'high', 'medium' or 'low'."""
    if score > config.HIGH_CONFIDENCE:
        return 'high'
    if score > config.MEDIUM_CONFIDENCE:
        return 'medium'
    return 'low'


def is_confident(
    result: ClassificationResult,
    threshold: float = config.UNCLASSIFIED_THRESHOLD
) -> bool:
    """
    Whether the selected label is trustworthy enough to show.

    Classification always yields a label; callers use this to decide when to
    report "unable to classify" instead.
    """
    return result.confidence >= threshold


def matching_archetypes(features: FeatureVector) -> List[NoiseArchetype]:
    """Archetypes whose threshold rule holds for the given features."""
    return [a for a, rule in SCORING_RULES.items() if rule.predicate(features)]


class NoiseClassifier:
    """
    Heuristic noise classifier.

    Classes (in scoring order):
        Lawnmower, Traffic, Construction, Fan/HVAC, Crowd, Wind

    Usage:
        classifier = NoiseClassifier(seed=42)
        result = classifier.classify(buffer)
        print(result.label, result.scores)
    """

    CLASSES = [archetype.value for archetype in NoiseArchetype]

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize noise classifier.

        Args:
            rng: Random generator for the base-score jitter
            seed: Seed for a new generator (ignored if rng is given)
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def score_features(self, features: FeatureVector) -> Dict[str, float]:
        """
        Score every archetype for precomputed features.

        Args:
            features: Output of extract_features()

        Returns:
            Mapping from archetype label to score in [0, 1], 2 decimals
        """
        scores: Dict[str, float] = {}
        for archetype, rule in SCORING_RULES.items():
            score = config.BASE_SCORE_MIN + self.rng.random() * config.BASE_SCORE_SPREAD
            if rule.predicate(features):
                score += rule.bonus
            scores[archetype.value] = round(min(1.0, score), config.SCORE_DECIMALS)
        return scores

    @staticmethod
    def select_label(scores: Dict[str, float]) -> str:
        """Arg-max over scores; the first maximum in order wins ties."""
        best_label, best_score = None, float('-inf')
        for label, score in scores.items():
            if score > best_score:
                best_label, best_score = label, score
        return best_label

    def classify(self, audio: Union[AudioBuffer, np.ndarray]) -> ClassificationResult:
        """
        Classify the dominant noise type.

        Buffers are classified on their first channel.

        Args:
            audio: AudioBuffer or 1D signal

        Returns:
            ClassificationResult with label, scores and features
        """
        signal = audio.channel(0) if isinstance(audio, AudioBuffer) else np.asarray(audio)

        features = extract_features(signal)
        scores = self.score_features(features)
        label = self.select_label(scores)

        logger.info(f"Classified noise as {label} (confidence {scores[label]:.2f})")
        logger.debug(f"Features: {features.to_dict()}")

        return ClassificationResult(label=label, scores=scores, features=features)

    def predict(self, audio: Union[AudioBuffer, np.ndarray]) -> str:
        """
        Predict noise class.

        Returns:
            Predicted class label
        """
        return self.classify(audio).label


def classify(
    audio: Union[AudioBuffer, np.ndarray],
    rng: Optional[np.random.Generator] = None
) -> ClassificationResult:
    """Classify with a one-off NoiseClassifier."""
    return NoiseClassifier(rng=rng).classify(audio)
