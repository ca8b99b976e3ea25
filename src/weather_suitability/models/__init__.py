"""
Data models for the weather suitability engine.

Contains DTOs for observations, locations, algorithm configuration and
scoring output.
"""

from .observation import HourlyObservation
from .location import Location, CoastalModifiers, GeographicProfile
from .algorithm import (
    DECISION_ACCEPTABLE,
    DECISION_EXCELLENT,
    DECISION_POOR,
    HARD,
    SOFT,
    AlgorithmConfig,
    DisqualificationRule,
    FeatureFlags,
    ScoringContext,
    Thresholds,
)
from .results import ScoringResult, Window, ConditionSnapshot, Recommendation

__all__ = [
    "HourlyObservation",
    "Location",
    "CoastalModifiers",
    "GeographicProfile",
    "DECISION_EXCELLENT",
    "DECISION_ACCEPTABLE",
    "DECISION_POOR",
    "HARD",
    "SOFT",
    "AlgorithmConfig",
    "DisqualificationRule",
    "FeatureFlags",
    "ScoringContext",
    "Thresholds",
    "ScoringResult",
    "Window",
    "ConditionSnapshot",
    "Recommendation",
]
