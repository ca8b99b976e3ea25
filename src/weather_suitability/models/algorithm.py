"""
Algorithm configuration models.

An AlgorithmConfig is the complete description of one scoring domain: weights,
thresholds, disqualification rules, feature flags and the table of subscore
functions. Instances are immutable and shared across calls.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Sequence, Tuple

from .location import GeographicProfile, Location
from .observation import HourlyObservation
from .results import Window


HARD = "hard"
SOFT = "soft"

# Coarse verdict on the current hour, used for tips
DECISION_EXCELLENT = "excellent"
DECISION_ACCEPTABLE = "acceptable"
DECISION_POOR = "poor"


@dataclass(frozen=True)
class ScoringContext:
    """Everything a subscore function or rule may need beyond the observation."""

    location: Location
    profile: GeographicProfile
    local_time: datetime
    season: str
    features: Optional["FeatureFlags"] = None
    wind_direction_factor: float = 1.0  # geographic multiplier for this hour's wind
    indoor_temperature: Optional[float] = None  # °C, burning only

    @property
    def local_hour(self) -> int:
        return self.local_time.hour


SubscoreFunction = Callable[[HourlyObservation, ScoringContext], float]
RulePredicate = Callable[[HourlyObservation, ScoringContext], bool]
HourMultiplier = Callable[[HourlyObservation, ScoringContext], float]


@dataclass(frozen=True)
class DisqualificationRule:
    """A hard (score forced to 0) or soft (fixed penalty) rule."""

    name: str  # reason code, e.g. 'RAIN_DETECTED'
    predicate: RulePredicate
    severity: str
    reason: str
    penalty: float = 0.0

    def __post_init__(self):
        if self.severity not in (HARD, SOFT):
            raise ValueError(f"Invalid rule severity '{self.severity}' for rule {self.name}")

    @property
    def is_hard(self) -> bool:
        return self.severity == HARD


@dataclass(frozen=True)
class Thresholds:
    """Score thresholds for one domain.

    status_tiers are (status, minimum score) pairs in descending order; a score
    below every tier maps to fallback_status.
    """

    excellent: float
    suitable: float
    status_tiers: Tuple[Tuple[str, float], ...]
    fallback_status: str
    min_window_hours: int = 2

    def classify(self, score: int) -> str:
        """
        Map an integer score to its status tier.

        Args:
            score: Final rounded score (0-100)

        Returns:
            Status tier name
        """
        for status, minimum in self.status_tiers:
            if score >= minimum:
                return status
        return self.fallback_status

    def window_quality(self, average_score: float) -> str:
        """Quality label for a window average."""
        if average_score >= self.excellent:
            return "excellent"
        if average_score >= self.suitable:
            return "good"
        return "marginal"

    def decision(self, score: int) -> str:
        """Coarse verdict for a current-hour score."""
        if score >= self.excellent:
            return DECISION_EXCELLENT
        if score >= self.suitable:
            return DECISION_ACCEPTABLE
        return DECISION_POOR

    def is_suitable(self, score: int) -> bool:
        return score >= self.suitable


@dataclass(frozen=True)
class FeatureFlags:
    """Toggles for the optional geographic and temporal adjustments."""

    coastal_intelligence: bool = True
    wind_analysis: bool = True
    topographic_adjustment: bool = True
    temporal_weighting: bool = True


@dataclass(frozen=True)
class AlgorithmConfig:
    """Complete scoring configuration for one domain."""

    name: str
    version: str
    weights: Mapping[str, float]
    subscores: Mapping[str, SubscoreFunction]
    thresholds: Thresholds
    rules: Tuple[DisqualificationRule, ...]
    features: FeatureFlags = field(default_factory=FeatureFlags)
    # Multipliers applied after the soft penalties (e.g. surface pressure)
    multipliers: Mapping[str, HourMultiplier] = field(default_factory=dict)
    # Restricts which hours may belong to a window (e.g. daylight only)
    window_mask: Optional[Callable[[datetime, Location], bool]] = None
    # Ranking adjustment by window start/end local hour
    ranking_bonus: Optional[Callable[[int, int], float]] = None
    # Short description of a window from its rounded average score
    describe_window: Optional[Callable[[int], str]] = None
    # Extra warning codes for an hour beyond its rule reasons
    hazard_check: Optional[Callable[[HourlyObservation, ScoringContext], Tuple[str, ...]]] = None
    warning_messages: Mapping[str, str] = field(default_factory=dict)
    # Tips from (decision, best window, all windows); None uses the generic tips
    tips: Optional[Callable[[str, Optional[Window], Sequence[Window]], Tuple[str, ...]]] = None
    # Status -> (title, subtitle)
    status_messages: Mapping[str, Tuple[str, str]] = field(default_factory=dict)
    max_alternatives: int = 2
    # Classify status from the best window average instead of the current hour
    status_from_best_window: bool = False
    # Compute an indoor temperature for each hour (stack effect domains)
    needs_indoor_temperature: bool = False

    def __post_init__(self):
        # Freeze the lookup tables so shared instances cannot be mutated
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))
        object.__setattr__(self, "subscores", MappingProxyType(dict(self.subscores)))
        object.__setattr__(self, "multipliers", MappingProxyType(dict(self.multipliers)))
        object.__setattr__(
            self, "warning_messages", MappingProxyType(dict(self.warning_messages))
        )
        object.__setattr__(
            self, "status_messages", MappingProxyType(dict(self.status_messages))
        )
        object.__setattr__(self, "rules", tuple(self.rules))

    @property
    def weight_sum(self) -> float:
        return sum(self.weights.values())

    def describe_warning(self, code: str) -> str:
        """User-facing text for a warning code (falls back to the rule reason)."""
        if code in self.warning_messages:
            return self.warning_messages[code]
        for rule in self.rules:
            if rule.name == code:
                return rule.reason
        return code.replace("_", " ").capitalize()
