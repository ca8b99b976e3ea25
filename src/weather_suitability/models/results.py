"""
Scoring result data models.

Contains DTOs produced by the pipeline: per-hour results, windows and the
final recommendation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..core.date_utils import DateUtils
from .observation import HourlyObservation


@dataclass(frozen=True)
class ScoringResult:
    """Scored forecast hour."""

    timestamp: datetime  # local time at the location
    score: int  # 0-100
    component_scores: Mapping[str, float]
    modifiers: Mapping[str, float]
    disqualified: bool
    reasons: Tuple[str, ...]  # rule codes (hard and soft) matched this hour
    status: str
    suitable: bool
    observation: HourlyObservation
    warnings: Tuple[str, ...] = ()  # domain hazard codes

    def __post_init__(self):
        object.__setattr__(self, "component_scores", MappingProxyType(dict(self.component_scores)))
        object.__setattr__(self, "modifiers", MappingProxyType(dict(self.modifiers)))


@dataclass(frozen=True)
class Window:
    """Contiguous run of suitable hours."""

    start: datetime
    end: datetime
    duration_hours: int
    average_score: int
    peak_score: int
    peak_time: datetime
    quality: str  # excellent / good / marginal
    ranking_score: float
    description: str = ""

    @property
    def label(self) -> str:
        """Human readable range such as '1pm-4pm'."""
        return f"{DateUtils.format_hour_12(self.start.hour)}-{DateUtils.format_hour_12(self.end.hour)}"


@dataclass(frozen=True)
class ConditionSnapshot:
    """Current-hour conditions included with a recommendation."""

    timestamp: datetime
    score: int
    status: str
    temperature: float  # °C
    humidity: float  # %
    wind_speed: float  # km/h
    precipitation: float  # mm
    components: Mapping[str, float] = field(default_factory=dict)
    indoor_temperature: Optional[float] = None  # °C
    temperature_differential: Optional[float] = None  # °C

    def __post_init__(self):
        object.__setattr__(self, "components", MappingProxyType(dict(self.components)))


@dataclass(frozen=True)
class Recommendation:
    """Top-level output of one evaluation."""

    domain: str
    status: str
    timing: str
    reason: str
    time_window: str
    best_window: Optional[Window]
    alternative_windows: Tuple[Window, ...]
    warnings: Tuple[str, ...]
    warning_messages: Tuple[str, ...]
    current: ConditionSnapshot
    confidence: float  # 0-1
    summary: str
    dominant_factor: Optional[str] = None
    tips: Tuple[str, ...] = ()
