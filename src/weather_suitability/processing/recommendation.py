"""
Recommendation module.

Turns scored hours and ranked windows into the headline recommendation:
status tier, timing hint, reason, aggregated warnings, tips and a confidence
value.
"""

import logging
import statistics
from datetime import timedelta
from typing import List, Optional, Sequence, Tuple

from ..core.date_utils import DateUtils
from ..models import (
    DECISION_POOR,
    AlgorithmConfig,
    ConditionSnapshot,
    Location,
    Recommendation,
    ScoringResult,
    Window,
)
from .windows import ResultMask, active_mask


NOW = "Now"
NOT_RECOMMENDED = "Not recommended in the forecast period"
NO_WINDOW_LABEL = "N/A"

STRONG_WINDS = "STRONG_WINDS"
STRONG_WIND_KMH = 40.0

# Windows shorter than this get a be-ready tip
SHORT_WINDOW_HOURS = 3

# Upcoming windows within this many hours get a relative phrase
RELATIVE_TIMING_HOURS = 6

# Subscores below this are reported as the dominant negative factor
WEAK_SUBSCORE = 40.0

# Confidence model
BASE_CONFIDENCE = 0.5
WINDOW_CONFIDENCE_STEP = 0.1
MAX_WINDOW_CONFIDENCE = 0.3
CONSISTENCY_STDEV = 20.0
CONSISTENCY_WEIGHT = 0.2
DISQUALIFIED_WEIGHT = 0.2


class RecommendationGenerator:
    """Build a Recommendation from hourly results and windows."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize recommendation generator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def generate(
        self,
        results: Sequence[ScoringResult],
        windows: Sequence[Window],
        config: AlgorithmConfig,
        location: Location
    ) -> Recommendation:
        """
        Generate the recommendation for one evaluation.

        The first result is the current hour.

        Args:
            results: Hourly results in time order (non-empty)
            windows: Ranked windows, best first
            config: Domain configuration
            location: Location (for the domain's hour mask)

        Returns:
            Recommendation
        """
        if not results:
            raise ValueError("Cannot build a recommendation without scored hours")

        current = results[0]
        best = windows[0] if windows else None
        alternatives = tuple(windows[1:1 + config.max_alternatives])

        status = self.select_status(current, best, config)
        timing = self.timing_hint(current, windows, active_mask(config, location))
        warnings = self.aggregate_warnings(results)
        dominant = self.dominant_factor(results, config)
        reason = self.build_reason(best, dominant)
        time_window = best.label if best else NO_WINDOW_LABEL

        title = config.status_messages.get(status, (status, ""))[0]
        summary = f"{status} ({title}): {timing}. {reason}"

        recommendation = Recommendation(
            domain=config.name,
            status=status,
            timing=timing,
            reason=reason,
            time_window=time_window,
            best_window=best,
            alternative_windows=alternatives,
            warnings=warnings,
            warning_messages=tuple(self.warning_text(code, results, config) for code in warnings),
            current=self.snapshot(current),
            confidence=self.confidence(results, windows),
            summary=summary,
            dominant_factor=dominant,
            tips=self.build_tips(current, best, windows, config),
        )

        self.logger.info(
            f"{config.name} recommendation: {status}, timing='{timing}', "
            f"windows={len(windows)}, warnings={len(warnings)}"
        )
        return recommendation

    @staticmethod
    def select_status(
        current: ScoringResult,
        best: Optional[Window],
        config: AlgorithmConfig
    ) -> str:
        """
        Threshold lookup on the current hour or the best window average.

        Args:
            current: Current-hour result
            best: Best window, if any
            config: Domain configuration

        Returns:
            Status tier
        """
        if not config.status_from_best_window:
            return current.status
        if best is None:
            return config.thresholds.fallback_status
        return config.thresholds.classify(best.average_score)

    @staticmethod
    def timing_hint(
        current: ScoringResult,
        windows: Sequence[Window],
        mask: Optional[ResultMask] = None
    ) -> str:
        """
        Phrase when to act.

        'Now' if the current hour is suitable and passes the mask; otherwise
        the nearest upcoming window start, relative ('This afternoon from
        2pm') when within 6 hours and as a clock time ('14:00', 'Tue 14:00'
        on another day) beyond.

        Args:
            current: Current-hour result
            windows: Ranked windows
            mask: Hour filter the current hour must pass (e.g. daylight)

        Returns:
            Timing text
        """
        if current.suitable and (mask is None or mask(current)):
            return NOW

        upcoming = [window for window in windows if window.start >= current.timestamp]
        if not upcoming:
            return NOT_RECOMMENDED

        start = min(upcoming, key=lambda window: window.start).start
        if start - current.timestamp <= timedelta(hours=RELATIVE_TIMING_HOURS):
            return f"{RecommendationGenerator.period_phrase(start.hour)} from {DateUtils.format_hour_12(start.hour)}"

        if start.date() == current.timestamp.date():
            return DateUtils.format_clock(start)
        return f"{start.strftime('%a')} {DateUtils.format_clock(start)}"

    @staticmethod
    def period_phrase(hour: int) -> str:
        """Relative time-of-day phrase for a local hour."""
        if 6 <= hour < 12:
            return "This morning"
        if 12 <= hour < 17:
            return "This afternoon"
        if 17 <= hour < 21:
            return "This evening"
        return "Tonight"

    @staticmethod
    def aggregate_warnings(results: Sequence[ScoringResult]) -> Tuple[str, ...]:
        """
        Deduplicated rule and hazard codes across all hours, first seen first.

        STRONG_WINDS is appended when any hour's wind exceeds 40 km/h.
        """
        seen: List[str] = []
        for result in results:
            for code in result.reasons + result.warnings:
                if code not in seen:
                    seen.append(code)

        if results and RecommendationGenerator.max_wind(results) > STRONG_WIND_KMH:
            seen.append(STRONG_WINDS)
        return tuple(seen)

    @staticmethod
    def max_wind(results: Sequence[ScoringResult]) -> float:
        return max(result.observation.wind_speed for result in results)

    @staticmethod
    def warning_text(code: str, results: Sequence[ScoringResult], config: AlgorithmConfig) -> str:
        """User-facing text for a warning code."""
        if code == STRONG_WINDS:
            return f"Strong winds expected (up to {RecommendationGenerator.max_wind(results):.0f} km/h)"
        return config.describe_warning(code)

    @staticmethod
    def general_tips(
        decision: str,
        best: Optional[Window],
        windows: Sequence[Window]
    ) -> Tuple[str, ...]:
        """
        Practical tips shared by every domain.

        Args:
            decision: Coarse verdict on the current hour
            best: Best window, if any
            windows: All windows

        Returns:
            Tips in display order
        """
        tips = []
        if decision == DECISION_POOR and best is not None:
            tips.append(f"Wait until {DateUtils.format_clock(best.start)} for better conditions")
        if len(windows) > 1:
            tips.append("Multiple good windows available - choose based on your schedule")
        if best is not None and best.duration_hours < SHORT_WINDOW_HOURS:
            tips.append("Window is short - be ready to act quickly")
        return tuple(tips)

    @staticmethod
    def build_tips(
        current: ScoringResult,
        best: Optional[Window],
        windows: Sequence[Window],
        config: AlgorithmConfig
    ) -> Tuple[str, ...]:
        """Domain tips when the config supplies them, else the general ones."""
        decision = config.thresholds.decision(current.score)
        if config.tips is not None:
            return tuple(config.tips(decision, best, windows))
        return RecommendationGenerator.general_tips(decision, best, windows)

    @staticmethod
    def dominant_factor(results: Sequence[ScoringResult], config: AlgorithmConfig) -> Optional[str]:
        """
        The main thing holding scores down.

        The first disqualification in hour order wins; otherwise the weakest
        current subscore below 40.

        Returns:
            Human readable factor, or None if nothing stands out
        """
        for result in results:
            if result.disqualified and result.reasons:
                return config.describe_warning(result.reasons[-1])

        weak = [
            (score, name) for name, score in results[0].component_scores.items()
            if score < WEAK_SUBSCORE
        ]
        if not weak:
            return None
        _, name = min(weak)
        return name.replace("_", " ")

    @staticmethod
    def build_reason(best: Optional[Window], dominant: Optional[str]) -> str:
        """Reason text for the recommendation."""
        if best is not None:
            quality = best.description or best.quality
            return (
                f"{quality.capitalize()} conditions from {DateUtils.format_clock(best.start)} "
                f"to {DateUtils.format_clock(best.end)} ({best.duration_hours} hours, "
                f"average score {best.average_score})"
            )
        if dominant:
            return f"Poor conditions due to {dominant[0].lower()}{dominant[1:]}"
        return "No suitable continuous period in the forecast"

    @staticmethod
    def confidence(results: Sequence[ScoringResult], windows: Sequence[Window]) -> float:
        """
        Confidence in the recommendation (0-1).

        More windows and steadier scores raise it; disqualified hours lower it.
        """
        scores = [result.score for result in results]
        stdev = statistics.pstdev(scores) if len(scores) > 1 else 0.0
        disqualified = sum(1 for result in results if result.disqualified) / len(results)

        value = (
            BASE_CONFIDENCE
            + min(WINDOW_CONFIDENCE_STEP * len(windows), MAX_WINDOW_CONFIDENCE)
            + max(0.0, (CONSISTENCY_STDEV - stdev) / CONSISTENCY_STDEV) * CONSISTENCY_WEIGHT
            - disqualified * DISQUALIFIED_WEIGHT
        )
        return round(max(0.0, min(1.0, value)), 3)

    @staticmethod
    def snapshot(current: ScoringResult) -> ConditionSnapshot:
        """Current-hour condition snapshot."""
        obs = current.observation
        return ConditionSnapshot(
            timestamp=current.timestamp,
            score=current.score,
            status=current.status,
            temperature=obs.temperature,
            humidity=obs.humidity,
            wind_speed=obs.wind_speed,
            precipitation=obs.precipitation,
            components=dict(current.component_scores),
            indoor_temperature=current.modifiers.get("indoor_temperature"),
            temperature_differential=current.modifiers.get("temperature_differential"),
        )
