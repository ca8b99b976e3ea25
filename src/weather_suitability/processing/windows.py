"""
Window detection module.

Scans scored hours for maximal runs of suitable hours and ranks them. Runs
never merge across an unsuitable hour or a gap in the hourly series.
"""

import logging
from datetime import timedelta
from typing import Callable, List, Optional, Sequence

from ..core.date_utils import DateUtils
from ..models import AlgorithmConfig, Location, ScoringResult, Window
from .aggregator import WeightedAggregator


HOUR = timedelta(hours=1)

ResultMask = Callable[[ScoringResult], bool]


def active_mask(config: AlgorithmConfig, location: Location) -> Optional[ResultMask]:
    """
    Hour filter for windows and immediate action.

    The domain's window mask applies only while temporal weighting is
    enabled.

    Args:
        config: Domain configuration
        location: Location passed to the mask

    Returns:
        Filter over scored hours, or None when every hour is allowed
    """
    if config.window_mask is None or not config.features.temporal_weighting:
        return None
    return lambda result: config.window_mask(result.timestamp, location)


class WindowDetector:
    """Find and rank contiguous suitable windows."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize window detector.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def find_runs(
        self,
        results: Sequence[ScoringResult],
        min_hours: int,
        mask: Optional[ResultMask] = None
    ) -> List[List[ScoringResult]]:
        """
        Group consecutive qualifying hours.

        An hour qualifies when it is suitable and passes the mask. A run
        breaks at any hour that does not follow the previous one by exactly
        one hour. Runs shorter than min_hours are dropped.

        Args:
            results: Hourly results in time order
            min_hours: Minimum run length
            mask: Optional hour filter (e.g. daylight only)

        Returns:
            List of runs, each a list of results in time order
        """
        runs = []
        current: List[ScoringResult] = []

        for result in results:
            if current and result.timestamp - current[-1].timestamp != HOUR:
                if len(current) >= min_hours:
                    runs.append(current)
                current = []

            if result.suitable and (mask is None or mask(result)):
                current.append(result)
                continue
            if len(current) >= min_hours:
                runs.append(current)
            current = []

        if len(current) >= min_hours:
            runs.append(current)

        return runs

    def build_window(self, run: Sequence[ScoringResult], config: AlgorithmConfig) -> Window:
        """
        Calculate statistics for a run of hours.

        Args:
            run: Non-empty run of results
            config: Domain configuration (thresholds, ranking, descriptions)

        Returns:
            Window; end is the end of the last hour
        """
        scores = [result.score for result in run]
        average = sum(scores) / len(scores)
        average_score = WeightedAggregator.round_score(average)

        peak = max(run, key=lambda result: result.score)
        start = run[0].timestamp
        end = DateUtils.add_hours(run[-1].timestamp, 1)

        ranking = float(average)
        if config.ranking_bonus is not None:
            ranking += config.ranking_bonus(start.hour, end.hour)

        description = ""
        if config.describe_window is not None:
            description = config.describe_window(average_score)

        return Window(
            start=start,
            end=end,
            duration_hours=len(run),
            average_score=average_score,
            peak_score=peak.score,
            peak_time=peak.timestamp,
            quality=config.thresholds.window_quality(average),
            ranking_score=ranking,
            description=description,
        )

    def detect(
        self,
        results: Sequence[ScoringResult],
        config: AlgorithmConfig,
        location: Location
    ) -> List[Window]:
        """
        Detect and rank windows.

        Args:
            results: Hourly results in time order
            config: Domain configuration
            location: Location (for the window mask)

        Returns:
            Windows sorted by ranking score, best first (ties keep time order)
        """
        mask = active_mask(config, location)
        runs = self.find_runs(results, config.thresholds.min_window_hours, mask)
        windows = [self.build_window(run, config) for run in runs]
        windows.sort(key=lambda window: window.ranking_score, reverse=True)

        self.logger.debug(
            f"Detected {len(windows)} window(s): "
            + ", ".join(f"{w.label} avg={w.average_score} rank={w.ranking_score:.1f}" for w in windows)
        )
        return windows
