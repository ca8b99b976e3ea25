"""
Scoring pipeline stages.

Provides disqualification, weighted aggregation, window detection,
recommendation generation and configuration validation.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..models import AlgorithmConfig, Location, Recommendation, ScoringResult, Window
from .aggregator import WeightedAggregator
from .disqualification import DisqualificationEvaluator, DisqualificationOutcome
from .recommendation import RecommendationGenerator
from .validator import ConfigValidator
from .windows import WindowDetector


class ResultProcessor:
    """
    Unified post-scoring processor combining window detection and
    recommendation generation.

    This class provides a convenient interface to the stages that work on the
    full hourly sequence.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize result processor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.detector = WindowDetector(self.logger)
        self.generator = RecommendationGenerator(self.logger)

    def detect_windows(
        self,
        results: Sequence[ScoringResult],
        config: AlgorithmConfig,
        location: Location
    ) -> List[Window]:
        """
        Detect and rank suitable windows.

        Args:
            results: Hourly results in time order
            config: Domain configuration
            location: Location (for window masks)

        Returns:
            Ranked windows, best first
        """
        return self.detector.detect(results, config, location)

    def recommend(
        self,
        results: Sequence[ScoringResult],
        config: AlgorithmConfig,
        location: Location
    ) -> Tuple[List[Window], Recommendation]:
        """
        Detect windows and build the recommendation.

        Args:
            results: Hourly results in time order
            config: Domain configuration
            location: Location

        Returns:
            Tuple of (windows, recommendation)
        """
        windows = self.detect_windows(results, config, location)
        return windows, self.generator.generate(results, windows, config, location)


__all__ = [
    "WeightedAggregator",
    "DisqualificationEvaluator",
    "DisqualificationOutcome",
    "RecommendationGenerator",
    "ConfigValidator",
    "WindowDetector",
    "ResultProcessor",
]
