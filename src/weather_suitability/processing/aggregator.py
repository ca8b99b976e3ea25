"""
Score aggregation module.

Combines per-factor subscores into the final hourly score.
"""

import logging
import math
from typing import Dict, Mapping, Optional

from ..core import constants


class WeightedAggregator:
    """Weighted sum, soft penalties and multipliers for one hour."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize weighted aggregator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def weighted_sum(subscores: Mapping[str, float], weights: Mapping[str, float]) -> float:
        """
        Sum of subscore x weight over the weight map.

        A weighted factor without a subscore contributes 0.
        """
        return sum(subscores.get(name, 0.0) * weight for name, weight in weights.items())

    @staticmethod
    def round_score(value: float) -> int:
        """Round half up to an integer score."""
        return int(math.floor(value + 0.5))

    def aggregate(
        self,
        subscores: Mapping[str, float],
        weights: Mapping[str, float],
        penalty: float = 0.0,
        multipliers: Optional[Mapping[str, float]] = None
    ) -> Dict[str, float]:
        """
        Calculate the final score for one hour.

        Order matters: weighted sum, minus soft penalties (floored at 0),
        times multipliers, clamped to 0-100, then rounded. Callers classify
        the rounded value.

        Args:
            subscores: Factor name -> 0-100 subscore
            weights: Factor name -> weight
            penalty: Accumulated soft penalty
            multipliers: Named multipliers applied after the penalty

        Returns:
            Dictionary with:
                - weighted_score: Raw weighted sum
                - penalised_score: After soft penalties
                - adjusted_score: After multipliers and clamping
                - score: Final rounded integer score
        """
        weighted = self.weighted_sum(subscores, weights)
        penalised = max(constants.MIN_SCORE, weighted - penalty)

        adjusted = penalised
        for value in (multipliers or {}).values():
            adjusted *= value
        adjusted = max(constants.MIN_SCORE, min(constants.MAX_SCORE, adjusted))

        score = self.round_score(adjusted)

        self.logger.debug(
            f"Aggregated score: weighted={weighted:.2f}, penalty={penalty:g}, "
            f"adjusted={adjusted:.2f}, final={score}"
        )

        return {
            "weighted_score": weighted,
            "penalised_score": penalised,
            "adjusted_score": adjusted,
            "score": score,
        }
