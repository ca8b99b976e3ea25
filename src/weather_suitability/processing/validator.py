"""
Validation module.

Validates domain algorithm configurations and forecast input before scoring.
Validation reports problems; the caller decides whether to warn or reject.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from ..core import constants
from ..models import AlgorithmConfig, HourlyObservation


class ConfigValidator:
    """Validate algorithm configurations and observation sequences."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize config validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate(self, config: AlgorithmConfig) -> Tuple[bool, List[str]]:
        """
        Validate an algorithm configuration.

        Args:
            config: Domain configuration

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        # Weights
        weight_sum = config.weight_sum
        if abs(weight_sum - 1.0) > constants.WEIGHT_SUM_TOLERANCE:
            errors.append(
                f"Weights for '{config.name}' sum to {weight_sum:.4f} "
                f"(expected 1.0 ± {constants.WEIGHT_SUM_TOLERANCE})"
            )

        for name, weight in config.weights.items():
            if not 0 <= weight <= 1:
                errors.append(f"Invalid weight for {name}: {weight} (must be 0-1)")
            if name not in config.subscores:
                errors.append(f"No subscore function for weighted factor: {name}")

        # Thresholds
        thresholds = config.thresholds
        minimums = [minimum for _, minimum in thresholds.status_tiers]
        if not minimums:
            errors.append("At least one status tier is required")
        elif any(a <= b for a, b in zip(minimums, minimums[1:])):
            errors.append(f"Status tiers must be strictly descending, got {minimums}")

        if thresholds.excellent < thresholds.suitable:
            errors.append(
                f"Excellent threshold ({thresholds.excellent}) is below "
                f"suitable threshold ({thresholds.suitable})"
            )

        if thresholds.min_window_hours < 1:
            errors.append(f"Invalid min_window_hours: {thresholds.min_window_hours} (must be >= 1)")

        # Rules
        names = [rule.name for rule in config.rules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            errors.append(f"Duplicate rule names: {', '.join(duplicates)}")

        for rule in config.rules:
            if rule.penalty < 0:
                errors.append(f"Invalid penalty for rule {rule.name}: {rule.penalty} (must be >= 0)")

        if config.max_alternatives < 0:
            errors.append(f"Invalid max_alternatives: {config.max_alternatives} (must be >= 0)")

        is_valid = len(errors) == 0
        return is_valid, errors

    def validate_observations(
        self,
        observations: Sequence[HourlyObservation]
    ) -> Tuple[bool, List[str]]:
        """
        Validate a forecast series.

        Args:
            observations: Hourly observations

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        if not observations:
            errors.append("No observations supplied")
        elif len(observations) > constants.MAX_FORECAST_HOURS:
            errors.append(
                f"Too many observations: {len(observations)} "
                f"(maximum {constants.MAX_FORECAST_HOURS})"
            )

        for previous, current in zip(observations, observations[1:]):
            if current.timestamp <= previous.timestamp:
                errors.append(
                    f"Observations out of order: {current.timestamp.isoformat()} "
                    f"follows {previous.timestamp.isoformat()}"
                )
                break

        is_valid = len(errors) == 0
        return is_valid, errors
