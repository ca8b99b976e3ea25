"""
Suitability engine.

The single scoring pipeline shared by every domain. Per hour:
disqualification rules, subscores, weighted aggregation; then window
detection and the recommendation over the full series. All domain
behaviour comes from the AlgorithmConfig.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from .algorithms.burning import IndoorTemperatureProfile
from .core import LoggerContext
from .core.date_utils import DateUtils
from .geography import GeographicModifier
from .models import (
    AlgorithmConfig,
    GeographicProfile,
    HourlyObservation,
    Location,
    Recommendation,
    ScoringContext,
    ScoringResult,
    Window,
)
from .processing import (
    ConfigValidator,
    DisqualificationEvaluator,
    RecommendationGenerator,
    WeightedAggregator,
    WindowDetector,
)


@dataclass(frozen=True)
class EngineResult:
    """Output of one evaluation."""

    results: Tuple[ScoringResult, ...]
    windows: Tuple[Window, ...]
    recommendation: Recommendation


class SuitabilityEngine:
    """
    Generic suitability scoring engine.

    One instance per domain configuration. Instances hold no per-call state,
    so evaluate() may be called repeatedly and from several threads.
    """

    def __init__(
        self,
        config: AlgorithmConfig,
        geographic_modifier: Optional[GeographicModifier] = None,
        indoor_temperature: Optional[float] = None,
        strict: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize suitability engine.

        Args:
            config: Domain configuration
            geographic_modifier: Geographic context provider (default dataset if None)
            indoor_temperature: Fixed indoor temperature (°C) overriding the profile
            strict: Reject an invalid configuration instead of warning
            logger: Logger instance

        Raises:
            ValueError: If strict and the configuration is invalid
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config = config
        self.geography = geographic_modifier or GeographicModifier(logger=self.logger)
        self.indoor_profile = IndoorTemperatureProfile(indoor_temperature)

        self.validator = ConfigValidator(self.logger)
        self.evaluator = DisqualificationEvaluator(self.logger)
        self.aggregator = WeightedAggregator(self.logger)
        self.detector = WindowDetector(self.logger)
        self.generator = RecommendationGenerator(self.logger)

        is_valid, errors = self.validator.validate(config)
        self.config_errors: Tuple[str, ...] = tuple(errors)
        if not is_valid:
            if strict:
                raise ValueError(
                    f"Invalid algorithm configuration '{config.name}': {'; '.join(errors)}"
                )
            for error in errors:
                self.logger.warning(f"Configuration '{config.name}': {error}")

    def evaluate(
        self,
        observations: Sequence[HourlyObservation],
        location: Location
    ) -> EngineResult:
        """
        Score a forecast series and build the recommendation.

        The first observation is the current hour.

        Args:
            observations: Hourly observations in time order (1-72)
            location: Resolved location

        Returns:
            EngineResult with hourly results, ranked windows and recommendation

        Raises:
            ValueError: If the series is empty, too long or out of order
        """
        is_valid, errors = self.validator.validate_observations(observations)
        if not is_valid:
            raise ValueError(f"Invalid observations: {'; '.join(errors)}")

        with LoggerContext(
            self.logger, "evaluation", domain=self.config.name, location=location.name, hours=len(observations)
        ) as step:
            profile = self.geography.build_profile(location, self.config.features)
            results = [self.score_hour(obs, location, profile) for obs in observations]

            windows = self.detector.detect(results, self.config, location)
            recommendation = self.generator.generate(results, windows, self.config, location)

            step.note(
                disqualified=sum(1 for result in results if result.disqualified),
                windows=len(windows),
                status=recommendation.status,
            )

        return EngineResult(
            results=tuple(results),
            windows=tuple(windows),
            recommendation=recommendation,
        )

    def build_context(
        self,
        observation: HourlyObservation,
        location: Location,
        profile: GeographicProfile
    ) -> ScoringContext:
        """
        Build the scoring context for one hour.

        Args:
            observation: Forecast hour
            location: Location
            profile: Geographic profile of the location

        Returns:
            ScoringContext
        """
        local_time = DateUtils.to_local(observation.timestamp, location.timezone)
        season = DateUtils.season_for_month(local_time.month)

        indoor = None
        if self.config.needs_indoor_temperature:
            indoor = self.indoor_profile.temperature(local_time, season)

        return ScoringContext(
            location=location,
            profile=profile,
            local_time=local_time,
            season=season,
            features=self.config.features,
            wind_direction_factor=self.geography.wind_direction_factor(
                profile, observation.wind_direction, season, self.config.features
            ),
            indoor_temperature=indoor,
        )

    def score_hour(
        self,
        observation: HourlyObservation,
        location: Location,
        profile: GeographicProfile
    ) -> ScoringResult:
        """
        Score one forecast hour.

        Args:
            observation: Forecast hour
            location: Location
            profile: Geographic profile of the location

        Returns:
            ScoringResult
        """
        config = self.config
        context = self.build_context(observation, location, profile)
        outcome = self.evaluator.evaluate(observation, context, config.rules)

        hazards: Tuple[str, ...] = ()
        if config.hazard_check is not None:
            hazards = tuple(config.hazard_check(observation, context))

        modifiers = self._context_modifiers(observation, context)
        if outcome.disqualified:
            components = {name: 0.0 for name in config.weights}
            score = 0
        else:
            components = {name: fn(observation, context) for name, fn in config.subscores.items()}
            multipliers = {name: fn(observation, context) for name, fn in config.multipliers.items()}
            aggregate = self.aggregator.aggregate(
                components, config.weights, outcome.penalty, multipliers
            )
            score = aggregate["score"]
            modifiers.update(multipliers)
            modifiers["weighted_score"] = aggregate["weighted_score"]
            modifiers["soft_penalty"] = outcome.penalty

        status = config.thresholds.classify(score)
        result = ScoringResult(
            timestamp=context.local_time,
            score=score,
            component_scores=components,
            modifiers=modifiers,
            disqualified=outcome.disqualified,
            reasons=outcome.reasons,
            status=status,
            suitable=config.thresholds.is_suitable(score),
            observation=observation,
            warnings=hazards,
        )

        self.logger.debug(
            f"{context.local_time.isoformat()}: score={score} status={status}"
            + (f" reasons={','.join(result.reasons)}" if result.reasons else "")
        )
        return result

    @staticmethod
    def _context_modifiers(observation: HourlyObservation, context: ScoringContext) -> Dict[str, float]:
        profile = context.profile
        modifiers = {
            "coastal_distance_km": profile.coastal_distance_km,
            "coastal_influence": profile.coastal_influence,
            "wind_direction_factor": context.wind_direction_factor,
            "urban_shelter": profile.urban_shelter_factor,
            "topographic": profile.topographic_factor,
            "humidity_penalty": profile.modifiers.humidity_penalty,
            "temperature_moderation": profile.modifiers.temperature_moderation,
        }
        if context.indoor_temperature is not None:
            modifiers["indoor_temperature"] = context.indoor_temperature
            modifiers["temperature_differential"] = context.indoor_temperature - observation.temperature
        return modifiers
