"""
Geographic modifier facade.

Combines coastal, shelter and topographic analysis into a per-location
GeographicProfile and answers the per-hour wind direction question. Never
raises for unknown locations: they fall back to the boundary heuristic.
"""

import logging
from typing import Optional

from ..models import FeatureFlags, GeographicProfile, Location
from .coastal import CoastalAnalyzer, NEUTRAL_MODIFIERS
from .reference import CoastalReferenceData, load_reference_data
from .shelter import ShelterAnalyzer


class GeographicModifier:
    """
    High-level geographic context provider.

    The coastal reference dataset is injected (or loaded once from the
    packaged default) and shared read-only.
    """

    def __init__(
        self,
        reference_data: Optional[CoastalReferenceData] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize geographic modifier.

        Args:
            reference_data: Coastal reference dataset (defaults to packaged data)
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.reference_data = reference_data or load_reference_data()
        self.coastal = CoastalAnalyzer(self.reference_data, logger=self.logger)
        self.shelter = ShelterAnalyzer()

    def build_profile(
        self,
        location: Location,
        features: Optional[FeatureFlags] = None
    ) -> GeographicProfile:
        """
        Compute the geographic context for a location.

        Args:
            location: Resolved location
            features: Feature flags (all enabled if None)

        Returns:
            GeographicProfile
        """
        features = features or FeatureFlags()

        if location.coastal_distance_km is not None:
            distance, source = location.coastal_distance_km, "provided"
        else:
            distance, source = self.coastal.coastal_distance(
                location.latitude, location.longitude, location.name
            )

        tier = self.coastal.classify(distance)

        if features.coastal_intelligence:
            modifiers = self.coastal.modifiers_for(tier)
            influence = self.coastal.influence(distance)
        else:
            modifiers = NEUTRAL_MODIFIERS
            influence = 0.0

        if features.topographic_adjustment:
            shelter = self.shelter.urban_shelter_factor(location.name)
            topographic = self.shelter.topographic_factor(location.latitude, location.longitude)
        else:
            shelter = 1.0
            topographic = 1.0

        profile = GeographicProfile(
            coastal_distance_km=distance,
            coastal_tier=tier,
            coastal_influence=influence,
            modifiers=modifiers,
            bearing_to_coast=self.coastal.bearing_to_coast(location.latitude, location.longitude),
            urban_shelter_factor=shelter,
            topographic_factor=topographic,
            distance_source=source,
        )

        self.logger.info(
            f"Coastal analysis for {location.name or 'location'}: "
            f"distance={distance:.1f}km ({source}), tier={tier}, "
            f"influence={influence * 100:.1f}%"
        )
        return profile

    def wind_direction_factor(
        self,
        profile: GeographicProfile,
        wind_direction: Optional[float],
        season: str,
        features: Optional[FeatureFlags] = None
    ) -> float:
        """
        Multiplier for a wind direction at a location.

        Offshore winds get the tier's bonus, onshore winds its penalty; inland
        tiers are biased towards the prevailing westerly; the result is scaled
        by the seasonal coastal multiplier.

        Args:
            profile: Location profile
            wind_direction: Direction the wind comes from (degrees), or None
            season: Season name
            features: Feature flags (all enabled if None)

        Returns:
            Multiplier (1.0 when no direction or wind analysis is disabled)
        """
        features = features or FeatureFlags()
        if wind_direction is None or not features.wind_analysis:
            return 1.0

        if self.coastal.is_offshore(wind_direction, profile.bearing_to_coast):
            factor = profile.modifiers.offshore_bonus
        else:
            factor = profile.modifiers.onshore_penalty

        if features.coastal_intelligence:
            factor = self.coastal.prevailing_wind_adjustment(
                factor, wind_direction, profile.coastal_tier, season
            )

        return factor * self.coastal.seasonal_multiplier(profile.coastal_influence, season)
