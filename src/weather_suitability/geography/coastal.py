"""
Coastal analysis module.

Estimates distance to the coast, classifies it into five tiers and works out
whether a given wind blows offshore (land to sea) or onshore.

Distance resolution order:
1. Exact match of the location name in the reference table
2. Inverse-distance interpolation from the 3 nearest reference points
3. Bounding-box edge distance with regional corrections
"""

import logging
import math
from typing import Dict, List, Optional, Tuple

from ..core import constants
from ..core.date_utils import SUMMER, WINTER
from ..models import CoastalModifiers
from .geodesy import haversine_km, initial_bearing
from .reference import CoastalReferenceData


STRONGLY_COASTAL = "STRONGLY_COASTAL"
COASTAL = "COASTAL"
TRANSITIONAL = "TRANSITIONAL"
WEAKLY_INLAND = "WEAKLY_INLAND"
STRONGLY_INLAND = "STRONGLY_INLAND"

COASTAL_TIERS = (STRONGLY_COASTAL, COASTAL, TRANSITIONAL, WEAKLY_INLAND, STRONGLY_INLAND)

COASTAL_MODIFIERS: Dict[str, CoastalModifiers] = {
    STRONGLY_COASTAL: CoastalModifiers(
        humidity_penalty=1.15,
        offshore_bonus=1.20,
        onshore_penalty=0.85,
        temperature_moderation=0.95,
        description="Strong marine influence",
    ),
    COASTAL: CoastalModifiers(
        humidity_penalty=1.10,
        offshore_bonus=1.15,
        onshore_penalty=0.90,
        temperature_moderation=0.97,
        description="Clear marine influence",
    ),
    TRANSITIONAL: CoastalModifiers(
        humidity_penalty=1.05,
        offshore_bonus=1.08,
        onshore_penalty=0.95,
        temperature_moderation=0.99,
        description="Mixed marine/continental conditions",
    ),
    WEAKLY_INLAND: CoastalModifiers(
        humidity_penalty=1.02,
        offshore_bonus=1.03,
        onshore_penalty=0.98,
        temperature_moderation=1.01,
        description="Slight continental advantage",
    ),
    STRONGLY_INLAND: CoastalModifiers(
        humidity_penalty=1.0,
        offshore_bonus=1.0,
        onshore_penalty=1.0,
        temperature_moderation=1.03,
        description="Full continental drying advantage",
    ),
}

# Used when coastal intelligence is switched off
NEUTRAL_MODIFIERS = CoastalModifiers(
    humidity_penalty=1.0,
    offshore_bonus=1.0,
    onshore_penalty=1.0,
    temperature_moderation=1.0,
    description="Coastal adjustments disabled",
)

# Prevailing dry wind for inland UK (westerly) and winter moisture-bearing easterly
WESTERLY_SECTOR = (225.0, 315.0)
EASTERLY_SECTOR = (45.0, 135.0)
INLAND_WESTERLY_BONUS = {STRONGLY_INLAND: 1.08, WEAKLY_INLAND: 1.04}
INLAND_EASTERLY_PENALTY = {STRONGLY_INLAND: 0.95, WEAKLY_INLAND: 0.97}


class CoastalAnalyzer:
    """Coastal distance, tier and onshore/offshore analysis."""

    def __init__(
        self,
        reference_data: CoastalReferenceData,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize coastal analyzer.

        Args:
            reference_data: Immutable coastal reference dataset
            logger: Logger instance
        """
        self.reference_data = reference_data
        self.logger = logger or logging.getLogger(__name__)

    def coastal_distance(
        self,
        latitude: float,
        longitude: float,
        name: Optional[str] = None
    ) -> Tuple[float, str]:
        """
        Estimate distance to the coast.

        Args:
            latitude: Latitude (degrees)
            longitude: Longitude (degrees)
            name: Optional location name for exact lookup

        Returns:
            Tuple of (distance_km, source) where source is 'exact',
            'interpolated' or 'boundary'. Distance is never negative.
        """
        exact = self.reference_data.lookup(name)
        if exact is not None:
            self.logger.debug(f"Coastal distance for '{name}' from reference table: {exact:.1f} km")
            return exact, "exact"

        neighbours = self._nearest_reference_points(latitude, longitude)
        if neighbours:
            weighted = 0.0
            total_weight = 0.0
            for distance_to_point, coastal_km in neighbours:
                weight = 1 / (distance_to_point + 1)
                weighted += coastal_km * weight
                total_weight += weight
            distance = max(0.0, weighted / total_weight)
            self.logger.debug(
                f"Coastal distance interpolated from {len(neighbours)} reference points: "
                f"{distance:.1f} km"
            )
            return distance, "interpolated"

        distance = self.boundary_distance(latitude, longitude)
        self.logger.debug(f"Coastal distance from boundary heuristic: {distance:.1f} km")
        return distance, "boundary"

    def _nearest_reference_points(
        self,
        latitude: float,
        longitude: float
    ) -> List[Tuple[float, float]]:
        """Return (distance to point, coastal distance) for the nearest reference points."""
        candidates = sorted(
            (
                haversine_km(latitude, longitude, point.latitude, point.longitude),
                point.coastal_distance_km,
            )
            for point in self.reference_data.reference_points
        )
        return candidates[:constants.INTERPOLATION_NEIGHBOURS]

    @staticmethod
    def boundary_distance(latitude: float, longitude: float) -> float:
        """
        Rough coastal distance from the UK/Ireland bounding box.

        The minimum distance to any edge of the box is corrected for regional
        geography (Scottish coastline, Welsh uplands, the south-west peninsula,
        East Anglia and the Pennines).

        Args:
            latitude: Latitude (degrees)
            longitude: Longitude (degrees)

        Returns:
            Distance in km, clamped at 0
        """
        to_north = (constants.UK_BOUNDS_NORTH - latitude) * constants.KM_PER_DEGREE_LAT
        to_south = (latitude - constants.UK_BOUNDS_SOUTH) * constants.KM_PER_DEGREE_LAT
        to_east = (constants.UK_BOUNDS_EAST - longitude) * constants.KM_PER_DEGREE_LON
        to_west = (longitude - constants.UK_BOUNDS_WEST) * constants.KM_PER_DEGREE_LON

        base = min(to_north, to_south, to_east, to_west)
        return max(0.0, CoastalAnalyzer._regional_correction(latitude, longitude, base))

    @staticmethod
    def _regional_correction(latitude: float, longitude: float, base: float) -> float:
        # Scotland: indented coastline, marine influence reaches further
        if latitude > 55:
            return base * 0.6

        # Wales
        if longitude < -3 and 51.3 < latitude < 53.5:
            if longitude < -3.5:
                return base * 0.8
            return base * 1.2

        # South-west peninsula
        if latitude < 51.2 and longitude < -2:
            return base * 0.7

        # East Anglia
        if 52 < latitude < 53 and longitude > 0:
            return base * 1.3

        # Pennines
        if 53 < latitude < 54.5 and -2.5 < longitude < -1:
            return base * 1.4

        return base

    @staticmethod
    def classify(distance_km: float) -> str:
        """
        Classify a coastal distance into one of five tiers (half-open bands).

        Args:
            distance_km: Distance to the coast (km)

        Returns:
            Tier name
        """
        if distance_km < constants.STRONGLY_COASTAL_MAX_KM:
            return STRONGLY_COASTAL
        if distance_km < constants.COASTAL_MAX_KM:
            return COASTAL
        if distance_km < constants.TRANSITIONAL_MAX_KM:
            return TRANSITIONAL
        if distance_km < constants.WEAKLY_INLAND_MAX_KM:
            return WEAKLY_INLAND
        return STRONGLY_INLAND

    @staticmethod
    def influence(distance_km: float) -> float:
        """Coastal influence on a 0-1 scale, exp(-d / 15)."""
        return max(0.0, math.exp(-distance_km / constants.COASTAL_INFLUENCE_DECAY_KM))

    @staticmethod
    def modifiers_for(tier: str) -> CoastalModifiers:
        """Get the fixed modifier record for a tier."""
        return COASTAL_MODIFIERS[tier]

    def bearing_to_coast(self, latitude: float, longitude: float) -> float:
        """
        Bearing from a location to its nearest coastal reference point.

        Args:
            latitude: Latitude (degrees)
            longitude: Longitude (degrees)

        Returns:
            Bearing in degrees [0, 360)
        """
        nearest = min(
            self.reference_data.coast_points,
            key=lambda point: haversine_km(latitude, longitude, point.latitude, point.longitude),
        )
        return initial_bearing(latitude, longitude, nearest.latitude, nearest.longitude)

    @staticmethod
    def is_offshore(wind_direction: float, bearing_to_coast: float) -> bool:
        """
        Check whether a wind blows from land towards the sea.

        Wind direction is where the wind comes from, so the wind travels
        towards (direction + 180) % 360. It is offshore when that heading lies
        within 60 degrees of the bearing to the coast.

        Args:
            wind_direction: Meteorological wind direction (degrees)
            bearing_to_coast: Bearing from the location to the coast (degrees)

        Returns:
            True if the wind is offshore
        """
        wind_to = (wind_direction + 180) % 360
        difference = abs(wind_to - bearing_to_coast)
        tolerance = constants.OFFSHORE_TOLERANCE_DEG
        return difference < tolerance or difference > 360 - tolerance

    @staticmethod
    def seasonal_multiplier(influence: float, season: str) -> float:
        """
        Scale coastal effects by season.

        Land-sea temperature contrast is largest in summer and smallest in
        winter.

        Args:
            influence: Coastal influence (0-1)
            season: Season name

        Returns:
            Multiplier >= 1
        """
        if season == SUMMER:
            scale = constants.SUMMER_COASTAL_SCALE
        elif season == WINTER:
            scale = constants.WINTER_COASTAL_SCALE
        else:
            scale = constants.SHOULDER_COASTAL_SCALE
        return 1.0 + influence * scale

    @staticmethod
    def prevailing_wind_adjustment(
        factor: float,
        wind_direction: float,
        tier: str,
        season: str
    ) -> float:
        """
        Bias inland tiers towards the prevailing dry westerly.

        Easterlies are penalised in winter only, when they bring continental
        moisture.

        Args:
            factor: Onshore/offshore factor so far
            wind_direction: Wind direction (degrees)
            tier: Coastal tier
            season: Season name

        Returns:
            Adjusted factor
        """
        if tier not in INLAND_WESTERLY_BONUS:
            return factor

        direction = wind_direction % 360
        if WESTERLY_SECTOR[0] <= direction <= WESTERLY_SECTOR[1]:
            return max(factor, INLAND_WESTERLY_BONUS[tier])
        if EASTERLY_SECTOR[0] <= direction <= EASTERLY_SECTOR[1] and season == WINTER:
            return min(factor, INLAND_EASTERLY_PENALTY[tier])
        return factor
