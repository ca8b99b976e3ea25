"""
Location data models.

Contains DTOs for the resolved location and its derived geographic context.
"""

from dataclasses import dataclass
from typing import Optional

import pytz

from ..core import constants


@dataclass(frozen=True)
class Location:
    """Resolved location for one recommendation request."""

    latitude: float
    longitude: float
    name: str = ""
    coastal_distance_km: Optional[float] = None  # precomputed, skips the lookup
    timezone: str = constants.DEFAULT_TIMEZONE

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Invalid latitude: {self.latitude} (must be -90 to 90)")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Invalid longitude: {self.longitude} (must be -180 to 180)")
        if self.coastal_distance_km is not None and self.coastal_distance_km < 0:
            raise ValueError(
                f"Invalid coastal distance: {self.coastal_distance_km} (must be >= 0)"
            )
        if self.timezone not in pytz.all_timezones_set:
            raise ValueError(f"Invalid timezone: {self.timezone}")


@dataclass(frozen=True)
class CoastalModifiers:
    """Multipliers attached to a coastal tier."""

    humidity_penalty: float  # divides the VPD subscore
    offshore_bonus: float  # wind blowing land to sea
    onshore_penalty: float  # wind blowing sea to land
    temperature_moderation: float  # marine dampening of temperature effect
    description: str = ""


@dataclass(frozen=True)
class GeographicProfile:
    """Per-location geographic context, computed once per request."""

    coastal_distance_km: float
    coastal_tier: str
    coastal_influence: float  # 0-1
    modifiers: CoastalModifiers
    bearing_to_coast: float  # degrees
    urban_shelter_factor: float
    topographic_factor: float
    distance_source: str  # 'provided', 'exact', 'interpolated' or 'boundary'
