"""
Shelter and topography multipliers.

Small fixed multipliers on wind effectiveness from coarse land use (derived
from the location name) and a regional topography lookup.
"""

import math
from typing import Optional


MAJOR_CITIES = ("london", "birmingham", "manchester", "glasgow", "edinburgh", "liverpool", "bristol")
URBAN_KEYWORDS = ("city", "town", "borough", "district")
RURAL_KEYWORDS = ("village", "countryside", "farm", "moor", "dale", "fell")

MAJOR_CITY_SHELTER = 0.75
URBAN_SHELTER = 0.85
RURAL_EXPOSURE = 1.2


class ShelterAnalyzer:
    """Urban shelter and topographic wind multipliers."""

    @staticmethod
    def urban_shelter_factor(name: Optional[str]) -> float:
        """
        Wind effectiveness multiplier from land use.

        Args:
            name: Location display name

        Returns:
            0.75 for major cities, 0.85 for towns, 1.2 for rural places, else 1.0
        """
        if not name:
            return 1.0

        lowered = name.lower()
        if any(city in lowered for city in MAJOR_CITIES):
            return MAJOR_CITY_SHELTER
        if any(keyword in lowered for keyword in URBAN_KEYWORDS):
            return URBAN_SHELTER
        if any(keyword in lowered for keyword in RURAL_KEYWORDS):
            return RURAL_EXPOSURE
        return 1.0

    @staticmethod
    def topographic_factor(latitude: float, longitude: float) -> float:
        """
        Regional topographic multiplier on wind effectiveness.

        Args:
            latitude: Latitude (degrees)
            longitude: Longitude (degrees)

        Returns:
            Multiplier in [0.85, 1.25]
        """
        # Highlands channel and block winds
        if latitude > 56.5:
            highland = math.sin((longitude + 4) * math.pi) * 0.1 + 1.0
            return max(0.85, min(1.25, highland))

        # Welsh valleys channel coastal moisture inland
        if 51.5 < latitude < 53 and longitude < -3:
            return 0.90

        # Lake District / Peak District uplands
        if (54 < latitude < 54.8 and -3.5 < longitude < -2.5) or (
            53 < latitude < 53.5 and -2 < longitude < -1.5
        ):
            return 1.15

        # Thames and Severn valleys trap moisture
        if (51.3 < latitude < 51.7 and -1 < longitude < 0.5) or (
            51.5 < latitude < 52.2 and -2.5 < longitude < -2
        ):
            return 0.92

        return 1.0
