"""
Solar geometry module.

Sunrise, sunset and daylight checks from FAO-56 solar declination and
sunset hour angle. Accuracy is to within a few minutes, which is ample for
hour-level window masking.
"""

import math
from datetime import datetime
from typing import Tuple

from ..core import constants


class SolarGeometry:
    """Daylight calculations for a latitude/longitude."""

    @staticmethod
    def solar_declination(day_number: int) -> float:
        """
        Calculate solar declination for a given day of the year.

        Args:
            day_number: Julian day of the year (1-365/366)

        Returns:
            Solar declination (radians)
        """
        return constants.SOLAR_DECLINATION_AMPLITUDE * math.sin(
            (2 * math.pi / 365) * day_number - constants.SOLAR_DECLINATION_PHASE
        )

    @staticmethod
    def sunset_hour_angle(latitude: float, day_number: int) -> float:
        """
        Calculate the sunset hour angle (FAO-56 equation 25).

        The acos argument is clamped so polar day returns pi and polar night 0.

        Args:
            latitude: Latitude in decimal degrees
            day_number: Day of year (1-365)

        Returns:
            Sunset hour angle (radians)
        """
        lat_rad = math.radians(latitude)
        delta = SolarGeometry.solar_declination(day_number)
        x = -math.tan(lat_rad) * math.tan(delta)
        return math.acos(max(-1.0, min(1.0, x)))

    @staticmethod
    def daylight_hours(latitude: float, day_number: int) -> float:
        """Maximum possible daylight hours N (FAO-56 equation 34)."""
        return constants.HOURS_PER_DAY * SolarGeometry.sunset_hour_angle(latitude, day_number) / math.pi

    @staticmethod
    def sun_times(
        latitude: float,
        longitude: float,
        day_number: int,
        utc_offset_hours: float = 0.0
    ) -> Tuple[float, float]:
        """
        Calculate sunrise and sunset as fractional local clock hours.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees (east positive)
            day_number: Day of year (1-365)
            utc_offset_hours: Local clock offset from UTC (hours)

        Returns:
            Tuple of (sunrise, sunset) in local hours; may fall outside 0-24
            near the poles
        """
        solar_noon = 12.0 - longitude / 15.0 + utc_offset_hours
        half_day = SolarGeometry.daylight_hours(latitude, day_number) / 2
        return solar_noon - half_day, solar_noon + half_day

    @staticmethod
    def is_daylight(local_time: datetime, latitude: float, longitude: float) -> bool:
        """
        Check whether a local hour falls between sunrise and sunset.

        The hour counts as daylight when floor(sunrise) <= hour <= ceil(sunset).

        Args:
            local_time: Local timestamp (aware; naive is treated as UTC clock)
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees

        Returns:
            True if the hour is a daylight hour
        """
        day_number = local_time.timetuple().tm_yday
        day_length = SolarGeometry.daylight_hours(latitude, day_number)
        if day_length >= constants.HOURS_PER_DAY:
            return True
        if day_length <= 0:
            return False

        offset = local_time.utcoffset()
        offset_hours = offset.total_seconds() / constants.SECONDS_PER_HOUR if offset else 0.0
        sunrise, sunset = SolarGeometry.sun_times(latitude, longitude, day_number, offset_hours)
        return math.floor(sunrise) <= local_time.hour <= math.ceil(sunset)
