"""
Burning subscore functions.

Scores woodburner ignition conditions. The indoor/outdoor temperature
differential drives the chimney stack effect and carries half the composite
weight; pressure, humidity, wind and precipitation make up the rest.
"""

from datetime import datetime
from typing import Dict, Optional, Tuple

from ..core import constants
from ..core.date_utils import AUTUMN, SPRING, SUMMER, WINTER
from ..models import HourlyObservation, ScoringContext
from ..models.algorithm import SubscoreFunction
from .curves import asymptotic, clamp, piecewise_linear


MORNING = "morning"
DAY = "day"
EVENING = "evening"
NIGHT = "night"

# (morning, day, evening, night) indoor temperatures in °C
INDOOR_TEMPERATURES: Dict[str, Tuple[float, float, float, float]] = {
    WINTER: (15.0, 17.0, 18.0, 15.0),
    SPRING: (16.0, 18.0, 19.0, 16.0),
    SUMMER: (17.0, 19.0, 20.0, 17.0),
    AUTUMN: (16.0, 18.0, 19.0, 16.0),
}

# Temperature differential (°C) below the asymptotic tail
DIFFERENTIAL_BREAKPOINTS = ((0.0, 0.0), (2.0, 10.0), (5.0, 30.0), (10.0, 60.0), (15.0, 80.0))
DIFFERENTIAL_TAIL_START = 15.0
DIFFERENTIAL_TAIL_RATE = 10.0

# Storm below 985 mb, flat 100 from 1025 mb
PRESSURE_BREAKPOINTS = ((985.0, 20.0), (995.0, 60.0), (1005.0, 75.0), (1015.0, 90.0), (1025.0, 100.0))

# Damp air below 40% ignites more slowly than 40-50%
HUMIDITY_BREAKPOINTS = ((40.0, 100.0), (50.0, 90.0), (65.0, 70.0), (75.0, 50.0), (85.0, 30.0), (95.0, 10.0))

# Moderate wind helps draw, strong wind causes downdraughts
WIND_BREAKPOINTS = ((3.0, 70.0), (10.0, 85.0), (25.0, 100.0), (40.0, 90.0), (60.0, 60.0))

PRECIPITATION_BREAKPOINTS = ((0.0, 100.0), (1.0, 90.0), (3.0, 70.0), (7.0, 50.0))


class IndoorTemperatureProfile:
    """
    Typical indoor temperature by season and time of day.

    Used for the stack effect differential when no measured indoor
    temperature is supplied.
    """

    def __init__(self, override: Optional[float] = None):
        """
        Initialize indoor temperature profile.

        Args:
            override: Fixed indoor temperature (°C) that replaces the profile
        """
        self.override = override

    @staticmethod
    def period(hour: int) -> str:
        """Time-of-day period for a local hour."""
        if 6 <= hour < 9:
            return MORNING
        if 9 <= hour < 17:
            return DAY
        if 17 <= hour < 23:
            return EVENING
        return NIGHT

    def temperature(self, local_time: datetime, season: str) -> float:
        """
        Indoor temperature for a local time.

        Args:
            local_time: Local timestamp
            season: Season name

        Returns:
            Indoor temperature (°C)
        """
        if self.override is not None:
            return self.override

        morning, day, evening, night = INDOOR_TEMPERATURES[season]
        return {
            MORNING: morning,
            DAY: day,
            EVENING: evening,
            NIGHT: night,
        }[self.period(local_time.hour)]


class BurningScorer:
    """Response curves for the burning factors (raw value to 0-100)."""

    @staticmethod
    def temperature_differential_curve(differential: float) -> float:
        """
        Score the indoor minus outdoor temperature differential.

        Linear segments 0->10 (0-2 °C), 10->30 (2-5), 30->60 (5-10),
        60->80 (10-15), then an asymptotic approach from 80 towards 100 with
        rate constant 10. A negative differential (inversion) scores 0.

        Args:
            differential: Indoor minus outdoor temperature (°C)

        Returns:
            Subscore (0-100, never reaching 100)
        """
        if differential < 0:
            return 0.0
        if differential < DIFFERENTIAL_TAIL_START:
            return piecewise_linear(differential, DIFFERENTIAL_BREAKPOINTS)
        return asymptotic(differential, DIFFERENTIAL_TAIL_START, DIFFERENTIAL_TAIL_RATE, start=80.0)

    @staticmethod
    def pressure_curve(pressure: float) -> float:
        """Score surface pressure (mb); high pressure gives a stronger draft."""
        if pressure < 985:
            return max(0.0, (pressure - 960) / 25 * 20)
        if pressure >= 1025:
            return 100.0
        return piecewise_linear(pressure, PRESSURE_BREAKPOINTS)

    @staticmethod
    def humidity_curve(humidity: float) -> float:
        """Score relative humidity (%); fog-level humidity scores near 0."""
        if humidity > 95:
            return (100 - humidity) / 5 * 10
        if humidity < 40:
            return max(75.0, 85 - (40 - humidity) * 0.5)
        return piecewise_linear(humidity, HUMIDITY_BREAKPOINTS)

    @staticmethod
    def wind_speed_curve(wind_speed: float) -> float:
        """Score wind speed (km/h); best draft at 25 km/h."""
        if wind_speed < 3:
            return 60 + wind_speed / 3 * 10
        if wind_speed >= 60:
            return max(20.0, 60 - (wind_speed - 60) / 20 * 30)
        return piecewise_linear(wind_speed, WIND_BREAKPOINTS)

    @staticmethod
    def precipitation_curve(precipitation: float) -> float:
        """Score precipitation amount (mm)."""
        if precipitation >= 7:
            return max(20.0, 50 - (precipitation - 7) / 10 * 20)
        return piecewise_linear(precipitation, PRECIPITATION_BREAKPOINTS)


def indoor_temperature(ctx: ScoringContext) -> float:
    """Indoor temperature for the hour (context value, else the seasonal profile)."""
    if ctx.indoor_temperature is not None:
        return ctx.indoor_temperature
    return IndoorTemperatureProfile().temperature(ctx.local_time, ctx.season)


def temperature_differential(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """Indoor minus outdoor temperature (°C)."""
    return indoor_temperature(ctx) - obs.temperature


def temperature_differential_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    return clamp(BurningScorer.temperature_differential_curve(temperature_differential(obs, ctx)))


def pressure_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """Pressure subscore; standard sea level pressure when not reported."""
    pressure = obs.pressure if obs.pressure is not None else constants.STANDARD_PRESSURE_HPA
    return clamp(BurningScorer.pressure_curve(pressure))


def humidity_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    return clamp(BurningScorer.humidity_curve(obs.humidity))


def wind_speed_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    return clamp(BurningScorer.wind_speed_curve(obs.wind_speed))


def precipitation_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    return clamp(BurningScorer.precipitation_curve(obs.precipitation))


BURNING_SUBSCORES: Dict[str, SubscoreFunction] = {
    "temperature_differential": temperature_differential_score,
    "pressure": pressure_score,
    "humidity": humidity_score,
    "wind_speed": wind_speed_score,
    "precipitation": precipitation_score,
}
