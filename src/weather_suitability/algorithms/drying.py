"""
Drying subscore functions.

Maps each meteorological factor to a 0-100 subscore for outdoor laundry
drying. Vapour pressure deficit dominates; wind, radiation and sunshine
support it. Every enriched field has a fallback from always-present fields.
Geographic context is folded in here: the VPD subscore is divided by the
coastal humidity penalty, wind speed is scaled by direction, shelter,
topography and coastal damping, and temperature by marine moderation.
"""

import math
from typing import Dict

from ..core import constants
from ..models import HourlyObservation, ScoringContext
from ..models.algorithm import SubscoreFunction
from .curves import asymptotic, clamp, interpolate, log_growth


# VPD (kPa)
VPD_FLOOR = 0.2
VPD_RATE = 1.2

# Temperature (°C)
TEMPERATURE_FLOOR = 5.0
TEMPERATURE_RATE = 15.0

# Wind speed (km/h)
CALM_WIND_KMH = 1.0
CALM_WIND_SCORE = 10.0
WIND_RATE = 20.0

# Shortwave radiation (W/m²): reaches 100 at 600 W/m²
RADIATION_FLOOR = 50.0
RADIATION_SCALE = 12.0

# Wet-bulb depression (°C): reaches 100 at 10 °C
WET_BULB_FLOOR = 1.0
WET_BULB_SCALE = 10.0

# Reference evapotranspiration (mm/day): reaches 100 at 6 mm/day
ET0_FLOOR = 1.0
ET0_FLOOR_SCORE = 20.0
ET0_SCALE = 6.0

# Sunshine duration within the hour (hours)
SUNSHINE_FLOOR = 0.1

# Neutral radiation score when neither radiation nor cloud cover is known
UNKNOWN_SKY_SCORE = 50.0

# Pressure multiplier bounds
PRESSURE_MULTIPLIER_MIN = 0.85
PRESSURE_MULTIPLIER_MAX = 1.15


class DryingScorer:
    """Response curves for the drying factors (raw value to 0-100)."""

    @staticmethod
    def vpd_curve(vpd: float) -> float:
        """
        Score vapor pressure deficit.

        Args:
            vpd: Vapor pressure deficit (kPa)

        Returns:
            0 below 0.2 kPa, else 100 * (1 - exp(-(vpd - 0.2) / 1.2))
        """
        if vpd < VPD_FLOOR:
            return 0.0
        return asymptotic(vpd, VPD_FLOOR, VPD_RATE)

    @staticmethod
    def temperature_curve(temperature: float) -> float:
        """Score air temperature (°C): 0 below 5 °C, asymptotic with rate 15."""
        if temperature < TEMPERATURE_FLOOR:
            return 0.0
        return asymptotic(temperature, TEMPERATURE_FLOOR, TEMPERATURE_RATE)

    @staticmethod
    def dew_point_spread_curve(spread: float) -> float:
        """
        Score the temperature/dew point spread.

        Below 1 °C condensation is likely (0); 1-3 °C rises 0 to 50; 3-5 °C
        rises 50 to 100; 5 °C and above is 100.
        """
        if spread < 1:
            return 0.0
        if spread < 3:
            return interpolate(spread, 1, 3, 0, 50)
        if spread < 5:
            return interpolate(spread, 3, 5, 50, 100)
        return 100.0

    @staticmethod
    def wind_speed_curve(wind_speed: float) -> float:
        """Score wind speed (km/h): 10 when calm, else 100 * (1 - exp(-w / 20))."""
        if wind_speed <= CALM_WIND_KMH:
            return CALM_WIND_SCORE
        return asymptotic(wind_speed, 0.0, WIND_RATE)

    @staticmethod
    def radiation_curve(radiation: float) -> float:
        """Score shortwave radiation (W/m²): 0 below 50, log growth to 600."""
        if radiation < RADIATION_FLOOR:
            return 0.0
        return log_growth(radiation, RADIATION_FLOOR, RADIATION_SCALE)

    @staticmethod
    def wet_bulb_curve(depression: float) -> float:
        """Score wet-bulb depression (°C): 0 below 1, log growth to 10."""
        if depression < WET_BULB_FLOOR:
            return 0.0
        return log_growth(depression, WET_BULB_FLOOR, WET_BULB_SCALE)

    @staticmethod
    def evapotranspiration_curve(et0: float) -> float:
        """Score reference evapotranspiration (mm/day): 20 below 1, else 50 + 50 * log(et0) / log(6)."""
        if et0 < ET0_FLOOR:
            return ET0_FLOOR_SCORE
        return 50.0 + 50.0 * math.log(et0) / math.log(ET0_SCALE)

    @staticmethod
    def sunshine_curve(sunshine_hours: float) -> float:
        """Score sunshine duration within the hour: 0 below 0.1 h, else linear to 100."""
        if sunshine_hours < SUNSHINE_FLOOR:
            return 0.0
        return sunshine_hours * 100.0


def vapor_pressure_deficit_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """VPD subscore; falls back to 100 - humidity when VPD is not measured."""
    if obs.vapor_pressure_deficit is None:
        return clamp(100.0 - obs.humidity)
    score = DryingScorer.vpd_curve(obs.vapor_pressure_deficit)
    return clamp(score / ctx.profile.modifiers.humidity_penalty)


def temperature_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    score = DryingScorer.temperature_curve(obs.temperature)
    return clamp(score * ctx.profile.modifiers.temperature_moderation)


def dew_point_spread_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    return clamp(DryingScorer.dew_point_spread_curve(obs.dew_point_spread))


def wind_speed_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """
    Wind speed subscore with geographic adjustments.

    The raw curve is multiplied by the wind direction factor, the urban
    shelter and topographic factors and the coastal damping
    1 - 0.1 * influence (marine air carries moisture).
    """
    profile = ctx.profile
    coastal_damping = 1 - constants.COASTAL_WIND_DAMPING * profile.coastal_influence
    score = (
        DryingScorer.wind_speed_curve(obs.wind_speed)
        * ctx.wind_direction_factor
        * profile.urban_shelter_factor
        * profile.topographic_factor
        * coastal_damping
    )
    return clamp(score)


def shortwave_radiation_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """Radiation subscore; falls back to 100 - cloud cover, or neutral 50."""
    if obs.shortwave_radiation is not None:
        return clamp(DryingScorer.radiation_curve(obs.shortwave_radiation))
    if obs.cloud_cover is not None:
        return clamp(100.0 - obs.cloud_cover)
    return UNKNOWN_SKY_SCORE


def wet_bulb_temperature_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """Wet-bulb subscore; falls back to the temperature subscore."""
    if obs.wet_bulb_temperature is None:
        return temperature_score(obs, ctx)
    depression = obs.temperature - obs.wet_bulb_temperature
    return clamp(DryingScorer.wet_bulb_curve(depression))


def evapotranspiration_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """ET0 subscore; falls back to the mean of the VPD, temperature and wind subscores."""
    if obs.evapotranspiration is None:
        return clamp((
            vapor_pressure_deficit_score(obs, ctx)
            + temperature_score(obs, ctx)
            + wind_speed_score(obs, ctx)
        ) / 3)
    return clamp(DryingScorer.evapotranspiration_curve(obs.evapotranspiration))


def sunshine_duration_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """Sunshine subscore; falls back to the radiation subscore."""
    if obs.sunshine_duration is None:
        return shortwave_radiation_score(obs, ctx)
    return clamp(DryingScorer.sunshine_curve(obs.sunshine_duration))


def wind_direction_score(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """100 x the geographic wind direction factor (neutral 100 without direction)."""
    return clamp(100.0 * ctx.wind_direction_factor)


def pressure_multiplier(obs: HourlyObservation, ctx: ScoringContext) -> float:
    """
    Surface pressure multiplier on the final drying score.

    High pressure brings settled, drier air. 1 + (p - 1013.25) / 1000
    clamped to [0.85, 1.15]; 1.0 when pressure is missing.
    """
    if obs.pressure is None:
        return 1.0
    multiplier = 1 + (obs.pressure - constants.STANDARD_PRESSURE_HPA) / 1000
    return clamp(multiplier, PRESSURE_MULTIPLIER_MIN, PRESSURE_MULTIPLIER_MAX)


DRYING_SUBSCORES: Dict[str, SubscoreFunction] = {
    "vapor_pressure_deficit": vapor_pressure_deficit_score,
    "wind_speed": wind_speed_score,
    "wet_bulb_temperature": wet_bulb_temperature_score,
    "sunshine_duration": sunshine_duration_score,
    "temperature": temperature_score,
    "shortwave_radiation": shortwave_radiation_score,
    "evapotranspiration": evapotranspiration_score,
    "wind_direction": wind_direction_score,
    "dew_point_spread": dew_point_spread_score,
}
