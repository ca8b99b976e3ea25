"""
Psychrometric calculations.

Vapour pressure, dew point and wet-bulb helpers used to enrich forecast hours
that arrive without the derived humidity fields.
"""

import math

from ..core import constants


def saturation_vapor_pressure(temperature: float) -> float:
    """
    Calculate saturation vapor pressure at a given temperature using Tetens formula.

    Args:
        temperature: Temperature (°C)

    Returns:
        Saturation vapor pressure (kPa)
    """
    return constants.TETENS_A * math.exp(
        (constants.TETENS_B * temperature) / (temperature + constants.TETENS_C)
    )


def actual_vapor_pressure(temperature: float, humidity: float) -> float:
    """Actual vapor pressure (kPa) from temperature (°C) and relative humidity (%)."""
    return saturation_vapor_pressure(temperature) * humidity / 100


def vapor_pressure_deficit(temperature: float, humidity: float) -> float:
    """
    Calculate vapor pressure deficit.

    Args:
        temperature: Air temperature (°C)
        humidity: Relative humidity (%)

    Returns:
        VPD (kPa), never negative
    """
    es = saturation_vapor_pressure(temperature)
    return max(0.0, es - es * humidity / 100)


def dew_point(temperature: float, humidity: float) -> float:
    """
    Calculate dew point with the Magnus approximation.

    Args:
        temperature: Air temperature (°C)
        humidity: Relative humidity (%)

    Returns:
        Dew point (°C), never above the air temperature
    """
    # log(0) is undefined; treat bone-dry air as 0.1%
    rh = max(humidity, 0.1)
    gamma = math.log(rh / 100) + (constants.MAGNUS_A * temperature) / (constants.MAGNUS_B + temperature)
    return min(temperature, constants.MAGNUS_B * gamma / (constants.MAGNUS_A - gamma))


def wet_bulb_temperature(temperature: float, humidity: float) -> float:
    """
    Estimate wet-bulb temperature (Stull 2011).

    Valid for RH 5-99% and -20 to 50 °C at sea level pressure; outside that
    range it is still defined and capped at the air temperature.

    Args:
        temperature: Air temperature (°C)
        humidity: Relative humidity (%)

    Returns:
        Wet-bulb temperature (°C)
    """
    rh = max(humidity, 0.0)
    tw = (
        temperature * math.atan(0.151977 * math.sqrt(rh + 8.313659))
        + math.atan(temperature + rh)
        - math.atan(rh - 1.676331)
        + 0.00391838 * rh ** 1.5 * math.atan(0.023101 * rh)
        - 4.686035
    )
    return min(temperature, tw)
