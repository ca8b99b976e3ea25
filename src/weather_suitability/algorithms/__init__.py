"""
Component scoring algorithms.

Provides the response curves and per-domain subscore function tables, plus
the psychrometric and solar geometry helpers they rely on.
"""

from .curves import clamp, interpolate, piecewise_linear, log_growth, asymptotic
from .drying import DryingScorer, DRYING_SUBSCORES, pressure_multiplier
from .burning import BurningScorer, IndoorTemperatureProfile, BURNING_SUBSCORES, temperature_differential
from .solar import SolarGeometry
from . import psychrometrics

__all__ = [
    "clamp",
    "interpolate",
    "piecewise_linear",
    "log_growth",
    "asymptotic",
    "DryingScorer",
    "DRYING_SUBSCORES",
    "pressure_multiplier",
    "BurningScorer",
    "IndoorTemperatureProfile",
    "BURNING_SUBSCORES",
    "temperature_differential",
    "SolarGeometry",
    "psychrometrics",
]
