"""
Forecast data services.

Fetches hourly forecasts and converts them into observations for the engine.
"""

from .forecast_client import OpenMeteoClient, HOURLY_PARAMETERS
from .converter import ForecastConverter

__all__ = [
    "OpenMeteoClient",
    "HOURLY_PARAMETERS",
    "ForecastConverter",
]
