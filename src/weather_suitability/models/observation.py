"""
Observation data models.

Contains the hourly forecast record consumed by the scoring pipeline.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class HourlyObservation:
    """One forecast hour of meteorological data.

    Out-of-range raw values are rejected here so that scoring never has to.
    """

    timestamp: datetime
    temperature: float  # °C
    humidity: float  # relative humidity (%)
    wind_speed: float  # km/h at 10m
    dew_point: float  # °C
    precipitation: float = 0.0  # mm
    precipitation_probability: float = 0.0  # %
    wind_direction: Optional[float] = None  # degrees (direction wind comes from)
    pressure: Optional[float] = None  # mb (hPa)
    # Enriched fields
    vapor_pressure_deficit: Optional[float] = None  # kPa
    wet_bulb_temperature: Optional[float] = None  # °C
    shortwave_radiation: Optional[float] = None  # W/m²
    evapotranspiration: Optional[float] = None  # mm/day
    sunshine_duration: Optional[float] = None  # hours
    cloud_cover: Optional[float] = None  # %

    def __post_init__(self):
        errors = []

        if self.precipitation < 0:
            errors.append(f"precipitation must be >= 0, got {self.precipitation}")
        if not 0 <= self.precipitation_probability <= 100:
            errors.append(
                f"precipitation_probability must be 0-100, got {self.precipitation_probability}"
            )
        if not 0 <= self.humidity <= 100:
            errors.append(f"humidity must be 0-100, got {self.humidity}")
        if self.wind_speed < 0:
            errors.append(f"wind_speed must be >= 0, got {self.wind_speed}")
        if self.wind_direction is not None and not 0 <= self.wind_direction < 360:
            errors.append(f"wind_direction must be in [0, 360), got {self.wind_direction}")
        if self.cloud_cover is not None and not 0 <= self.cloud_cover <= 100:
            errors.append(f"cloud_cover must be 0-100, got {self.cloud_cover}")

        for name in ("vapor_pressure_deficit", "shortwave_radiation",
                     "evapotranspiration", "sunshine_duration"):
            value = getattr(self, name)
            if value is not None and value < 0:
                errors.append(f"{name} must be >= 0, got {value}")

        if errors:
            raise ValueError(
                f"Invalid observation at {self.timestamp.isoformat()}: {'; '.join(errors)}"
            )

    @property
    def dew_point_spread(self) -> float:
        """Temperature minus dew point (°C)."""
        return self.temperature - self.dew_point

    @property
    def rain_risk(self) -> float:
        """Probability-weighted precipitation amount (probability/100 x mm)."""
        return (self.precipitation_probability / 100) * self.precipitation
