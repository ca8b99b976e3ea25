"""
Forecast conversion module.

Converts an Open-Meteo hourly payload into HourlyObservation records in the
engine's units, filling missing humidity-derived fields from psychrometric
formulas.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..algorithms import psychrometrics
from ..core import constants
from ..core.date_utils import DateUtils
from ..models import HourlyObservation


# Payload key -> observation field
FIELD_MAP: Dict[str, str] = {
    "temperature_2m": "temperature",
    "relative_humidity_2m": "humidity",
    "dew_point_2m": "dew_point",
    "precipitation": "precipitation",
    "precipitation_probability": "precipitation_probability",
    "wind_speed_10m": "wind_speed",
    "wind_direction_10m": "wind_direction",
    "pressure_msl": "pressure",
    "cloud_cover": "cloud_cover",
    "shortwave_radiation": "shortwave_radiation",
    "sunshine_duration": "sunshine_duration",
    "evapotranspiration": "evapotranspiration",
    "vapour_pressure_deficit": "vapor_pressure_deficit",
    "wet_bulb_temperature_2m": "wet_bulb_temperature",
}

REQUIRED_FIELDS = ("temperature_2m", "relative_humidity_2m", "wind_speed_10m")


class ForecastConverter:
    """Convert forecast payloads to observations."""

    def __init__(
        self,
        timezone: str = constants.DEFAULT_TIMEZONE,
        enrich: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize forecast converter.

        Args:
            timezone: Timezone of the payload timestamps
            enrich: Derive dew point, VPD and wet-bulb when absent
            logger: Logger instance
        """
        self.timezone = timezone
        self.enrich = enrich
        self.logger = logger or logging.getLogger(__name__)

    def convert(self, payload: Dict[str, Any]) -> List[HourlyObservation]:
        """
        Convert an hourly forecast payload.

        Every timestamp becomes an observation so the series stays hourly.
        A missing core value (temperature, humidity, wind speed) is carried
        over from the nearest earlier hour, or the next hour at the start of
        the series.

        Args:
            payload: Raw JSON payload with an 'hourly' block

        Returns:
            Observations in time order

        Raises:
            ValueError: If the payload is malformed or a core series has no values
        """
        hourly = payload.get("hourly") if isinstance(payload, dict) else None
        if not isinstance(hourly, dict) or "time" not in hourly:
            raise ValueError("Forecast payload has no hourly time series")

        missing = [key for key in REQUIRED_FIELDS if key not in hourly]
        if missing:
            raise ValueError(f"Forecast payload missing required series: {', '.join(missing)}")

        times = hourly["time"]
        for key in FIELD_MAP:
            if key in hourly and len(hourly[key]) != len(times):
                raise ValueError(
                    f"Series '{key}' has {len(hourly[key])} values for {len(times)} timestamps"
                )

        core = {key: self.fill_gaps(key, hourly[key]) for key in REQUIRED_FIELDS}
        filled = sum(
            1 for index in range(len(times))
            if any(hourly[key][index] is None for key in REQUIRED_FIELDS)
        )

        observations = []
        for index, time_str in enumerate(times):
            values = {
                field: hourly[key][index]
                for key, field in FIELD_MAP.items()
                if key in hourly
            }
            for key, series in core.items():
                values[FIELD_MAP[key]] = series[index]
            observations.append(self.convert_hour(time_str, values))

        if filled:
            self.logger.warning(f"Filled missing core values in {filled} forecast hour(s)")

        self.logger.info(f"Converted {len(observations)} forecast hours")
        return observations

    def convert_hour(self, time_str: str, values: Dict[str, Optional[float]]) -> HourlyObservation:
        """
        Convert one hour of values.

        Args:
            time_str: ISO timestamp (local to the converter timezone)
            values: Observation field -> raw value

        Returns:
            HourlyObservation
        """
        timestamp = DateUtils.to_local(datetime.fromisoformat(time_str), self.timezone)

        temperature = float(values["temperature"])
        humidity = max(0.0, min(100.0, float(values["humidity"])))

        dew_point = values.get("dew_point")
        vpd = values.get("vapor_pressure_deficit")
        wet_bulb = values.get("wet_bulb_temperature")
        if self.enrich:
            if dew_point is None:
                dew_point = psychrometrics.dew_point(temperature, humidity)
            if vpd is None:
                vpd = psychrometrics.vapor_pressure_deficit(temperature, humidity)
            if wet_bulb is None:
                wet_bulb = psychrometrics.wet_bulb_temperature(temperature, humidity)
        elif dew_point is None:
            dew_point = psychrometrics.dew_point(temperature, humidity)

        # Open-Meteo reports sunshine in seconds per hour and ET0 in mm per hour
        sunshine = values.get("sunshine_duration")
        if sunshine is not None:
            sunshine = sunshine / constants.SECONDS_PER_HOUR
        et0 = values.get("evapotranspiration")
        if et0 is not None:
            et0 = et0 * constants.HOURS_PER_DAY

        wind_direction = values.get("wind_direction")
        if wind_direction is not None:
            wind_direction = wind_direction % 360

        return HourlyObservation(
            timestamp=timestamp,
            temperature=temperature,
            humidity=humidity,
            wind_speed=max(0.0, float(values["wind_speed"])),
            dew_point=float(dew_point),
            precipitation=max(0.0, values.get("precipitation") or 0.0),
            precipitation_probability=values.get("precipitation_probability") or 0.0,
            wind_direction=wind_direction,
            pressure=values.get("pressure"),
            vapor_pressure_deficit=None if vpd is None else max(0.0, vpd),
            wet_bulb_temperature=wet_bulb,
            shortwave_radiation=values.get("shortwave_radiation"),
            evapotranspiration=et0,
            sunshine_duration=sunshine,
            cloud_cover=values.get("cloud_cover"),
        )

    @staticmethod
    def fill_gaps(key: str, series: List[Optional[float]]) -> List[float]:
        """
        Fill missing values in a core series from neighbouring hours.

        Args:
            key: Payload series name (for error messages)
            series: Raw values, possibly containing None

        Returns:
            Series without None values

        Raises:
            ValueError: If the series has no values at all
        """
        first = next((value for value in series if value is not None), None)
        if first is None and series:
            raise ValueError(f"Series '{key}' has no values")

        filled = []
        last = first
        for value in series:
            if value is not None:
                last = value
            filled.append(last)
        return filled
