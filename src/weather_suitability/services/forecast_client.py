"""
Forecast API client for Open-Meteo.

Handles HTTP requests, retries and error handling for the hourly forecast
endpoint. The scoring engine never calls this directly; the application layer
fetches, converts and then evaluates.
"""

import logging
from typing import Any, Dict, List, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants


HOURLY_PARAMETERS: List[str] = [
    "temperature_2m",
    "relative_humidity_2m",
    "dew_point_2m",
    "precipitation",
    "precipitation_probability",
    "wind_speed_10m",
    "wind_direction_10m",
    "pressure_msl",
    "cloud_cover",
    "shortwave_radiation",
    "sunshine_duration",
    "evapotranspiration",
    "vapour_pressure_deficit",
    "wet_bulb_temperature_2m",
]


class OpenMeteoClient:
    """Client for the Open-Meteo hourly forecast API."""

    def __init__(
        self,
        base_url: str = "https://api.open-meteo.com/v1/forecast",
        timeout: int = 30,
        max_retries: int = 3,
        models: Optional[str] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize forecast client.

        Args:
            base_url: Forecast endpoint URL
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            models: Optional weather model selection (e.g. 'ukmo_seamless')
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.models = models
        self.logger = logger or logging.getLogger(__name__)

        # Setup session with retry strategy
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        self.session.headers.update({"Accept": "application/json"})

    def build_params(
        self,
        latitude: float,
        longitude: float,
        hours: int,
        timezone: str
    ) -> Dict[str, Any]:
        """
        Build query parameters for an hourly forecast request.

        Args:
            latitude: Latitude (degrees)
            longitude: Longitude (degrees)
            hours: Number of forecast hours (1-72)
            timezone: Timezone for returned timestamps

        Returns:
            Query parameter dictionary
        """
        params: Dict[str, Any] = {
            "latitude": latitude,
            "longitude": longitude,
            "hourly": ",".join(HOURLY_PARAMETERS),
            "forecast_hours": max(1, min(hours, constants.MAX_FORECAST_HOURS)),
            "timezone": timezone,
            "wind_speed_unit": "kmh",
        }
        if self.models:
            params["models"] = self.models
        return params

    def fetch_hourly(
        self,
        latitude: float,
        longitude: float,
        hours: int = constants.DEFAULT_FORECAST_HOURS,
        timezone: str = constants.DEFAULT_TIMEZONE
    ) -> Dict[str, Any]:
        """
        Fetch the hourly forecast for a location.

        Args:
            latitude: Latitude (degrees)
            longitude: Longitude (degrees)
            hours: Number of forecast hours
            timezone: Timezone for returned timestamps

        Returns:
            Raw JSON payload as dictionary

        Raises:
            requests.exceptions.RequestException: On request failure
            ValueError: If the payload has no hourly block
        """
        params = self.build_params(latitude, longitude, hours, timezone)
        self.logger.debug(f"GET {self.base_url} lat={latitude} lon={longitude} hours={params['forecast_hours']}")

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Forecast request failed for ({latitude}, {longitude}): {e}")
            raise

        payload = response.json()
        if not isinstance(payload, dict) or "hourly" not in payload:
            raise ValueError("Forecast response has no 'hourly' data")

        self.logger.info(
            f"Fetched {len(payload['hourly'].get('time', []))} forecast hours "
            f"for ({latitude:.4f}, {longitude:.4f})"
        )
        return payload

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()
