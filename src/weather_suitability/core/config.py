"""
Configuration module for the weather suitability engine.

Loads configuration from a JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


DEFAULT_CONFIG: Dict[str, Any] = {
    "forecast": {
        "base_url": "https://api.open-meteo.com/v1/forecast",
        "timeout": 30,
        "max_retries": 3,
        "models": None,
    },
    "processing": {
        "timezone": constants.DEFAULT_TIMEZONE,
        "forecast_hours": constants.DEFAULT_FORECAST_HOURS,
    },
    "scoring": {
        "strict_weights": False,
    },
    "burning": {
        "indoor_temperature": None,
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
    "domains": {},
}


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or 'config.json', falling back to built-in defaults when that
                        file does not exist
        """
        self._explicit = config_file is not None or os.getenv("CONFIG_FILE") is not None
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file and merge it over the defaults."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {self.config_file}")

        self._merge(self.config, loaded)

    @staticmethod
    def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """Recursively merge overrides into base (in place)."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                Config._merge(base[key], value)
            else:
                base[key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("FORECAST_BASE_URL"):
            self.config["forecast"]["base_url"] = os.getenv("FORECAST_BASE_URL")

        if os.getenv("FORECAST_TIMEOUT"):
            self.config["forecast"]["timeout"] = int(os.getenv("FORECAST_TIMEOUT"))

        if os.getenv("TIMEZONE"):
            self.config["processing"]["timezone"] = os.getenv("TIMEZONE")

        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("INDOOR_TEMPERATURE"):
            self.config.setdefault("burning", {})["indoor_temperature"] = float(
                os.getenv("INDOOR_TEMPERATURE")
            )

        if os.getenv("STRICT_WEIGHTS"):
            self.config.setdefault("scoring", {})["strict_weights"] = (
                os.getenv("STRICT_WEIGHTS").lower() in ("1", "true", "yes")
            )

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "forecast": ["base_url", "timeout", "max_retries"],
            "processing": ["timezone", "forecast_hours"],
        }

        missing_sections = [
            section for section in required_config if not isinstance(self.config.get(section), dict)
        ]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if self.config[section].get(key) is None:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        hours = self.config["processing"]["forecast_hours"]
        if not 1 <= int(hours) <= constants.MAX_FORECAST_HOURS:
            raise ValueError(
                f"processing.forecast_hours must be between 1 and "
                f"{constants.MAX_FORECAST_HOURS}, got {hours}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'forecast.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def forecast_base_url(self) -> str:
        """Get forecast API base URL."""
        return self.get("forecast.base_url", "")

    @property
    def forecast_timeout(self) -> int:
        """Get forecast API timeout in seconds."""
        return self.get("forecast.timeout", 30)

    @property
    def forecast_max_retries(self) -> int:
        """Get maximum forecast API retry attempts."""
        return self.get("forecast.max_retries", 3)

    @property
    def forecast_models(self) -> Optional[str]:
        """Get optional forecast model selection (e.g. 'ukmo_seamless')."""
        return self.get("forecast.models")

    @property
    def timezone(self) -> str:
        """Get processing timezone."""
        return self.get("processing.timezone", constants.DEFAULT_TIMEZONE)

    @property
    def forecast_hours(self) -> int:
        """Get number of forecast hours to evaluate."""
        return int(self.get("processing.forecast_hours", constants.DEFAULT_FORECAST_HOURS))

    @property
    def strict_weights(self) -> bool:
        """Whether weight map violations reject the configuration."""
        return bool(self.get("scoring.strict_weights", False))

    @property
    def indoor_temperature(self) -> Optional[float]:
        """Get user override for indoor temperature (°C)."""
        value = self.get("burning.indoor_temperature")
        return float(value) if value is not None else None

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    def get_domain_overrides(self, domain: str) -> Dict[str, Any]:
        """
        Get threshold overrides for a scoring domain.

        Args:
            domain: Domain name (e.g., 'drying', 'burning')

        Returns:
            Dictionary of overrides (empty if none configured)
        """
        overrides = self.get(f"domains.{domain}", {})
        if not isinstance(overrides, dict):
            raise ValueError(f"domains.{domain} must be a dictionary")
        return overrides

    def __repr__(self) -> str:
        return f"Config(file={self.config_file}, timezone={self.timezone})"
