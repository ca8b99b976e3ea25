"""
Tests for application configuration and domain overrides.
"""

import json

import pytest  # type: ignore

from src.weather_suitability.core import Config
from src.weather_suitability.domains import BURNING_CONFIG, DRYING_CONFIG, get_domain_config
from src.weather_suitability.domains.burning import practical_hours_mask


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate configuration from the caller's environment and working directory."""
    for name in ("CONFIG_FILE", "FORECAST_BASE_URL", "FORECAST_TIMEOUT", "TIMEZONE",
                 "LOG_LEVEL", "INDOOR_TEMPERATURE", "STRICT_WEIGHTS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestConfig:
    """Test cases for Config."""

    def test_defaults_without_file(self):
        """Test built-in defaults apply when config.json is absent."""
        config = Config()
        assert config.timezone == "Europe/London"
        assert config.forecast_hours == 72
        assert config.forecast_base_url.startswith("https://api.open-meteo.com")
        assert config.strict_weights is False
        assert config.indoor_temperature is None

    def test_missing_explicit_file(self, tmp_path):
        """Test an explicitly named missing file is an error."""
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.json"))

    def test_file_merged_over_defaults(self, tmp_path):
        """Test a partial file only overrides the keys it names."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "processing": {"forecast_hours": 24},
            "domains": {"drying": {"thresholds": {"min_window_hours": 3}}},
        }))
        config = Config(str(config_file))
        assert config.forecast_hours == 24
        assert config.timezone == "Europe/London"
        assert config.get_domain_overrides("drying") == {"thresholds": {"min_window_hours": 3}}
        assert config.get_domain_overrides("burning") == {}

    def test_env_overrides(self, monkeypatch):
        """Test environment variables override file values."""
        monkeypatch.setenv("TIMEZONE", "UTC")
        monkeypatch.setenv("INDOOR_TEMPERATURE", "21.5")
        monkeypatch.setenv("STRICT_WEIGHTS", "true")
        config = Config()
        assert config.timezone == "UTC"
        assert config.indoor_temperature == 21.5
        assert config.strict_weights is True

    def test_forecast_hours_validated(self, tmp_path):
        """Test forecast hours outside 1-72 are rejected."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"processing": {"forecast_hours": 96}}))
        with pytest.raises(ValueError, match="forecast_hours"):
            Config(str(config_file))

    def test_dot_notation_get(self):
        """Test nested lookups with defaults."""
        config = Config()
        assert config.get("forecast.timeout") == 30
        assert config.get("forecast.nothing", "fallback") == "fallback"


class TestDomainConfig:
    """Test cases for get_domain_config."""

    def test_known_domains(self):
        """Test the shipped domains are returned unchanged without overrides."""
        assert get_domain_config("drying") is DRYING_CONFIG
        assert get_domain_config("burning") is BURNING_CONFIG
        assert DRYING_CONFIG.version == "2.1.0"
        assert BURNING_CONFIG.version == "2.0.0"

    def test_unknown_domain(self):
        """Test an unknown domain is rejected."""
        with pytest.raises(ValueError, match="Unknown domain"):
            get_domain_config("barbecue")

    def test_threshold_override(self):
        """Test threshold overrides create a new config."""
        config = get_domain_config("drying", {"thresholds": {"suitable": 55, "min_window_hours": 3}})
        assert config.thresholds.suitable == 55
        assert config.thresholds.min_window_hours == 3
        assert config.thresholds.status_tiers == DRYING_CONFIG.thresholds.status_tiers
        assert DRYING_CONFIG.thresholds.suitable == 50

    def test_feature_override(self):
        """Test feature flags can be switched."""
        config = get_domain_config("burning", {"features": {"coastal_intelligence": True}})
        assert config.features.coastal_intelligence is True
        assert BURNING_CONFIG.features.coastal_intelligence is False

    def test_practical_hours_only(self):
        """Test the practical hours option installs the window mask."""
        config = get_domain_config("burning", {"practical_hours_only": True, "max_alternatives": 1})
        assert config.window_mask is practical_hours_mask
        assert config.max_alternatives == 1

    @pytest.mark.parametrize("overrides", [
        {"weights": {"pressure": 0.5}},
        {"thresholds": {"yes": 80}},
        {"features": {"teleport": True}},
    ])
    def test_unknown_override_rejected(self, overrides):
        """Test unsupported override keys are rejected."""
        with pytest.raises(ValueError):
            get_domain_config("drying", overrides)
