"""
Tests for data model validation.
"""

from datetime import datetime

import pytest  # type: ignore

from src.weather_suitability.domains import DRYING_CONFIG
from src.weather_suitability.models import HourlyObservation, Location, ScoringResult, Thresholds


class TestHourlyObservation:
    """Test cases for HourlyObservation model."""

    def test_valid_observation(self, make_observation):
        """Test derived properties of a valid observation."""
        obs = make_observation(temperature=20.0, dew_point=12.5,
                               precipitation=0.5, precipitation_probability=40.0)
        assert obs.dew_point_spread == pytest.approx(7.5)
        assert obs.rain_risk == pytest.approx(0.2)

    @pytest.mark.parametrize("field,value", [
        ("precipitation", -0.1),
        ("precipitation_probability", 101.0),
        ("humidity", -1.0),
        ("humidity", 100.5),
        ("wind_speed", -3.0),
        ("wind_direction", 360.0),
        ("cloud_cover", 120.0),
        ("vapor_pressure_deficit", -0.2),
        ("sunshine_duration", -1.0),
    ])
    def test_out_of_range_rejected(self, make_observation, field, value):
        """Test out-of-range raw values are rejected."""
        with pytest.raises(ValueError, match=field):
            make_observation(**{field: value})

    def test_errors_collected(self):
        """Test every problem is reported in one error."""
        with pytest.raises(ValueError) as exc_info:
            HourlyObservation(
                timestamp=datetime(2024, 6, 15, 12),
                temperature=20.0,
                humidity=120.0,
                wind_speed=-1.0,
                dew_point=10.0,
            )
        assert "humidity" in str(exc_info.value)
        assert "wind_speed" in str(exc_info.value)

    def test_optional_fields_default_to_none(self, make_observation):
        """Test enriched fields are optional."""
        obs = make_observation()
        assert obs.vapor_pressure_deficit is None
        assert obs.wind_direction is None

    def test_frozen(self, make_observation):
        """Test observations are immutable."""
        obs = make_observation()
        with pytest.raises(Exception):
            obs.temperature = 30.0


class TestLocation:
    """Test cases for Location model."""

    def test_valid_location(self):
        """Test a valid location keeps its defaults."""
        location = Location(latitude=51.5, longitude=-0.1, name="London")
        assert location.timezone == "Europe/London"
        assert location.coastal_distance_km is None

    @pytest.mark.parametrize("kwargs", [
        {"latitude": 91.0, "longitude": 0.0},
        {"latitude": 0.0, "longitude": -181.0},
        {"latitude": 50.0, "longitude": 0.0, "coastal_distance_km": -1.0},
        {"latitude": 50.0, "longitude": 0.0, "timezone": "Mars/Olympus"},
    ])
    def test_invalid_location(self, kwargs):
        """Test invalid coordinates, distances and timezones are rejected."""
        with pytest.raises(ValueError):
            Location(**kwargs)


class TestThresholds:
    """Test cases for status classification."""

    @pytest.mark.parametrize("score,status", [
        (100, "YES"),
        (70, "YES"),
        (69, "MAYBE"),
        (50, "MAYBE"),
        (49, "NO"),
        (0, "NO"),
    ])
    def test_drying_tiers(self, score, status):
        """Test drying tier boundaries are inclusive at the minimum."""
        assert DRYING_CONFIG.thresholds.classify(score) == status

    def test_window_quality(self):
        """Test window quality labels."""
        thresholds = Thresholds(
            excellent=70, suitable=50, status_tiers=(("YES", 70),), fallback_status="NO"
        )
        assert thresholds.window_quality(70) == "excellent"
        assert thresholds.window_quality(55) == "good"
        assert thresholds.window_quality(40) == "marginal"
        assert thresholds.is_suitable(50)
        assert not thresholds.is_suitable(49)


class TestAlgorithmConfig:
    """Test cases for the shared configuration object."""

    def test_weights_read_only(self):
        """Test shared weight maps cannot be mutated."""
        with pytest.raises(TypeError):
            DRYING_CONFIG.weights["temperature"] = 0.5

    def test_describe_warning_fallbacks(self):
        """Test warning text falls back to the rule reason, then the code."""
        assert DRYING_CONFIG.describe_warning("RAIN_DETECTED").startswith("Rain forecast")
        assert DRYING_CONFIG.describe_warning("SOMETHING_ELSE") == "Something else"


class TestScoringResult:
    """Test cases for the per-hour result."""

    def test_score_maps_read_only(self, make_observation):
        """Test component scores and modifiers cannot be changed after scoring."""
        components = {"temperature": 80.0}
        result = ScoringResult(
            timestamp=datetime(2024, 6, 15, 12),
            score=80,
            component_scores=components,
            modifiers={"coastal_distance": 5.0},
            disqualified=False,
            reasons=(),
            status="YES",
            suitable=True,
            observation=make_observation(),
        )

        with pytest.raises(TypeError):
            result.component_scores["temperature"] = 0.0
        with pytest.raises(TypeError):
            result.modifiers["coastal_distance"] = 0.0

        components["temperature"] = 0.0
        assert result.component_scores["temperature"] == 80.0, "Result must not share the caller's dict"
