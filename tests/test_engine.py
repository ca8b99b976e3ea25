"""
End-to-end tests for the suitability engine.

Scores hand-built forecast series through the full pipeline for both
domains.
"""

from dataclasses import replace
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest  # type: ignore

from src.weather_suitability.domains import BURNING_CONFIG, DRYING_CONFIG, get_domain_config
from src.weather_suitability.engine import EngineResult, SuitabilityEngine
from src.weather_suitability.geography import GeographicModifier


GOOD_DRYING_HOUR = {
    "temperature": 20.0,
    "humidity": 45.0,
    "dew_point": 7.7,
    "wind_speed": 12.0,
    "vapor_pressure_deficit": 1.286,
    "shortwave_radiation": 450.0,
    "sunshine_duration": 0.6,
    "cloud_cover": 40.0,
    "pressure": 1018.0,
    "precipitation": 0.0,
    "precipitation_probability": 5.0,
}

DULL_DRYING_HOUR = {
    "temperature": 12.0,
    "humidity": 88.0,
    "dew_point": 10.0,
    "wind_speed": 4.0,
    "shortwave_radiation": 20.0,
    "sunshine_duration": 0.0,
    "cloud_cover": 95.0,
    "pressure": 1018.0,
    "precipitation": 0.0,
    "precipitation_probability": 20.0,
}

COLD_EVENING_HOUR = {
    "temperature": 2.0,
    "humidity": 70.0,
    "dew_point": -2.0,
    "wind_speed": 15.0,
    "pressure": 1020.0,
}


@pytest.fixture(scope="module")
def geography():
    """Shared geographic modifier (reference data loaded once)."""
    return GeographicModifier(logger=Mock())


@pytest.fixture
def drying_engine(geography):
    """Drying engine."""
    return SuitabilityEngine(DRYING_CONFIG, geographic_modifier=geography, logger=Mock())


@pytest.fixture
def burning_engine(geography):
    """Burning engine using the seasonal indoor profile."""
    return SuitabilityEngine(BURNING_CONFIG, geographic_modifier=geography, logger=Mock())


@pytest.fixture
def coastal_drying_day(make_series):
    """Three days from 08:00 with four good hours from 11:00 to 14:00 on the first day."""
    return make_series(
        datetime(2024, 6, 15, 8), 72, good_hours=(3, 4, 5, 6),
        good=GOOD_DRYING_HOUR, bad=DULL_DRYING_HOUR,
    )


@pytest.mark.unit
class TestDryingScenarios:
    """Drying evaluations."""

    def test_coastal_window(self, drying_engine, coastal_drying_day, coastal_location):
        """Test four good seafront hours form the only window."""
        result = drying_engine.evaluate(coastal_drying_day, coastal_location)
        recommendation = result.recommendation

        assert isinstance(result, EngineResult)
        assert len(result.results) == 72
        assert recommendation.status in ("MAYBE", "YES")

        best = recommendation.best_window
        assert best is not None, "Expected a drying window"
        assert best.start.hour == 11
        assert best.end.hour == 15
        assert best.duration_hours == 4
        assert recommendation.alternative_windows == ()
        assert recommendation.warnings == ()
        assert recommendation.time_window == "11am-3pm"

    def test_coastal_scores(self, drying_engine, coastal_drying_day, coastal_location):
        """Test the good hours score MAYBE and the dull hours NO."""
        results = drying_engine.evaluate(coastal_drying_day, coastal_location).results

        good = results[3:7]
        dull = results[:3] + results[7:]
        assert [r.timestamp.hour for r in good] == [11, 12, 13, 14]
        assert all(r.score == 60 for r in good), [r.score for r in good]
        assert all(r.status == "MAYBE" for r in good)
        assert all(r.score < 30 for r in dull), [r.score for r in dull]
        assert not any(r.disqualified for r in results)

    def test_status_and_timing(self, drying_engine, coastal_drying_day, coastal_location):
        """Test drying status follows the best window and timing is relative."""
        recommendation = drying_engine.evaluate(coastal_drying_day, coastal_location).recommendation

        assert recommendation.current.status == "NO"
        assert recommendation.status == "MAYBE"
        assert recommendation.timing == "This morning from 11am"
        assert recommendation.reason == (
            "Good conditions from 11:00 to 15:00 (4 hours, average score 60)"
        )
        assert recommendation.summary.startswith("MAYBE (Keep your eye on it): This morning from 11am.")
        assert recommendation.tips == ("Wait until 11:00 for better conditions",)

    def test_suitable_night_is_not_now(self, drying_engine, make_series, coastal_location):
        """Test good drying numbers in the small hours do not say hang out now."""
        observations = make_series(datetime(2024, 6, 15, 1), 3, bad=GOOD_DRYING_HOUR)
        result = drying_engine.evaluate(observations, coastal_location)
        recommendation = result.recommendation

        assert result.results[0].suitable
        assert result.windows == ()
        assert recommendation.timing == "Not recommended in the forecast period"
        assert recommendation.status == "NO"

    def test_geographic_modifiers_recorded(self, drying_engine, coastal_drying_day, coastal_location):
        """Test per-hour results expose the modifiers that were applied."""
        result = drying_engine.evaluate(coastal_drying_day, coastal_location).results[0]
        assert result.modifiers["coastal_distance_km"] == 0.8
        assert result.modifiers["humidity_penalty"] == pytest.approx(1.15)
        assert result.modifiers["pressure"] == pytest.approx(1.00475)
        assert "indoor_temperature" not in result.modifiers

    def test_rain_all_day(self, drying_engine, make_series, inland_location):
        """Test a wet day gives NO with a rain warning and no window."""
        observations = make_series(
            datetime(2024, 6, 15, 9), 6, bad={"precipitation": 1.5, "precipitation_probability": 90.0}
        )
        recommendation = drying_engine.evaluate(observations, inland_location).recommendation

        assert recommendation.status == "NO"
        assert recommendation.best_window is None
        assert recommendation.time_window == "N/A"
        assert recommendation.timing == "Not recommended in the forecast period"
        assert recommendation.warnings == ("RAIN_DETECTED",)
        assert recommendation.dominant_factor.startswith("Rain forecast")

    def test_idempotent(self, drying_engine, coastal_drying_day, coastal_location):
        """Test repeated evaluation gives identical output."""
        first = drying_engine.evaluate(coastal_drying_day, coastal_location)
        second = drying_engine.evaluate(coastal_drying_day, coastal_location)
        assert first == second

    def test_scores_bounded(self, drying_engine, make_series, inland_location):
        """Test every hourly score is an integer in 0-100."""
        observations = make_series(
            datetime(2024, 6, 15, 0), 24, good_hours=tuple(range(8, 18)),
            good={"temperature": 35.0, "humidity": 5.0, "dew_point": -10.0, "wind_speed": 45.0,
                  "vapor_pressure_deficit": 5.3, "shortwave_radiation": 1000.0, "pressure": 1050.0},
            bad={"temperature": -5.0, "humidity": 99.0, "dew_point": -6.0, "wind_speed": 0.0},
        )
        for result in drying_engine.evaluate(observations, inland_location).results:
            assert isinstance(result.score, int)
            assert 0 <= result.score <= 100


@pytest.mark.unit
class TestBurningScenarios:
    """Burning evaluations."""

    def test_cold_evening(self, burning_engine, make_series, inland_location):
        """Test a cold winter evening is excellent now."""
        observations = make_series(datetime(2024, 1, 10, 17), 6, bad=COLD_EVENING_HOUR)
        result = burning_engine.evaluate(observations, inland_location)
        recommendation = result.recommendation

        assert recommendation.status == "EXCELLENT"
        assert recommendation.timing == "Now"
        assert recommendation.current.indoor_temperature == 18.0
        assert recommendation.current.temperature_differential == pytest.approx(16.0)
        assert recommendation.warnings == ()
        assert len(result.windows) == 1

    def test_summer_afternoon_inversion(self, burning_engine, make_series, inland_location):
        """Test outside warmer than inside means AVOID with a backdraft warning."""
        observations = make_series(
            datetime(2024, 7, 15, 13), 3, bad={"temperature": 25.0, "dew_point": 12.0}
        )
        recommendation = burning_engine.evaluate(observations, inland_location).recommendation

        assert recommendation.status == "AVOID"
        assert recommendation.warnings == ("TEMPERATURE_INVERSION",)
        assert "BACKDRAFT" in recommendation.warning_messages[0]
        assert recommendation.best_window is None

    def test_indoor_temperature_override(self, geography, make_series, inland_location):
        """Test a measured indoor temperature replaces the seasonal profile."""
        engine = SuitabilityEngine(
            BURNING_CONFIG, geographic_modifier=geography, indoor_temperature=30.0, logger=Mock()
        )
        observations = make_series(
            datetime(2024, 7, 15, 13), 3, bad={"temperature": 25.0, "dew_point": 12.0}
        )
        result = engine.evaluate(observations, inland_location).results[0]
        assert not result.disqualified
        assert result.modifiers["temperature_differential"] == pytest.approx(5.0)

    def test_cold_morning_hazard(self, burning_engine, make_series, inland_location):
        """Test a small morning differential warns about a cold chimney."""
        observations = make_series(
            datetime(2024, 1, 10, 7), 2, bad={"temperature": 10.0, "dew_point": 5.0}
        )
        recommendation = burning_engine.evaluate(observations, inland_location).recommendation
        assert "COLD_CHIMNEY_MORNING" in recommendation.warnings

    def test_missing_hour_splits_window(self, burning_engine, make_series, inland_location):
        """Test a forecast with a missing hour never reports a window across it."""
        observations = make_series(datetime(2024, 1, 10, 17), 6, bad=COLD_EVENING_HOUR)
        del observations[2]  # no 19:00

        windows = burning_engine.evaluate(observations, inland_location).windows

        assert sorted((w.start.hour, w.end.hour, w.duration_hours) for w in windows) == [
            (17, 19, 2), (20, 23, 3),
        ]


@pytest.mark.unit
class TestEngineValidation:
    """Configuration and input validation."""

    def test_strict_rejects_bad_weights(self, geography):
        """Test strict mode rejects weights that do not sum to 1."""
        weights = dict(DRYING_CONFIG.weights, vapor_pressure_deficit=0.2)
        config = replace(DRYING_CONFIG, weights=weights)
        with pytest.raises(ValueError, match="sum to"):
            SuitabilityEngine(config, geographic_modifier=geography, strict=True, logger=Mock())

    def test_lenient_warns_on_bad_weights(self, geography):
        """Test non-strict mode logs a warning and keeps the configuration."""
        logger = Mock()
        weights = dict(DRYING_CONFIG.weights, vapor_pressure_deficit=0.2)
        engine = SuitabilityEngine(
            replace(DRYING_CONFIG, weights=weights), geographic_modifier=geography, logger=logger
        )
        assert engine.config_errors
        assert logger.warning.called

    def test_shipped_configs_valid(self, geography):
        """Test both domain configurations pass strict validation."""
        for config in (DRYING_CONFIG, BURNING_CONFIG):
            engine = SuitabilityEngine(config, geographic_modifier=geography, strict=True, logger=Mock())
            assert engine.config_errors == ()

    def test_empty_input(self, drying_engine, inland_location):
        """Test an empty forecast is rejected."""
        with pytest.raises(ValueError, match="No observations"):
            drying_engine.evaluate([], inland_location)

    def test_out_of_order_input(self, drying_engine, make_observation, inland_location):
        """Test timestamps must strictly increase."""
        later = make_observation(timestamp=datetime(2024, 6, 15, 13))
        earlier = make_observation(timestamp=datetime(2024, 6, 15, 12))
        with pytest.raises(ValueError, match="out of order"):
            drying_engine.evaluate([later, earlier], inland_location)

    def test_too_many_hours(self, drying_engine, make_series, inland_location):
        """Test more than 72 hours is rejected."""
        observations = make_series(datetime(2024, 6, 15, 0), 73)
        with pytest.raises(ValueError, match="Too many"):
            drying_engine.evaluate(observations, inland_location)

    def test_single_hour(self, drying_engine, make_observation, inland_location):
        """Test one hour is enough for a recommendation."""
        result = drying_engine.evaluate([make_observation()], inland_location)
        assert len(result.results) == 1
        assert result.windows == ()

    def test_overrides_change_windows(self, geography, coastal_drying_day, coastal_location):
        """Test raising the minimum window length removes the 4 hour window."""
        config = get_domain_config("drying", {"thresholds": {"min_window_hours": 5}})
        engine = SuitabilityEngine(config, geographic_modifier=geography, logger=Mock())
        assert engine.evaluate(coastal_drying_day, coastal_location).windows == ()

    def test_shared_config_untouched(self, drying_engine, coastal_drying_day, coastal_location):
        """Test evaluation never mutates the shared domain configuration."""
        weights = dict(DRYING_CONFIG.weights)
        drying_engine.evaluate(coastal_drying_day, coastal_location)
        assert dict(DRYING_CONFIG.weights) == weights
        assert DRYING_CONFIG.thresholds.min_window_hours == 2


def test_series_spans_midnight(burning_engine, make_series, inland_location):
    """Test a window crossing midnight ends on the next day."""
    observations = make_series(datetime(2024, 1, 10, 21), 5, bad=COLD_EVENING_HOUR)
    window = burning_engine.evaluate(observations, inland_location).windows[0]
    assert window.end - window.start == timedelta(hours=5)
    assert window.end.day == 11
