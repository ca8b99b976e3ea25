"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.weather_suitability.core.date_utils import DateUtils  # noqa: E402
from src.weather_suitability.models import (  # noqa: E402
    CoastalModifiers,
    GeographicProfile,
    HourlyObservation,
    Location,
    ScoringContext,
)


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def forecast_payload(fixtures_dir):
    """Load a sample Open-Meteo hourly payload from fixtures."""
    data_file = fixtures_dir / "open_meteo_hourly.json"
    with open(data_file) as f:
        return json.load(f)


@pytest.fixture
def make_observation():
    """Factory for observations with mild, dry defaults."""
    def _make(timestamp=None, **overrides):
        values = {
            "timestamp": timestamp or datetime(2024, 6, 15, 12, 0),
            "temperature": 20.0,
            "humidity": 45.0,
            "wind_speed": 12.0,
            "dew_point": 7.7,
            "precipitation": 0.0,
            "precipitation_probability": 5.0,
            "pressure": 1018.0,
        }
        values.update(overrides)
        return HourlyObservation(**values)
    return _make


@pytest.fixture
def make_series(make_observation):
    """Factory for an hourly series starting at a given local time."""
    def _make(start, hours, good_hours=(), good=None, bad=None):
        good = good or {}
        bad = bad or {}
        series = []
        for offset in range(hours):
            timestamp = start + timedelta(hours=offset)
            fields = good if offset in good_hours else bad
            series.append(make_observation(timestamp=timestamp, **fields))
        return series
    return _make


@pytest.fixture
def inland_location():
    """Birmingham: strongly inland reference place."""
    return Location(latitude=52.4862, longitude=-1.8904, name="Birmingham")


@pytest.fixture
def coastal_location():
    """A seafront location with a precomputed coastal distance."""
    return Location(latitude=50.8225, longitude=-0.1372, name="Seaview", coastal_distance_km=0.8)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )


@pytest.fixture
def neutral_profile():
    """Geographic profile with every modifier at 1.0."""
    return GeographicProfile(
        coastal_distance_km=110.0,
        coastal_tier="STRONGLY_INLAND",
        coastal_influence=0.0,
        modifiers=CoastalModifiers(
            humidity_penalty=1.0,
            offshore_bonus=1.0,
            onshore_penalty=1.0,
            temperature_moderation=1.0,
        ),
        bearing_to_coast=180.0,
        urban_shelter_factor=1.0,
        topographic_factor=1.0,
        distance_source="provided",
    )


@pytest.fixture
def make_context(inland_location, neutral_profile):
    """Factory for scoring contexts over the neutral profile."""
    def _make(local_time=None, season="summer", **overrides):
        local_time = DateUtils.to_local(local_time or datetime(2024, 6, 15, 12, 0), "Europe/London")
        values = {
            "location": inland_location,
            "profile": neutral_profile,
            "local_time": local_time,
            "season": season,
        }
        values.update(overrides)
        return ScoringContext(**values)
    return _make
