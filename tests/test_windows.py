"""
Tests for window detection and ranking.
"""

from dataclasses import replace
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest  # type: ignore
import pytz  # type: ignore

from src.weather_suitability.core.date_utils import DateUtils
from src.weather_suitability.domains import (
    BURNING_CONFIG,
    DRYING_CONFIG,
    describe_drying_window,
    lifestyle_bonus,
    practical_hours_mask,
)
from src.weather_suitability.models import ScoringResult
from src.weather_suitability.processing import WindowDetector


@pytest.fixture
def make_results(make_observation):
    """Factory for scored hours from a list of scores (None = disqualified)."""
    def _make(start, scores, config=BURNING_CONFIG):
        results = []
        for offset, score in enumerate(scores):
            timestamp = DateUtils.to_local(start + timedelta(hours=offset), "Europe/London")
            value = score or 0
            results.append(ScoringResult(
                timestamp=timestamp,
                score=value,
                component_scores={},
                modifiers={},
                disqualified=score is None,
                reasons=(),
                status=config.thresholds.classify(value),
                suitable=config.thresholds.is_suitable(value),
                observation=make_observation(timestamp=timestamp),
            ))
        return results
    return _make


@pytest.mark.unit
class TestWindowDetector:
    """Run detection, statistics and ranking."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = WindowDetector(logger=Mock())

    def test_single_run(self, make_results, inland_location):
        """Test three consecutive suitable hours make one 3 hour window."""
        results = make_results(datetime(2024, 1, 10, 17), [40, 70, 80, 90, 40])
        windows = self.detector.detect(results, BURNING_CONFIG, inland_location)

        assert len(windows) == 1
        window = windows[0]
        assert window.duration_hours == 3
        assert window.start.hour == 18
        assert window.end.hour == 21, "Window should end at the end of its last hour"
        assert window.average_score == 80
        assert window.peak_score == 90
        assert window.peak_time.hour == 20
        assert window.quality == "excellent"
        assert window.label == "6pm-9pm"

    def test_gap_splits_windows(self, make_results, inland_location):
        """Test one unsuitable hour splits a run in two."""
        results = make_results(datetime(2024, 1, 10, 17), [70, 70, 20, 70, 70])
        windows = self.detector.detect(results, BURNING_CONFIG, inland_location)
        assert len(windows) == 2
        assert all(window.duration_hours == 2 for window in windows)

    def test_disqualified_hour_splits_windows(self, make_results, inland_location):
        """Test a disqualified hour never merges neighbouring runs."""
        results = make_results(datetime(2024, 1, 10, 17), [70, 70, None, 70, 70])
        assert len(self.detector.detect(results, BURNING_CONFIG, inland_location)) == 2

    def test_minimum_duration(self, make_results, inland_location):
        """Test runs shorter than the minimum are dropped."""
        results = make_results(datetime(2024, 1, 10, 17), [70, 20, 70, 70])
        windows = self.detector.detect(results, BURNING_CONFIG, inland_location)
        assert len(windows) == 1
        assert windows[0].start.hour == 19

    def test_run_at_end_of_series(self, make_results, inland_location):
        """Test a run that reaches the last hour is kept."""
        results = make_results(datetime(2024, 1, 10, 17), [20, 70, 70])
        assert len(self.detector.detect(results, BURNING_CONFIG, inland_location)) == 1

    def test_evening_outranks_overnight(self, make_results, inland_location):
        """Test the lifestyle bonus ranks an evening fire above an overnight one."""
        scores = [70, 70, 70, 20, 20, 20, 20, 70, 70, 70, 20]
        results = make_results(datetime(2024, 1, 10, 17), scores)
        windows = self.detector.detect(results, BURNING_CONFIG, inland_location)

        assert len(windows) == 2
        assert windows[0].average_score == windows[1].average_score
        assert windows[0].start.hour == 17
        assert windows[1].start.hour == 0
        assert windows[0].ranking_score == pytest.approx(85.0)
        assert windows[1].ranking_score == pytest.approx(50.0)

    def test_practical_hours_mask(self, make_results, inland_location):
        """Test the practical hours mask drops overnight windows."""
        config = replace(BURNING_CONFIG, window_mask=practical_hours_mask)
        scores = [70, 70, 70, 20, 20, 20, 20, 70, 70, 70, 20]
        results = make_results(datetime(2024, 1, 10, 17), scores)
        windows = self.detector.detect(results, config, inland_location)
        assert [window.start.hour for window in windows] == [17]

    def test_daylight_mask_for_drying(self, make_results, inland_location):
        """Test night hours never form a drying window."""
        results = make_results(datetime(2024, 6, 15, 0), [75] * 4, config=DRYING_CONFIG)
        assert self.detector.detect(results, DRYING_CONFIG, inland_location) == []

    def test_mask_ignored_without_temporal_weighting(self, make_results, inland_location):
        """Test disabling temporal weighting lifts the daylight mask."""
        config = replace(DRYING_CONFIG, features=replace(DRYING_CONFIG.features, temporal_weighting=False))
        results = make_results(datetime(2024, 6, 15, 0), [75] * 4, config=config)
        windows = self.detector.detect(results, config, inland_location)
        assert len(windows) == 1
        assert windows[0].description == "very good"

    def test_no_windows(self, make_results, inland_location):
        """Test an all-unsuitable series has no windows."""
        results = make_results(datetime(2024, 1, 10, 17), [10, 20, 30])
        assert self.detector.detect(results, BURNING_CONFIG, inland_location) == []

    def test_missing_hour_splits_windows(self, make_results, inland_location):
        """Test suitable hours either side of a missing hour form separate windows."""
        results = make_results(datetime(2024, 1, 10, 17), [70, 70, 70, 70, 70])
        del results[2]  # no 19:00

        windows = self.detector.detect(results, BURNING_CONFIG, inland_location)

        assert sorted((w.start.hour, w.end.hour) for w in windows) == [(17, 19), (20, 22)]
        for window in windows:
            assert window.end - window.start == timedelta(hours=window.duration_hours), (
                "Window span must equal its duration"
            )

    def test_missing_hour_drops_short_fragments(self, make_results, inland_location):
        """Test fragments left by a missing hour still need the minimum length."""
        results = make_results(datetime(2024, 1, 10, 17), [70, 70, 70])
        del results[1]
        assert self.detector.detect(results, BURNING_CONFIG, inland_location) == []

    def test_window_end_across_clock_change(self, make_results, inland_location):
        """Test a window ending after the autumn clock change uses the winter offset."""
        # 00:00 and 01:00 BST on 27 October 2024; clocks go back at 02:00 BST
        start = pytz.utc.localize(datetime(2024, 10, 26, 23))
        results = make_results(start, [70, 70])

        window = self.detector.detect(results, BURNING_CONFIG, inland_location)[0]

        assert window.end - window.start == timedelta(hours=2)
        assert window.end.utcoffset() == timedelta(0)
        assert window.end.hour == 1


@pytest.mark.unit
class TestLifestyleBonus:
    """Burning window ranking adjustment."""

    @pytest.mark.parametrize("start,end,expected", [
        (7, 10, 10.0),    # morning
        (6, 11, 10.0),
        (18, 22, 15.0),   # evening
        (17, 23, 15.0),
        (7, 20, 5.0),     # spans both
        (4, 8, 3.0),      # partial overlap
        (10, 13, 3.0),
        (1, 4, -20.0),    # overnight
        (12, 15, -20.0),
    ])
    def test_bonus(self, start, end, expected):
        """Test each bonus band."""
        assert lifestyle_bonus(start, end) == expected


@pytest.mark.unit
class TestDryingWindowDescription:
    """Drying window descriptions by average score."""

    @pytest.mark.parametrize("average,description", [
        (85, "excellent"),
        (80, "excellent"),
        (72, "very good"),
        (64, "good"),
        (57, "decent"),
        (51, "acceptable"),
    ])
    def test_description(self, average, description):
        """Test the description bands."""
        assert describe_drying_window(average) == description
