"""Tests for weather, tide and search models."""

import dataclasses

import pytest

from beachcast.models.common import to_float
from beachcast.models.search import SearchResult
from beachcast.models.weather import TideEvent, TideReading, TideState, TideType


class TestTideModels:
    def test_event_accepts_high_and_low(self):
        assert TideEvent(TideType.HIGH, 2.1, "06:00").type == "high"
        assert TideEvent(TideType.LOW, 0.3, "12:00").type == "low"

    def test_event_rejects_trend(self):
        with pytest.raises(ValueError):
            TideEvent(TideType.RISING, 1.0, "06:00")

    def test_unknown_state(self):
        state = TideState(TideReading(None, TideType.LOW, ""))
        assert state.is_unknown
        assert state.upcoming == ()

    def test_frozen(self):
        reading = TideReading(1.0, TideType.RISING, "10:00")
        with pytest.raises(dataclasses.FrozenInstanceError):
            reading.height = 2.0


class TestToFloat:
    def test_zero_is_a_reading(self):
        assert to_float(0) == 0.0

    @pytest.mark.parametrize("raw", [None, "abc", True, [], {}])
    def test_invalid_is_unknown(self, raw):
        assert to_float(raw) is None

    def test_numeric_string(self):
        assert to_float("17.5") == 17.5


class TestSearchResult:
    def test_to_draft(self):
        r = SearchResult(
            name="Tarifa",
            display_name="Tarifa",
            latitude=36.013,
            longitude=-5.606,
            country="Spain",
            state="Andalusia",
        )
        draft = r.to_draft(is_favorite=True, webcam_url="  ")
        assert draft.name == "Tarifa"
        assert draft.state == "Andalusia"
        assert draft.is_favorite is True
        assert draft.webcam_url is None
