"""Tests for horizon classification and hourly index resolution."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from match_weather_mcp.timeseries import (
    FORECAST_HORIZON_DAYS,
    Horizon,
    classify_horizon,
    hour_timestamp,
    resolve_index,
)
from tests.conftest import hours_of

TODAY = date(2024, 6, 1)


class TestClassifyHorizon:
    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (-365, Horizon.HISTORICAL),
            (-1, Horizon.HISTORICAL),
            (0, Horizon.FORECAST),
            (1, Horizon.FORECAST),
            (16, Horizon.FORECAST),
            (17, Horizon.OUT_OF_RANGE),
            (60, Horizon.OUT_OF_RANGE),
        ],
    )
    def test_boundaries(self, offset, expected) -> None:
        assert classify_horizon(TODAY + timedelta(days=offset), TODAY) == expected

    def test_horizon_constant(self) -> None:
        assert FORECAST_HORIZON_DAYS == 16

    def test_before_archive_start_is_out_of_range(self) -> None:
        assert classify_horizon(date(1939, 12, 31), TODAY) == Horizon.OUT_OF_RANGE
        assert classify_horizon(date(1940, 1, 1), TODAY) == Horizon.HISTORICAL


class TestHistoricalIndex:
    def test_hour_is_the_index(self) -> None:
        times = hours_of("2024-01-05")
        assert resolve_index(times, date(2024, 1, 5), 14, Horizon.HISTORICAL) == 14

    def test_hour_past_series_end(self) -> None:
        times = hours_of("2024-01-05", count=10)
        assert resolve_index(times, date(2024, 1, 5), 14, Horizon.HISTORICAL) is None


class TestForecastIndex:
    def test_exact_match(self) -> None:
        times = hours_of("2024-06-01") + hours_of("2024-06-02")
        assert resolve_index(times, date(2024, 6, 2), 9, Horizon.FORECAST) == 33

    def test_offset_from_first_entry_of_the_day(self) -> None:
        times = hours_of("2024-06-01", start=6, count=18) + hours_of("2024-06-02")
        assert times[0] == "2024-06-01T06:00"

        assert resolve_index(times, date(2024, 6, 1), 3, Horizon.FORECAST) == 3

    def test_offset_is_clamped_to_series_end(self) -> None:
        times = ["2024-06-01T22:00", "2024-06-01T23:00"]
        assert resolve_index(times, date(2024, 6, 1), 5, Horizon.FORECAST) == 1

    def test_date_missing_from_series(self) -> None:
        times = hours_of("2024-06-01")
        assert resolve_index(times, date(2024, 6, 5), 12, Horizon.FORECAST) is None

    def test_empty_series(self) -> None:
        assert resolve_index([], date(2024, 6, 1), 12, Horizon.FORECAST) is None


def test_out_of_range_never_resolves() -> None:
    assert resolve_index(hours_of("2024-06-30"), date(2024, 6, 30), 12, Horizon.OUT_OF_RANGE) is None


def test_hour_timestamp_is_zero_padded() -> None:
    assert hour_timestamp(date(2024, 6, 1), 3) == "2024-06-01T03:00"
