"""Horizon classification and hourly index resolution for Open-Meteo series.

The archive endpoint answers with exactly one day, indexed 0-23 by hour. The
forecast endpoint answers with several days concatenated, and its first day
does not necessarily start at local hour 0, so the row for a requested hour
has to be searched for.
"""

import logging
from datetime import date
from enum import Enum
from typing import Callable, Dict, Optional, Sequence

logger = logging.getLogger("match_weather.timeseries")

# Open-Meteo forecast endpoint cannot look further ahead than this
FORECAST_HORIZON_DAYS = 16

# First day covered by the archive endpoint's reanalysis data
ARCHIVE_EARLIEST_DATE = date(1940, 1, 1)


class Horizon(str, Enum):
    HISTORICAL = "historical"
    FORECAST = "forecast"
    OUT_OF_RANGE = "out_of_range"


def classify_horizon(target: date, today: date) -> Horizon:
    """Decide which provider endpoint can answer for the target date"""
    days_diff = (target - today).days
    if days_diff < 0:
        if target < ARCHIVE_EARLIEST_DATE:
            return Horizon.OUT_OF_RANGE
        return Horizon.HISTORICAL
    if days_diff <= FORECAST_HORIZON_DAYS:
        return Horizon.FORECAST
    return Horizon.OUT_OF_RANGE


def hour_timestamp(target: date, hour: int) -> str:
    """Timestamp string as Open-Meteo formats hourly times, e.g. 2024-06-01T03:00"""
    return f"{target.isoformat()}T{hour:02d}:00"


def _archive_index(times: Sequence[str], target: date, hour: int) -> Optional[int]:
    return hour


def _forecast_index(times: Sequence[str], target: date, hour: int) -> Optional[int]:
    exact = hour_timestamp(target, hour)
    for index, timestamp in enumerate(times):
        if timestamp == exact:
            return index

    day_prefix = target.isoformat()
    for index, timestamp in enumerate(times):
        if timestamp.startswith(day_prefix):
            logger.debug(f"No exact match for {exact}, offsetting from first {day_prefix} entry at {index}")
            return min(index + hour, len(times) - 1)

    return None


_INDEX_STRATEGIES: Dict[Horizon, Callable[[Sequence[str], date, int], Optional[int]]] = {
    Horizon.HISTORICAL: _archive_index,
    Horizon.FORECAST: _forecast_index,
}


def resolve_index(times: Sequence[str], target: date, hour: int, horizon: Horizon) -> Optional[int]:
    """Find the row of the hourly series holding the requested hour

    Returns None when the horizon has no strategy, the date is absent from the
    series, or the resolved index falls outside the series.
    """
    strategy = _INDEX_STRATEGIES.get(horizon)
    if strategy is None:
        return None

    index = strategy(times, target, hour)
    if index is None or index < 0 or index >= len(times):
        logger.info(f"Could not resolve {hour_timestamp(target, hour)} in a series of {len(times)} entries")
        return None
    return index
