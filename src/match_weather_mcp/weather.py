import logging
import math
from datetime import date, datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

import httpx
from pydantic import ValidationError

from match_weather_mcp.config import Config, config
from match_weather_mcp.exceptions import EnrichmentError
from match_weather_mcp.location import resolve_coordinates
from match_weather_mcp.models import (
    Coordinates,
    HourlySeries,
    NoMatch,
    ProviderError,
    ProviderOutcome,
    Success,
    VenueWeather,
    WeatherQuery,
    WeatherSnapshot,
)
from match_weather_mcp.timeseries import FORECAST_HORIZON_DAYS, Horizon, classify_horizon, resolve_index
from match_weather_mcp.transport import client_session, get_json
from match_weather_mcp.weather_codes import describe_weather_code

logger = logging.getLogger("match_weather.weather")

ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

HOURLY_FIELDS = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "snowfall",
    "weather_code",
    "wind_speed_10m",
]

DEFAULT_HOUR = 12


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (17.5 -> 18, -2.5 -> -2)"""
    return math.floor(value + 0.5)


def parse_hour(time: Optional[str]) -> int:
    """Hour of a 'HH:MM' kick-off time, noon when no time is given"""
    if not time or not time.strip():
        return DEFAULT_HOUR
    return int(time.strip().split(":")[0])


def today_in(timezone: str) -> date:
    return datetime.now(ZoneInfo(timezone)).date()


async def _fetch_hourly(
    client: httpx.AsyncClient, query: WeatherQuery, horizon: Horizon, settings: Config
) -> ProviderOutcome:
    """Request the hourly series from the endpoint matching the horizon"""
    params = {
        "latitude": query.latitude,
        "longitude": query.longitude,
        "hourly": ",".join(HOURLY_FIELDS),
        "timezone": settings.timezone,
    }
    if horizon == Horizon.HISTORICAL:
        provider, url = "open-meteo-archive", ARCHIVE_URL
        params["start_date"] = query.date.isoformat()
        params["end_date"] = query.date.isoformat()
    else:
        provider, url = "open-meteo-forecast", FORECAST_URL
        params["forecast_days"] = FORECAST_HORIZON_DAYS

    try:
        data = await get_json(client, url, params=params)
    except EnrichmentError as e:
        return ProviderError(provider=provider, reason=str(e))

    hourly = data.get("hourly") if isinstance(data, dict) else None
    if not isinstance(hourly, dict) or "time" not in hourly:
        return NoMatch(provider=provider)

    try:
        series = HourlySeries.model_validate(hourly)
    except ValidationError as e:
        return ProviderError(provider=provider, reason=f"Malformed hourly data: {e}")
    return Success(provider=provider, payload=series)


def build_snapshot(series: HourlySeries, index: int) -> WeatherSnapshot:
    """Read one hour out of the series, 0 for anything the provider omitted"""
    weather_code = int(series.value_at("weather_code", index))
    condition = describe_weather_code(weather_code)
    return WeatherSnapshot(
        temperature_c=round_half_up(series.value_at("temperature_2m", index)),
        weather_code=weather_code,
        precipitation_mm=series.value_at("precipitation", index),
        snowfall_cm=series.value_at("snowfall", index),
        wind_speed_kmh=round_half_up(series.value_at("wind_speed_10m", index)),
        humidity_pct=series.value_at("relative_humidity_2m", index),
        description=condition.description,
        icon=condition.icon,
    )


async def resolve_weather(
    coords: Coordinates,
    target_date: Union[date, str],
    hour: int = DEFAULT_HOUR,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Config] = None,
    today: Optional[date] = None,
) -> Optional[WeatherSnapshot]:
    """Get the weather at a location for one hour of one day

    Past dates are read from the archive endpoint, dates up to 16 days ahead
    from the forecast endpoint. Returns None for anything further ahead, for
    invalid input and whenever the provider has no usable data.
    """
    settings = settings or config

    try:
        query = WeatherQuery(
            latitude=coords.latitude, longitude=coords.longitude, date=target_date, hour=hour
        )
    except ValidationError as e:
        logger.warning(f"Invalid weather query for {target_date} {hour}h: {e}")
        return None

    horizon = classify_horizon(query.date, today or today_in(settings.timezone))
    if horizon == Horizon.OUT_OF_RANGE:
        logger.info(f"{query.date} is outside the supported weather range, skipping lookup")
        return None

    async with client_session(client, settings) as session:
        outcome = await _fetch_hourly(session, query, horizon, settings)

    if isinstance(outcome, ProviderError):
        logger.error(f"Error getting weather from {outcome.provider}: {outcome.reason}")
        return None
    if isinstance(outcome, NoMatch):
        logger.info(f"{outcome.provider} returned no hourly data for {query.date}")
        return None

    series = outcome.payload
    index = resolve_index(series.time, query.date, query.hour, horizon)
    if index is None:
        return None

    snapshot = build_snapshot(series, index)
    logger.info(f"Weather for {query.date} {query.hour:02d}:00 at {coords}: {snapshot.description}")
    return snapshot


class WeatherService:
    """Service combining venue geocoding and match-day weather lookups"""

    def __init__(self, settings: Optional[Config] = None, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or config
        self.client = client

    async def get_coordinates(self, address: str) -> Optional[Coordinates]:
        return await resolve_coordinates(address, client=self.client, settings=self.settings)

    async def get_weather(
        self, coords: Coordinates, target_date: Union[date, str], time: Optional[str] = None
    ) -> Optional[WeatherSnapshot]:
        """Weather for a match date and 'HH:MM' kick-off time"""
        try:
            hour = parse_hour(time)
        except ValueError:
            logger.warning(f"Ignoring weather lookup for unparseable time '{time}'")
            return None
        return await resolve_weather(coords, target_date, hour, client=self.client, settings=self.settings)

    async def get_weather_for_venue(
        self, address: str, target_date: Union[date, str], time: Optional[str] = None
    ) -> Optional[VenueWeather]:
        """Geocode a venue address, then look up the weather there"""
        logger.info(f"=== Weather lookup for venue '{address}' on {target_date} {time or ''} ===")

        coords = await self.get_coordinates(address)
        if coords is None:
            logger.info(f"No coordinates for '{address}', weather unavailable")
            return None

        weather = await self.get_weather(coords, target_date, time)
        if weather is None:
            return None
        return VenueWeather(address=address, coordinates=coords, weather=weather)
