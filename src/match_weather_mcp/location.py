import logging
from enum import Enum
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from match_weather_mcp.config import Config, config
from match_weather_mcp.exceptions import EnrichmentError
from match_weather_mcp.models import Coordinates, NoMatch, ProviderError, ProviderOutcome, Success
from match_weather_mcp.transport import client_session, get_json

logger = logging.getLogger("match_weather.location")

KAKAO_BASE_URL = "https://dapi.kakao.com/v2/local/search"
NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class GeocodingProvider(str, Enum):
    """Geocoders in the order they are tried"""

    KAKAO = "kakao"  # most accurate for Korean addresses, needs an API key
    NOMINATIM = "nominatim"  # OpenStreetMap, free, no key


def _parse_coordinates(latitude: Any, longitude: Any) -> Coordinates:
    try:
        return Coordinates(latitude=float(latitude), longitude=float(longitude))
    except (TypeError, ValueError, ValidationError) as e:
        raise EnrichmentError(f"Invalid coordinates ({latitude}, {longitude})") from e


def _first_entry(entries: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(entries, list):
        raise EnrichmentError(f"Expected a list of matches, got {type(entries).__name__}")
    if not entries:
        return None
    if not isinstance(entries[0], dict):
        raise EnrichmentError("Malformed match entry")
    return entries[0]


async def _kakao_search(client: httpx.AsyncClient, kind: str, address: str, api_key: str) -> Optional[Coordinates]:
    """Run one Kakao local search ('address' or 'keyword')"""
    data = await get_json(
        client,
        f"{KAKAO_BASE_URL}/{kind}.json",
        params={"query": address},
        headers={"Authorization": f"KakaoAK {api_key}"},
    )
    if not isinstance(data, dict):
        raise EnrichmentError("Kakao response is not an object")

    entry = _first_entry(data.get("documents") or [])
    if entry is None:
        return None
    return _parse_coordinates(entry.get("y"), entry.get("x"))


async def _try_kakao(client: httpx.AsyncClient, address: str, settings: Config) -> ProviderOutcome:
    provider = GeocodingProvider.KAKAO.value
    api_key = settings.kakao_rest_api_key
    try:
        coords = await _kakao_search(client, "address", address, api_key)
        if coords is None:
            logger.debug(f"Kakao address search found nothing for '{address}', trying keyword search")
            coords = await _kakao_search(client, "keyword", address, api_key)
    except EnrichmentError as e:
        return ProviderError(provider=provider, reason=str(e))

    if coords is None:
        return NoMatch(provider=provider)
    return Success(provider=provider, payload=coords)


async def _try_nominatim(client: httpx.AsyncClient, address: str, settings: Config) -> ProviderOutcome:
    provider = GeocodingProvider.NOMINATIM.value
    try:
        results = await get_json(
            client,
            NOMINATIM_URL,
            params={"format": "json", "q": address, "limit": 1},
            headers={"User-Agent": settings.user_agent},
        )
        place = _first_entry(results)
        if place is None:
            return NoMatch(provider=provider)
        coords = _parse_coordinates(place.get("lat"), place.get("lon"))
    except EnrichmentError as e:
        return ProviderError(provider=provider, reason=str(e))

    return Success(provider=provider, payload=coords)


_ATTEMPTS = {
    GeocodingProvider.KAKAO: _try_kakao,
    GeocodingProvider.NOMINATIM: _try_nominatim,
}


def provider_chain(settings: Config) -> List[GeocodingProvider]:
    """Providers available with the given settings, highest priority first"""
    chain = []
    if settings.kakao_rest_api_key:
        chain.append(GeocodingProvider.KAKAO)
    else:
        logger.debug("KAKAO_REST_API_KEY is not set, skipping Kakao geocoding")
    chain.append(GeocodingProvider.NOMINATIM)
    return chain


async def resolve_coordinates(
    address: str,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Config] = None,
) -> Optional[Coordinates]:
    """Get coordinates for an address, trying each geocoder in turn

    Returns None when the address is blank or no provider finds it; provider
    failures are logged and never raised.
    """
    if not address or not address.strip():
        return None

    settings = settings or config
    async with client_session(client, settings) as session:
        for provider in provider_chain(settings):
            outcome = await _ATTEMPTS[provider](session, address, settings)

            if isinstance(outcome, Success):
                logger.info(f"Geocoded '{address}' with {outcome.provider}: {outcome.payload}")
                return outcome.payload
            if isinstance(outcome, ProviderError):
                logger.error(f"Error geocoding '{address}' with {outcome.provider}: {outcome.reason}")
            else:
                logger.info(f"No {outcome.provider} match for '{address}'")

    return None


geocode_address = resolve_coordinates
