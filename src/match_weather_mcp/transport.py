"""Small httpx helpers shared by the geocoding and weather providers"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import httpx

from match_weather_mcp.config import Config
from match_weather_mcp.exceptions import (
    ProviderAPIError,
    ProviderConnectionError,
    ProviderRequestError,
    ProviderResponseError,
    ProviderTimeoutError,
)

logger = logging.getLogger("match_weather.transport")


@asynccontextmanager
async def client_session(
    client: Optional[httpx.AsyncClient], settings: Config
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the caller's client, or a request-scoped one closed on exit"""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=settings.http_timeout) as own_client:
        yield own_client


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Any:
    """Perform a GET request and return the decoded JSON body"""
    try:
        response = await client.get(url, params=params, headers=headers)
    except httpx.TimeoutException as exc:
        raise ProviderTimeoutError(str(exc)) from exc
    except httpx.HTTPError as exc:
        raise ProviderConnectionError(str(exc)) from exc
    except (httpx.InvalidURL, UnicodeEncodeError) as exc:
        raise ProviderRequestError(f"Cannot build request for {url}: {exc}") from exc

    if response.status_code >= 400:
        raise ProviderAPIError(status_code=response.status_code, message=response.text)

    try:
        return response.json()
    except ValueError as exc:
        logger.debug(f"Non-JSON body from {url}: {response.text[:200]}")
        raise ProviderResponseError(f"Invalid JSON from {url}") from exc
