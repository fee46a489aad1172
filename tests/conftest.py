"""Shared test fixtures and sample provider responses."""

from __future__ import annotations

from typing import Any

import pytest

from match_weather_mcp.config import Config

SEOUL_ADDRESS = "서울특별시 강남구 테헤란로 152"

KAKAO_ADDRESS_MATCH = {
    "documents": [
        {
            "address_name": SEOUL_ADDRESS,
            "x": "127.036",
            "y": "37.501",
        }
    ],
    "meta": {"total_count": 1},
}

KAKAO_KEYWORD_MATCH = {
    "documents": [
        {
            "place_name": "탄천 풋살장",
            "x": "127.071",
            "y": "37.497",
        }
    ],
    "meta": {"total_count": 1},
}

KAKAO_EMPTY = {"documents": [], "meta": {"total_count": 0}}

NOMINATIM_MATCH = [
    {
        "display_name": "Teheran-ro, Gangnam-gu, Seoul, South Korea",
        "lat": "37.5006",
        "lon": "127.0366",
    }
]


def hours_of(day: str, start: int = 0, count: int = 24) -> list[str]:
    return [f"{day}T{hour:02d}:00" for hour in range(start, start + count)]


def make_hourly_response(times: list[str], **fields: list[Any]) -> dict[str, Any]:
    """Open-Meteo style body; unspecified hourly fields are filled with zeros"""
    hourly: dict[str, Any] = {
        "time": times,
        "temperature_2m": [0.0] * len(times),
        "relative_humidity_2m": [0.0] * len(times),
        "precipitation": [0.0] * len(times),
        "snowfall": [0.0] * len(times),
        "weather_code": [0] * len(times),
        "wind_speed_10m": [0.0] * len(times),
    }
    hourly.update(fields)
    return {
        "latitude": 37.5,
        "longitude": 127.0,
        "timezone": "Asia/Seoul",
        "hourly": hourly,
    }


def with_value_at(index: int, value: Any, length: int = 24, fill: Any = 0.0) -> list[Any]:
    values = [fill] * length
    values[index] = value
    return values


@pytest.fixture
def kakao_settings() -> Config:
    return Config(_env_file=None, kakao_rest_api_key="test-key")


@pytest.fixture
def settings() -> Config:
    return Config(_env_file=None, kakao_rest_api_key=None)
