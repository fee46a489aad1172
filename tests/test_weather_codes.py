"""Tests for the weather code table."""

from __future__ import annotations

import pytest

from match_weather_mcp.models import WeatherIcon
from match_weather_mcp.weather_codes import UNKNOWN_CONDITION, WEATHER_CODES, describe_weather_code


@pytest.mark.parametrize(
    ("code", "description", "icon"),
    [
        (0, "맑음", WeatherIcon.SUN),
        (2, "부분 흐림", WeatherIcon.CLOUD_SUN),
        (45, "안개", WeatherIcon.CLOUD_FOG),
        (53, "이슬비", WeatherIcon.CLOUD_DRIZZLE),
        (63, "비", WeatherIcon.CLOUD_RAIN),
        (75, "강한 눈", WeatherIcon.CLOUD_SNOW),
        (99, "강한 뇌우와 우박", WeatherIcon.CLOUD_LIGHTNING),
    ],
)
def test_known_codes(code, description, icon) -> None:
    condition = describe_weather_code(code)
    assert condition.description == description
    assert condition.icon == icon


@pytest.mark.parametrize("code", [9999, -1, 4, 100])
def test_unknown_codes_use_default(code) -> None:
    condition = describe_weather_code(code)
    assert condition == UNKNOWN_CONDITION
    assert condition.description == "알 수 없음"
    assert condition.icon == WeatherIcon.CLOUD


def test_every_icon_is_in_the_enumeration() -> None:
    icons = {condition.icon for condition in WEATHER_CODES.values()}
    assert icons <= set(WeatherIcon)
    assert len(WEATHER_CODES) == 26
