from typing import Dict

from match_weather_mcp.models import WeatherCondition, WeatherIcon

# WMO weather interpretation codes as reported by Open-Meteo
WEATHER_CODES: Dict[int, WeatherCondition] = {
    0: WeatherCondition(description="맑음", icon=WeatherIcon.SUN),
    1: WeatherCondition(description="대체로 맑음", icon=WeatherIcon.SUN),
    2: WeatherCondition(description="부분 흐림", icon=WeatherIcon.CLOUD_SUN),
    3: WeatherCondition(description="흐림", icon=WeatherIcon.CLOUD),
    45: WeatherCondition(description="안개", icon=WeatherIcon.CLOUD_FOG),
    48: WeatherCondition(description="짙은 안개", icon=WeatherIcon.CLOUD_FOG),
    51: WeatherCondition(description="가벼운 이슬비", icon=WeatherIcon.CLOUD_DRIZZLE),
    53: WeatherCondition(description="이슬비", icon=WeatherIcon.CLOUD_DRIZZLE),
    55: WeatherCondition(description="짙은 이슬비", icon=WeatherIcon.CLOUD_DRIZZLE),
    61: WeatherCondition(description="가벼운 비", icon=WeatherIcon.CLOUD_RAIN),
    63: WeatherCondition(description="비", icon=WeatherIcon.CLOUD_RAIN),
    65: WeatherCondition(description="강한 비", icon=WeatherIcon.CLOUD_RAIN),
    66: WeatherCondition(description="가벼운 빙결성 비", icon=WeatherIcon.CLOUD_RAIN),
    67: WeatherCondition(description="빙결성 비", icon=WeatherIcon.CLOUD_RAIN),
    71: WeatherCondition(description="가벼운 눈", icon=WeatherIcon.CLOUD_SNOW),
    73: WeatherCondition(description="눈", icon=WeatherIcon.CLOUD_SNOW),
    75: WeatherCondition(description="강한 눈", icon=WeatherIcon.CLOUD_SNOW),
    77: WeatherCondition(description="눈 알갱이", icon=WeatherIcon.CLOUD_SNOW),
    80: WeatherCondition(description="소나기", icon=WeatherIcon.CLOUD_RAIN),
    81: WeatherCondition(description="소나기", icon=WeatherIcon.CLOUD_RAIN),
    82: WeatherCondition(description="강한 소나기", icon=WeatherIcon.CLOUD_RAIN),
    85: WeatherCondition(description="눈 소나기", icon=WeatherIcon.CLOUD_SNOW),
    86: WeatherCondition(description="강한 눈 소나기", icon=WeatherIcon.CLOUD_SNOW),
    95: WeatherCondition(description="뇌우", icon=WeatherIcon.CLOUD_LIGHTNING),
    96: WeatherCondition(description="뇌우와 우박", icon=WeatherIcon.CLOUD_LIGHTNING),
    99: WeatherCondition(description="강한 뇌우와 우박", icon=WeatherIcon.CLOUD_LIGHTNING),
}

UNKNOWN_CONDITION = WeatherCondition(description="알 수 없음", icon=WeatherIcon.CLOUD)


def describe_weather_code(code: int) -> WeatherCondition:
    """Look up description and icon for a weather code, never fails"""
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)
