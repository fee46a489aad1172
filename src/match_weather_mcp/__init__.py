"""Match Weather MCP Server package."""

__version__ = "0.1.0"

from match_weather_mcp.location import resolve_coordinates
from match_weather_mcp.models import Coordinates, WeatherSnapshot
from match_weather_mcp.weather import WeatherService, resolve_weather

__all__ = [
    "Coordinates",
    "WeatherService",
    "WeatherSnapshot",
    "resolve_coordinates",
    "resolve_weather",
]
