import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from match_weather_mcp.config import config
from match_weather_mcp.models import Coordinates
from match_weather_mcp.weather import WeatherService

logger = logging.getLogger("match_weather")


def configure_logging(log_dir: Path = Path("logs")) -> None:
    """Log to logs/match_weather.log and to the console"""
    log_dir.mkdir(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_dir / "match_weather.log"),
            logging.StreamHandler(),
        ],
    )


mcp = FastMCP(
    "Match Weather",
    instructions="Venue geocoding and match-day weather for team match records",
    log_level="INFO",
    port=config.port,
)

weather_service = WeatherService()


# Tools
@mcp.tool()
async def geocode(address: str) -> Optional[Dict[str, float]]:
    """
    Find the coordinates of a venue address

    Args:
        address: Street address or place name, Korean addresses work best
    Returns:
        latitude and longitude, or None when no geocoder knows the address
    """
    coords = await weather_service.get_coordinates(address)
    if coords is None:
        return None
    return coords.model_dump()


@mcp.tool()
async def get_weather(latitude: float, longitude: float, date: str, time: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    Get the weather at a location for a match date and kick-off time

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        date: Match date as YYYY-MM-DD
        time: Kick-off time as HH:MM, noon when omitted
    """
    try:
        coords = Coordinates(latitude=latitude, longitude=longitude)
    except ValueError as e:
        logger.warning(f"Rejecting weather request for invalid coordinates: {e}")
        return None

    snapshot = await weather_service.get_weather(coords, date, time)
    if snapshot is None:
        return None
    return snapshot.model_dump(mode="json")


@mcp.tool()
async def get_venue_weather(address: str, date: str, time: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    Geocode a venue and get the weather there for a match

    Args:
        address: Venue address
        date: Match date as YYYY-MM-DD
        time: Kick-off time as HH:MM, noon when omitted
    """
    logger.info(f"Starting venue weather request for {address}")
    result = await weather_service.get_weather_for_venue(address, date, time)
    if result is None:
        return None
    return result.model_dump(mode="json")


# Prompts
@mcp.prompt()
def match_weather_briefing(raw_data: Dict[str, Any]) -> str:
    """Summarize match-day weather the way the match page shows it"""
    weather = raw_data.get("weather", raw_data)
    address = raw_data.get("address", "the venue")

    lines = [
        f"{weather.get('description', '알 수 없음')}",
        f"- Temperature: {weather.get('temperature_c', 'N/A')}°C",
    ]
    if (weather.get("precipitation_mm") or 0) > 0:
        lines.append(f"- Precipitation: {weather['precipitation_mm']}mm")
    if (weather.get("snowfall_cm") or 0) > 0:
        lines.append(f"- Snowfall: {weather['snowfall_cm']}cm")
    lines.append(f"- Wind: {weather.get('wind_speed_kmh', 'N/A')}km/h")

    conditions = "\n        ".join(lines)
    return f"""Please write a short match-day weather note for players meeting at {address}:
        1. What conditions to expect at kick-off
        2. Whether the pitch may be wet, icy or windy
        3. What to bring (layers, rain gear, spare boots)

        Conditions:
        {conditions}
        """


def main() -> None:
    load_dotenv()
    configure_logging()
    logger.info(f"Starting Match Weather server on port {config.port}")
    mcp.run()


if __name__ == "__main__":
    main()
