import datetime
import math
from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Geographic coordinates"""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class WeatherIcon(str, Enum):
    """Icon names understood by the match weather widget"""
    SUN = "sun"
    CLOUD_SUN = "cloud-sun"
    CLOUD = "cloud"
    CLOUD_FOG = "cloud-fog"
    CLOUD_DRIZZLE = "cloud-drizzle"
    CLOUD_RAIN = "cloud-rain"
    CLOUD_SNOW = "cloud-snow"
    CLOUD_LIGHTNING = "cloud-lightning"


class WeatherCondition(BaseModel):
    """Human readable description of a WMO weather code"""
    description: str
    icon: WeatherIcon


class WeatherQuery(BaseModel):
    """Weather lookup for one location at one hour of one day"""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    date: datetime.date
    hour: int = Field(12, ge=0, le=23)


class WeatherSnapshot(BaseModel):
    """Weather at the resolved hour, normalized for display"""
    temperature_c: int
    weather_code: int
    precipitation_mm: float
    snowfall_cm: float
    wind_speed_kmh: int
    humidity_pct: float
    description: str
    icon: WeatherIcon


class VenueWeather(BaseModel):
    address: str
    coordinates: Coordinates
    weather: WeatherSnapshot


class HourlySeries(BaseModel):
    """Hourly arrays of an Open-Meteo response, valid for a single request"""
    model_config = ConfigDict(allow_inf_nan=False)

    time: List[str]
    temperature_2m: List[Optional[float]] = []
    relative_humidity_2m: List[Optional[float]] = []
    precipitation: List[Optional[float]] = []
    snowfall: List[Optional[float]] = []
    weather_code: List[Optional[float]] = []
    wind_speed_10m: List[Optional[float]] = []

    def __len__(self) -> int:
        return len(self.time)

    def value_at(self, field: str, index: int) -> float:
        """Value of an hourly field at index, 0 when the provider left it out"""
        values = getattr(self, field)
        if index < 0 or index >= len(values) or values[index] is None:
            return 0
        if not math.isfinite(values[index]):
            return 0
        return values[index]


# Outcome of a single provider attempt


class Success(BaseModel):
    kind: Literal["success"] = "success"
    provider: str
    payload: Any


class NoMatch(BaseModel):
    kind: Literal["no_match"] = "no_match"
    provider: str


class ProviderError(BaseModel):
    kind: Literal["provider_error"] = "provider_error"
    provider: str
    reason: str


ProviderOutcome = Union[Success, NoMatch, ProviderError]
