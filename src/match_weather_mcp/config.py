from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    kakao_rest_api_key: Optional[str] = None
    timezone: str = "Asia/Seoul"
    http_timeout: float = 10.0
    user_agent: str = "MatchArchive/1.0"
    port: int = 8001

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"Unknown timezone '{value}'") from e
        return value


config = Config()
