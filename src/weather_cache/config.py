"""Application configuration."""

import os
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

VISUAL_CROSSING_BASE_URL = (
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    weather_api_key: str
    weather_base_url: str = VISUAL_CROSSING_BASE_URL
    upstream_timeout_seconds: float = 10.0
    cache_backend: Literal["redis", "memory"] = "redis"
    redis_host: str | None = None
    redis_port: int | None = None
    redis_password: str | None = None
    redis_db: int = 0
    redis_timeout_seconds: float = 2.0
    cache_ttl_seconds: int = 12 * 60 * 60
    log_level: str = "INFO"
    port: int = 3000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @model_validator(mode="after")
    def require_redis_connection(self) -> "Settings":
        """Redis host and port are mandatory unless the memory backend is used."""
        if self.cache_backend == "redis" and (
            not self.redis_host or self.redis_port is None
        ):
            raise ValueError("REDIS_HOST and REDIS_PORT are required for redis cache")
        return self
