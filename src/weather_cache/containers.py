"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from weather_cache.adapters.redis_store import RedisCacheStore
from weather_cache.adapters.weather_client import HttpxWeatherClient, WeatherClient
from weather_cache.config import Settings
from weather_cache.services.cache import CacheStore, InMemoryCacheStore
from weather_cache.services.weather import WeatherService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    weather_client: WeatherClient
    cache_store: CacheStore
    weather_service: WeatherService
    close_resources: Callable[[], Awaitable[None]]


def build_cache_store(settings: Settings) -> CacheStore:
    """Create the cache store selected by settings."""
    if settings.cache_backend == "memory":
        return InMemoryCacheStore()
    return RedisCacheStore.create(
        host=settings.redis_host or "",
        port=settings.redis_port or 0,
        password=settings.redis_password,
        db=settings.redis_db,
        timeout_seconds=settings.redis_timeout_seconds,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    weather_client = HttpxWeatherClient.create(
        api_key=resolved_settings.weather_api_key,
        base_url=resolved_settings.weather_base_url,
        timeout_seconds=resolved_settings.upstream_timeout_seconds,
    )
    cache_store = build_cache_store(resolved_settings)
    weather_service = WeatherService(
        client=weather_client,
        store=cache_store,
        ttl_seconds=resolved_settings.cache_ttl_seconds,
    )

    async def close_resources() -> None:
        await weather_client.close()
        await cache_store.close()

    return AppContainer(
        settings=resolved_settings,
        weather_client=weather_client,
        cache_store=cache_store,
        weather_service=weather_service,
        close_resources=close_resources,
    )
