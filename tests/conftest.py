"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from weather_cache.adapters.weather_client import WeatherClient
from weather_cache.config import Settings
from weather_cache.containers import AppContainer
from weather_cache.domain.weather import (
    CacheUnavailableError,
    JsonValue,
    WeatherFetchError,
)
from weather_cache.services.cache import InMemoryCacheStore
from weather_cache.services.weather import WeatherService


@dataclass
class ManualClock:
    """Clock that only moves when told to."""

    now: datetime = field(default_factory=lambda: datetime(2024, 1, 1, tzinfo=UTC))

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@dataclass
class FakeWeatherClient(WeatherClient):
    """Fake upstream that counts calls and returns a fixed payload."""

    payload: JsonValue = field(default_factory=lambda: {"temp": 72})
    error: WeatherFetchError | None = None
    calls: list[str] = field(default_factory=list)

    async def fetch(self, city: str) -> JsonValue:
        self.calls.append(city)
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class RecordingCacheStore(InMemoryCacheStore):
    """In-memory store that records writes and can simulate outages."""

    fail_reads: bool = False
    fail_writes: bool = False
    fail_ping: bool = False
    writes: list[tuple[str, str, int]] = field(default_factory=list)

    async def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise CacheUnavailableError("connection refused")
        return await super().get(key)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self.writes.append((key, value, ttl_seconds))
        if self.fail_writes:
            raise CacheUnavailableError("connection refused")
        await super().set(key, value, ttl_seconds)

    async def ping(self) -> None:
        if self.fail_ping:
            raise CacheUnavailableError("connection refused")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        weather_api_key="weather-key",
        redis_host="localhost",
        redis_port=6379,
    )


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def cache_store(clock: ManualClock) -> RecordingCacheStore:
    return RecordingCacheStore(clock=clock)


@pytest.fixture
def weather_client() -> FakeWeatherClient:
    return FakeWeatherClient()


@pytest.fixture
def weather_service(
    weather_client: FakeWeatherClient, cache_store: RecordingCacheStore
) -> WeatherService:
    return WeatherService(client=weather_client, store=cache_store)


@pytest.fixture
def container(
    settings: Settings,
    weather_client: FakeWeatherClient,
    cache_store: RecordingCacheStore,
    weather_service: WeatherService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        weather_client=weather_client,
        cache_store=cache_store,
        weather_service=weather_service,
        close_resources=close_resources,
    )
