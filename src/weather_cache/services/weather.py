"""Cache-aside weather lookups."""

import json
import logging
from dataclasses import dataclass

from weather_cache.adapters.weather_client import WeatherClient
from weather_cache.domain.weather import (
    CacheCorruptError,
    CacheUnavailableError,
    JsonValue,
    cache_key,
)
from weather_cache.services.cache import CacheStore

CACHE_TTL_SECONDS = 12 * 60 * 60

_logger = logging.getLogger(__name__)


@dataclass
class WeatherService:
    """Serve weather lookups through a read-through cache."""

    client: WeatherClient
    store: CacheStore
    ttl_seconds: int = CACHE_TTL_SECONDS

    async def fetch_weather(self, city: str) -> JsonValue:
        """Return weather for a city from cache, or from upstream on a miss.

        Cache failures of any kind are treated as misses. Upstream failures
        propagate as WeatherFetchError subclasses and leave the cache untouched.
        """
        key = cache_key(city)
        found, cached = await self._read_cache(key)
        if found:
            _logger.info("Serving from cache: city=%s", city)
            return cached

        payload = await self.client.fetch(city)
        await self._write_cache(key, payload)
        _logger.info("Serving from API: city=%s", city)
        return payload

    async def _read_cache(self, key: str) -> tuple[bool, JsonValue]:
        """Return (found, value); unreachable or corrupt entries count as misses."""
        try:
            raw = await self.store.get(key)
        except CacheUnavailableError as exc:
            _logger.warning("Cache read failed: key=%s error=%s", key, exc)
            return False, None
        except CacheCorruptError:
            _logger.warning("Discarding undecodable cache entry: key=%s", key)
            return False, None
        if raw is None:
            return False, None
        try:
            return True, json.loads(raw)
        except ValueError:
            _logger.warning("Discarding corrupt cache entry: key=%s", key)
            return False, None

    async def _write_cache(self, key: str, payload: JsonValue) -> None:
        try:
            serialized = json.dumps(payload, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError):
            _logger.exception("Failed to serialize weather data: key=%s", key)
            return
        try:
            await self.store.set(key, serialized, ttl_seconds=self.ttl_seconds)
        except CacheUnavailableError as exc:
            _logger.warning("Failed to cache weather data: key=%s error=%s", key, exc)
