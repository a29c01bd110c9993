"""Redis-backed cache store."""

from dataclasses import dataclass

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from weather_cache.domain.weather import CacheCorruptError, CacheUnavailableError
from weather_cache.services.cache import CacheStore


@dataclass
class RedisCacheStore(CacheStore):
    """Cache store implemented with redis.asyncio."""

    client: aioredis.Redis

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        host: str,
        port: int,
        password: str | None = None,
        db: int = 0,
        timeout_seconds: float = 2.0,
    ) -> "RedisCacheStore":
        """Create a store with a shared connection pool."""
        client = aioredis.Redis(
            host=host,
            port=port,
            password=password or None,
            db=db,
            decode_responses=True,
            socket_connect_timeout=timeout_seconds,
            socket_timeout=timeout_seconds,
        )
        return cls(client=client)

    async def get(self, key: str) -> str | None:
        """Fetch a value with GET."""
        try:
            return await self.client.get(key)
        except UnicodeDecodeError as exc:
            raise CacheCorruptError(f"GET {key} returned undecodable bytes") from exc
        except (RedisError, OSError) as exc:
            raise CacheUnavailableError(f"GET {key} failed: {exc}") from exc

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value with SETEX."""
        try:
            await self.client.setex(key, ttl_seconds, value)
        except (RedisError, OSError) as exc:
            raise CacheUnavailableError(f"SETEX {key} failed: {exc}") from exc

    async def ping(self) -> None:
        """Send PING to the server."""
        try:
            await self.client.ping()
        except (RedisError, OSError) as exc:
            raise CacheUnavailableError(f"PING failed: {exc}") from exc

    async def close(self) -> None:
        """Close the connection pool."""
        await self.client.aclose()
