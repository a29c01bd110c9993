"""Cache store interface and in-memory implementation."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol


class CacheStore(Protocol):
    """Key-value store with per-key expiry."""

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent.

        Raises CacheUnavailableError when the store cannot be reached and
        CacheCorruptError when the stored value cannot be decoded.
        """

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value that expires after ttl_seconds."""

    async def ping(self) -> None:
        """Check connectivity, raising CacheUnavailableError on failure."""

    async def close(self) -> None:
        """Release any held connections."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _CacheEntry:
    value: str
    expires_at: datetime


@dataclass
class InMemoryCacheStore(CacheStore):
    """Process-local cache store with passive expiry, for local runs.

    The clock is injectable so expiry can be driven deterministically.
    """

    clock: Callable[[], datetime] = _utcnow
    _entries: dict[str, _CacheEntry] = field(default_factory=dict)

    async def get(self, key: str) -> str | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a cached value with a TTL."""
        expires_at = self.clock() + timedelta(seconds=ttl_seconds)
        self._entries[key] = _CacheEntry(value=value, expires_at=expires_at)

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        self._entries.clear()

    def ttl(self, key: str) -> float | None:
        """Return the remaining lifetime of a key in seconds."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        return (entry.expires_at - self.clock()).total_seconds()
