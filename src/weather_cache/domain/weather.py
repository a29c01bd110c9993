"""Weather domain types and errors."""

from typing import TypeAlias

JsonValue: TypeAlias = (
    dict[str, "JsonValue"] | list["JsonValue"] | str | int | float | bool | None
)

CACHE_KEY_PREFIX = "weather:"


def cache_key(city: str) -> str:
    """Build the cache key for a city, ignoring case."""
    return f"{CACHE_KEY_PREFIX}{city.lower()}"


class CacheUnavailableError(Exception):
    """Raised when the cache store cannot be reached or times out."""


class CacheCorruptError(Exception):
    """Raised when a stored cache value cannot be decoded."""


class WeatherFetchError(Exception):
    """Base error for failed upstream weather lookups."""

    status_code: int = 500
    message: str = "Failed to fetch weather data"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UpstreamUnreachableError(WeatherFetchError):
    """The weather provider could not be reached."""


class UpstreamRejectedError(WeatherFetchError):
    """The weather provider answered with a non-2xx status."""

    message = "Invalid city or API error"

    def __init__(self, status_code: int) -> None:
        super().__init__()
        self.status_code = status_code


class UpstreamMalformedError(WeatherFetchError):
    """The weather provider returned a body that is not JSON."""

    message = "Failed to parse weather data"
