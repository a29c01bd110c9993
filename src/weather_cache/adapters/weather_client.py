"""Visual Crossing weather API client."""

import json
from dataclasses import dataclass
from typing import Protocol

import httpx

from weather_cache.domain.weather import (
    JsonValue,
    UpstreamMalformedError,
    UpstreamRejectedError,
    UpstreamUnreachableError,
)


class WeatherClient(Protocol):
    """Interface for the upstream weather provider."""

    async def fetch(self, city: str) -> JsonValue:
        """Fetch the raw weather document for a city."""


@dataclass
class HttpxWeatherClient(WeatherClient):
    """HTTPX-backed weather client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 10.0
    ) -> "HttpxWeatherClient":
        """Create a weather client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch(self, city: str) -> JsonValue:
        """Fetch the timeline document for a city."""
        url = f"{self.base_url.rstrip('/')}/{city}"
        try:
            response = await self.http_client.get(
                url,
                params={"key": self.api_key},
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise UpstreamUnreachableError() from exc
        if not response.is_success:
            raise UpstreamRejectedError(response.status_code)
        try:
            return json.loads(response.content, parse_constant=_reject_constant)
        except ValueError as exc:
            raise UpstreamMalformedError() from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _reject_constant(name: str) -> JsonValue:
    """Refuse NaN and Infinity, which are not valid JSON."""
    raise ValueError(f"Non-standard JSON constant: {name}")
