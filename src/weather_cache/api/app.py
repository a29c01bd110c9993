"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from weather_cache.app_logging import configure_logging
from weather_cache.containers import AppContainer
from weather_cache.domain.weather import CacheUnavailableError, WeatherFetchError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        try:
            await state_container.cache_store.ping()
        except CacheUnavailableError:
            logger.exception("Failed to connect to cache store")
            await state_container.close_resources()
            raise
        yield
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/weather/{city}")
    async def get_weather(city: str, request: Request) -> JSONResponse:
        """Return weather for a city, served from cache when possible."""
        state_container: AppContainer = request.app.state.container
        try:
            payload = await state_container.weather_service.fetch_weather(city)
        except WeatherFetchError as exc:
            logger.warning(
                "Weather lookup failed: city=%s status=%s error=%s",
                city,
                exc.status_code,
                exc.message,
            )
            return JSONResponse(
                status_code=exc.status_code, content={"error": exc.message}
            )
        return JSONResponse(content=payload)

    return app
