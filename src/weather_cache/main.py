"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from weather_cache.config import Settings


def main() -> None:
    """Run the weather cache API on the configured port."""
    settings = Settings()
    uvicorn.run("weather_cache.api.asgi:app", host="0.0.0.0", port=settings.port)  # noqa: S104


if __name__ == "__main__":
    main()
