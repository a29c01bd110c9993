"""ASGI entrypoint for the weather cache API."""

from weather_cache.api.app import create_app
from weather_cache.containers import build_container

app = create_app(build_container())
