"""Upstream weather data sources."""

from .openweather_client import OPENWEATHER_CURRENT_URL, OpenWeatherClient

__all__ = [
    "OPENWEATHER_CURRENT_URL",
    "OpenWeatherClient",
]
