"""Turn an upstream current-weather payload into what the results page shows."""
from __future__ import annotations

from typing import Iterable

from app.models import DisplayWeather, UpstreamWeatherResponse, WeatherCondition

COLD_BELOW_F = 40
HOT_ABOVE_F = 80
UNKNOWN_LOCATION = "an unknown location"


def describe_temperature(feels_like: float) -> str:
    """Bucket a feels-like temperature (°F); 40 and 80 themselves are Moderate."""
    if feels_like < COLD_BELOW_F:
        return "Cold"
    if feels_like > HOT_ABOVE_F:
        return "Hot"
    return "Moderate"


def location_label(name: str) -> str:
    """Upstream location name, or a placeholder when it could not be resolved."""
    return name if name else UNKNOWN_LOCATION


def summarize_conditions(conditions: Iterable[WeatherCondition]) -> str:
    """One "<main>: <description>" line per condition, in upstream order."""
    return "".join(f"{c.main}: {c.description}\n" for c in conditions)


def build_display_weather(response: UpstreamWeatherResponse) -> DisplayWeather:
    """Derive the three display fields (plus the raw feels-like value)."""
    feels_like = response.main.feels_like
    return DisplayWeather(
        name=location_label(response.name),
        temp_description=describe_temperature(feels_like),
        temp=feels_like,
        current_description=summarize_conditions(response.weather),
    )


def format_temperature(value: float) -> str:
    """Shortest text for a temperature; whole numbers drop the ".0"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
