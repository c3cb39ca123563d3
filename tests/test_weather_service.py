import pytest

from app.models import DisplayWeather, MainReadings, UpstreamWeatherResponse, WeatherCondition
from app.weather_service import (
    UNKNOWN_LOCATION,
    build_display_weather,
    describe_temperature,
    format_temperature,
    location_label,
    summarize_conditions,
)


@pytest.mark.parametrize(
    "feels_like, expected",
    [
        (-10.0, "Cold"),
        (39.99, "Cold"),
        (40.0, "Moderate"),
        (65.0, "Moderate"),
        (80.0, "Moderate"),
        (80.01, "Hot"),
        (104.0, "Hot"),
    ],
)
def test_describe_temperature_boundaries(feels_like, expected):
    assert describe_temperature(feels_like) == expected


def test_location_label_fallback():
    assert location_label("") == UNKNOWN_LOCATION == "an unknown location"
    assert location_label("Springfield") == "Springfield"


def test_summarize_conditions_empty():
    assert summarize_conditions([]) == ""


def test_summarize_conditions_keeps_order():
    conditions = [
        WeatherCondition(id=500, main="Rain", description="light rain", icon="10d"),
        WeatherCondition(id=701, main="Mist", description="mist", icon="50d"),
    ]
    summary = summarize_conditions(conditions)
    assert summary == "Rain: light rain\nMist: mist\n"
    assert summary.count("\n") == 2


def test_build_display_weather_cold_unknown_location():
    response = UpstreamWeatherResponse(
        name="",
        main=MainReadings(feels_like=35.0),
        weather=[WeatherCondition(main="Rain", description="light rain")],
    )
    assert build_display_weather(response) == DisplayWeather(
        name="an unknown location",
        temp_description="Cold",
        temp=35.0,
        current_description="Rain: light rain\n",
    )


def test_build_display_weather_is_deterministic():
    response = UpstreamWeatherResponse(name="Springfield", main=MainReadings(feels_like=80.0))
    first = build_display_weather(response)
    second = build_display_weather(response)
    assert first == second
    assert first.temp_description == "Moderate"
    assert first.current_description == ""


@pytest.mark.parametrize(
    "value, expected",
    [(35.0, "35"), (72.5, "72.5"), (-3.0, "-3"), (0.0, "0"), (68.27, "68.27")],
)
def test_format_temperature(value, expected):
    assert format_temperature(value) == expected
