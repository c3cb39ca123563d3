"""Upstream OpenWeather payload schema and the derived display model."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Upstream(BaseModel):
    """Every upstream field is optional; unknown fields are ignored."""
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def null_means_default(cls, data):
        """A JSON null leaves the field at its default, like an absent key."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Coord(_Upstream):
    lon: float = 0.0
    lat: float = 0.0


class WeatherCondition(_Upstream):
    """One reported phenomenon, e.g. main="Rain", description="light rain"."""
    id: int = 0
    main: str = ""
    description: str = ""
    icon: str = ""


class MainReadings(_Upstream):
    temp: float = 0.0
    feels_like: float = 0.0
    temp_min: float = 0.0
    temp_max: float = 0.0
    pressure: int = 0
    humidity: int = 0
    sea_level: int = 0
    grnd_level: int = 0


class Wind(_Upstream):
    speed: float = 0.0
    deg: int = 0
    gust: float = 0.0


class Clouds(_Upstream):
    all: int = 0


class SysInfo(_Upstream):
    type: int = 0
    id: int = 0
    country: str = ""
    sunrise: int = 0
    sunset: int = 0


class UpstreamWeatherResponse(_Upstream):
    """Body of a successful `GET /data/2.5/weather` call (imperial units)."""
    coord: Coord = Field(default_factory=Coord)
    weather: list[WeatherCondition] = Field(default_factory=list)
    base: str = ""
    main: MainReadings = Field(default_factory=MainReadings)
    visibility: int = 0
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    dt: int = 0
    sys: SysInfo = Field(default_factory=SysInfo)
    timezone: int = 0
    id: int = 0
    name: str = ""
    cod: int = 0


@dataclass(frozen=True)
class DisplayWeather:
    """View-model rendered on the results page."""
    name: str
    temp_description: str
    temp: float
    current_description: str
