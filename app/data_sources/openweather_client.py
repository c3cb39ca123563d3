"""Client for the OpenWeather current-weather endpoint."""
from __future__ import annotations

from typing import Optional

import requests
from pydantic import ValidationError

from app.config import Settings
from app.errors import DecodeError, TransportError, UpstreamError
from app.models import DisplayWeather, UpstreamWeatherResponse
from app.weather_service import build_display_weather
from utils.logging_utils import get_tagged_logger, mask_url_secrets

logger = get_tagged_logger(__name__, tag="openweather_client")

OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"
UNITS = "imperial"


class OpenWeatherClient:
    """
    Fetch current conditions for a coordinate pair and reduce them to a DisplayWeather.

    One GET per fetch(), no retries. The timeout is only applied when one is
    configured; by default a stalled upstream blocks that request.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = OPENWEATHER_CURRENT_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[requests.Session] = None) -> "OpenWeatherClient":
        """Build a client from loaded settings."""
        return cls(
            settings.openweather_api_key or "",
            base_url=settings.openweather_base_url,
            timeout=settings.request_timeout_seconds,
            session=session,
        )

    def build_params(self, lat: str, lon: str) -> dict[str, str]:
        """Query parameters for one lookup; coordinates are passed through untouched."""
        return {
            "units": UNITS,
            "appid": self.api_key,
            "lat": lat,
            "lon": lon,
        }

    def request_url(self, lat: str, lon: str) -> str:
        """Fully encoded upstream URL (used for logging; contains the key)."""
        prepared = requests.Request("GET", self.base_url, params=self.build_params(lat, lon)).prepare()
        return prepared.url

    def fetch_raw(self, lat: str, lon: str) -> UpstreamWeatherResponse:
        """Perform the upstream call and decode the payload without reshaping it."""
        logger.debug(f"GET {mask_url_secrets(self.request_url(lat, lon))}")
        try:
            resp = self.session.get(self.base_url, params=self.build_params(lat, lon), timeout=self.timeout)
            body = resp.content
        except requests.RequestException as exc:
            logger.warning("OpenWeather request failed", extra={"error": str(exc)})
            raise TransportError(f"could not get weather: {exc}") from exc

        if resp.status_code != 200:
            logger.warning(
                "OpenWeather returned an error status",
                extra={"status_code": resp.status_code},
            )
            raise UpstreamError(body.decode("utf-8", errors="replace"), status_code=resp.status_code)

        try:
            return UpstreamWeatherResponse.model_validate_json(body)
        except ValidationError as exc:
            logger.warning("OpenWeather response could not be decoded", extra={"error": str(exc)})
            raise DecodeError(f"error unmarshalling response: {exc}") from exc

    def fetch(self, lat: str, lon: str) -> DisplayWeather:
        """Current weather near (lat, lon), ready for display."""
        current = self.fetch_raw(lat, lon)
        display = build_display_weather(current)
        logger.debug(f"Current weather near {display.name}: {display.temp_description} ({display.temp}°F)")
        return display
