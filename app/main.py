"""FastAPI application: the coordinate form and the current-weather results page."""

from pathlib import Path
from typing import Optional

import jinja2
from fastapi import Depends, FastAPI, Request
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from app.config import Settings
from app.data_sources import OpenWeatherClient
from app.errors import TemplateError, WeatherServiceError
from app.models import DisplayWeather
from app.weather_service import format_temperature
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/main")

_APP_DIR = Path(__file__).resolve().parent
_STATIC_DIR = _APP_DIR / "static"
_TEMPLATES_DIR = _APP_DIR / "templates"

RESULT_TEMPLATE = "weather.html"
WEATHER_ERROR_PREFIX = "unable to get weather:"

templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))
templates.env.filters["temperature"] = format_temperature


def render_weather_page(current: DisplayWeather, template_name: str = RESULT_TEMPLATE) -> str:
    """Render the results page, raising TemplateError on load or render failure."""
    try:
        template = templates.env.get_template(template_name)
    except jinja2.TemplateError as exc:
        raise TemplateError(f"unable to parse template:{exc}", stage="parse") from exc

    try:
        return template.render(current=current)
    except (jinja2.TemplateError, TypeError, ValueError) as exc:
        raise TemplateError(f"unable to execute template:{exc}", stage="execute") from exc


def first_query_value(request: Request, name: str) -> str:
    """First value of a query parameter, "" when absent."""
    values = request.query_params.getlist(name)
    return values[0] if values else ""


def get_weather_client(request: Request) -> OpenWeatherClient:
    """Client configured at app creation."""
    return request.app.state.weather_client


def create_app(settings: Settings, client: Optional[OpenWeatherClient] = None) -> FastAPI:
    """Build the app around an explicitly configured weather client."""
    app = FastAPI(title="Weather Service")
    app.state.settings = settings
    app.state.weather_client = client or OpenWeatherClient.from_settings(settings)

    @app.get("/")
    def serve_index():
        """Serve the static coordinate form."""
        return FileResponse(_STATIC_DIR / "index.html", media_type="text/html")

    @app.get("/weather")
    def current_weather(
        request: Request,
        client: OpenWeatherClient = Depends(get_weather_client),
    ):
        """Look up current weather for the submitted coordinates."""
        lat = first_query_value(request, "lat")
        lon = first_query_value(request, "lon")
        try:
            current = client.fetch(lat, lon)
        except WeatherServiceError as exc:
            logger.info(f"Weather lookup failed for lat={lat!r} lon={lon!r}: {type(exc).__name__}")
            return PlainTextResponse(f"{WEATHER_ERROR_PREFIX}{exc}")

        try:
            page = render_weather_page(current)
        except TemplateError as exc:
            logger.error(f"Results page failed to render ({exc.stage})", extra={"error": str(exc)})
            return PlainTextResponse(str(exc))

        return HTMLResponse(page)

    return app
