"""Application configuration pulled from environment variables via pydantic."""
from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")

API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"
DEFAULT_PORT = 3040


class Settings(BaseSettings):
    """Environment-driven configuration for the weather front-end."""
    model_config = SettingsConfigDict(env_prefix="WEATHER_", extra="ignore")

    # Read from OPENWEATHER_API_KEY, without the WEATHER_ prefix.
    openweather_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(API_KEY_ENV_VAR, "openweather_api_key"),
    )
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5/weather"
    request_timeout_seconds: float | None = None
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    @field_validator("openweather_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so query strings attach cleanly."""
        return str(v).rstrip("/")

    @field_validator("openweather_api_key", mode="after")
    @classmethod
    def blank_key_is_missing(cls, v: str | None) -> str | None:
        """Treat an empty or whitespace-only key as not set."""
        if v is None or not v.strip():
            return None
        return v.strip()


def load_settings(**overrides) -> Settings:
    """
    Load settings at startup, exiting the process if they are unusable.

    The API key has no default; without it no server is started.
    """
    try:
        loaded = Settings(**overrides)
    except ValidationError as exc:
        logger.error(f"invalid configuration: {exc}")
        raise SystemExit(1) from exc

    if not loaded.openweather_api_key:
        logger.error(f"no api key present in environment variable: '{API_KEY_ENV_VAR}'")
        raise SystemExit(1)

    return loaded
