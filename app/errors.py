"""Failures that can occur while producing a weather page."""


class WeatherServiceError(Exception):
    """Base class; str(err) is the text shown to the user."""


class TransportError(WeatherServiceError):
    """The upstream weather API could not be reached or read."""


class UpstreamError(WeatherServiceError):
    """The upstream answered with a non-200 status; message is the raw body."""

    def __init__(self, body: str, status_code: int | None = None):
        super().__init__(body)
        self.body = body
        self.status_code = status_code


class DecodeError(WeatherServiceError):
    """A 200 response whose body is not a valid current-weather document."""


class TemplateError(WeatherServiceError):
    """The results page could not be loaded or rendered."""

    def __init__(self, message: str, *, stage: str = "execute"):
        super().__init__(message)
        # "parse" or "execute"
        self.stage = stage
