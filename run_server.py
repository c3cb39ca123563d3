import argparse

import uvicorn

from app.config import load_settings
from app.main import create_app
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


def parse_args(argv=None) -> argparse.Namespace:
    """Command-line flags; anything omitted falls back to settings."""
    parser = argparse.ArgumentParser(description="Serve current weather for a latitude/longitude pair.")
    parser.add_argument("-p", "--port", type=int, default=None, help="Provide a port number (default 3040)")
    parser.add_argument("--host", default=None, help="Interface to bind (default from WEATHER_HOST)")
    parser.add_argument("--log-level", default=None, help="Root log level (default from WEATHER_LOG_LEVEL)")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    """
    Parse flags, load settings (exits if OPENWEATHER_API_KEY is missing), then serve.
    """
    args = parse_args(argv)
    settings = load_settings()

    setup_logging(level=(args.log_level or settings.log_level).upper(), job_name="weather_service")

    port = args.port if args.port is not None else settings.port
    host = args.host or settings.host
    app = create_app(settings)

    logger.info(f"Go to localhost:{port} to request current weather")
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
