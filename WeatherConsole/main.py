"""Console weather report for a named location."""
import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from layout import render
from openweather_provider import OpenWeatherClient
from weather_provider import WeatherProviderError
from weather_service import WeatherService

FUNCTIONS = ("current", "today", "tomorrow", "aftertomorrow", "moon", "rain", "alert")
API_KEY_VAR = "OPENWEATHERMAP_API_KEY"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        "weather",
        description="Current weather, forecast, moon, rain and alerts for a location.",
        epilog=f"Example: weather current London,UK (needs {API_KEY_VAR} in the environment)",
    )
    parser.add_argument("function", choices=FUNCTIONS)
    parser.add_argument("location", nargs="+", help="Place name, e.g. Paris,FR or Bad Homburg")
    parser.add_argument("--timeout", type=int, default=10, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    # stdout carries the report
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def get_location(words: Sequence[str]) -> str:
    """Join location words the way the geocoding query expects them."""
    return "+".join(words)


def load_config() -> dict:
    load_dotenv()
    api_key = os.getenv(API_KEY_VAR)
    if not api_key:
        raise SystemExit(f"Please set the env variable {API_KEY_VAR}")

    tz = None
    tz_name = os.getenv("WEATHER_TZ")
    if tz_name:
        try:
            tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise SystemExit(f"Invalid WEATHER_TZ: {exc}") from exc

    config = {
        "api_key": api_key,
        "base_url": os.getenv("WEATHER_BASE_URL", OpenWeatherClient.BASE_URL),
        "tz": tz,
    }
    logging.info("Configuration loaded: base_url=%s tz=%s", config["base_url"], tz_name or "local")
    return config


def build_weather_service(config: dict, args: argparse.Namespace) -> WeatherService:
    client = OpenWeatherClient(
        api_key=config["api_key"],
        base_url=config["base_url"],
        timeout=args.timeout,
        tz=config["tz"],
    )
    return WeatherService(client)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    config = load_config()
    service = build_weather_service(config, args)

    location = get_location(args.location)
    try:
        report = service.lookup(location)
    except WeatherProviderError as err:
        logging.error("Weather lookup failed: %s", err)
        print(err, file=sys.stderr)
        return 1

    print(render(args.function, report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
