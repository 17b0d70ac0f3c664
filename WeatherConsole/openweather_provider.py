"""OpenWeatherMap geocoding and One Call 3.0 client."""
import logging
from datetime import tzinfo
from decimal import Decimal
from typing import Optional, Tuple

import requests

from response_parser import parse_geo_response, parse_weather_response
from weather_data import Conditions, Coordinates, Forecast
from weather_provider import TransportError, UpstreamStatusError, WeatherProviderBase


class OpenWeatherClient(WeatherProviderBase):
    """
    Weather provider using the OpenWeatherMap geocoding and One Call APIs.

    Geocoding: https://openweathermap.org/api/geocoding-api
    One Call 3.0: https://openweathermap.org/api/one-call-3
    Every call is a single request; nothing is retried or cached.
    """

    BASE_URL = "https://api.openweathermap.org"

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: int = 10,
        tz: Optional[tzinfo] = None,
    ):
        """
        Initialize OpenWeatherMap client.

        Args:
            api_key: OpenWeatherMap API key
            base_url: Scheme and host of the API, without trailing slash
            session: HTTP session to send requests with
            timeout: HTTP request timeout in seconds
            tz: Zone timestamps are rendered in (None: system local)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.tz = tz

    def geo_url(self, location: str) -> str:
        return f"{self.base_url}/geo/1.0/direct?q={location}&limit=1&appid={self.api_key}"

    def weather_url(self, coordinates: Coordinates) -> str:
        return (
            f"{self.base_url}/data/3.0/onecall"
            f"?lat={format_coordinate(coordinates.lat)}&lon={format_coordinate(coordinates.lon)}"
            f"&units=metric&lang=de&appid={self.api_key}"
        )

    def get_coordinates(self, location: str) -> Coordinates:
        """
        Resolve a location such as "Paris,FR" to coordinates.

        Raises:
            TransportError: On connection problems or timeouts
            UpstreamStatusError: If the API does not answer 200
            ParseError: If the body is not a usable geocoding result
        """
        logging.info(f"Resolving location '{location}'")
        body = self._fetch(self.geo_url(location))
        coordinates = parse_geo_response(body)
        logging.info(f"Location '{location}' resolved to lat={coordinates.lat} lon={coordinates.lon}")
        return coordinates

    def get_weather(self, coordinates: Coordinates) -> Tuple[Conditions, Forecast]:
        """
        Fetch current conditions and forecast for coordinates.

        Raises:
            TransportError: On connection problems or timeouts
            UpstreamStatusError: If the API does not answer 200
            ParseError: If the body is not a usable one-call response
        """
        logging.info(f"Fetching weather for lat={coordinates.lat} lon={coordinates.lon}")
        body = self._fetch(self.weather_url(coordinates))
        conditions, forecast = parse_weather_response(body, self.tz)
        logging.info(f"Weather: {conditions.temperature}°C, {conditions.summary}")
        return conditions, forecast

    def _fetch(self, url: str) -> bytes:
        # Keep the key out of the logs.
        logging.debug(f"GET {url.replace(self.api_key, '***') if self.api_key else url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise TransportError(f"Network error: {e}") from e

        logging.info(f"API response status: {response.status_code}")
        if response.status_code != 200:
            logging.error(f"API request failed with status {response.status_code}: {response.text[:200]}")
            raise UpstreamStatusError(response.status_code, response.reason or "")
        return response.content


def format_coordinate(value: float) -> str:
    """Shortest decimal that round-trips to ``value``, without exponent or trailing zeros."""
    return format(Decimal(repr(float(value))).normalize(), "f")
