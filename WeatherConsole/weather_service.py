"""Weather service: resolve a location, then fetch its weather."""
import logging
import time

from weather_data import WeatherReport
from weather_provider import WeatherProviderBase


class WeatherService:
    """
    Runs one lookup for one location against a provider.

    The weather request needs the coordinates from the geocoding request,
    so the two round-trips happen one after the other. Failures at either
    stage propagate unchanged; nothing is retried or cached.
    """

    def __init__(self, provider: WeatherProviderBase):
        self.provider = provider

    def lookup(self, location: str) -> WeatherReport:
        """
        Get a full weather report for a location.

        Raises:
            WeatherProviderError: If geocoding or the weather request fails
        """
        started = time.monotonic()
        coordinates = self.provider.get_coordinates(location)
        geocoded = time.monotonic()
        logging.debug(f"Geocoding took {geocoded - started:.2f}s")

        conditions, forecast = self.provider.get_weather(coordinates)
        logging.debug(f"Weather request took {time.monotonic() - geocoded:.2f}s")
        logging.info(f"Lookup for '{location}' finished in {time.monotonic() - started:.2f}s")

        return WeatherReport(
            location=location,
            coordinates=coordinates,
            conditions=conditions,
            forecast=forecast,
        )
