"""Weather provider abstraction and the error types raised along the lookup path."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

from weather_data import Conditions, Coordinates, Forecast


class WeatherProviderBase(ABC):
    """Abstract base class for geocoding-then-weather providers."""

    @abstractmethod
    def get_coordinates(self, location: str) -> Coordinates:
        """
        Resolve a free-text location to coordinates.

        Raises:
            WeatherProviderError: If the lookup fails at any stage
        """

    @abstractmethod
    def get_weather(self, coordinates: Coordinates) -> Tuple[Conditions, Forecast]:
        """
        Fetch current conditions and the forecast for coordinates.

        Raises:
            WeatherProviderError: If the lookup fails at any stage
        """


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class TransportError(WeatherProviderError):
    """Connection or timeout failure talking to the upstream API."""
    pass


class UpstreamStatusError(WeatherProviderError):
    """The upstream API answered with a status other than 200."""

    def __init__(self, status: int, reason: str = ""):
        self.status = status
        self.reason = reason
        super().__init__(f"unexpected response status {status} {reason}".rstrip())


class ParseFailure(Enum):
    MALFORMED = "malformed"
    MISSING_CURRENT_WEATHER = "missing current weather"
    INSUFFICIENT_FORECAST_DATA = "insufficient forecast data"
    NO_LOCATION_MATCH = "no location match"


class ParseError(WeatherProviderError):
    """
    An upstream payload could not be turned into the domain model.

    The raw payload is kept on the exception for diagnostics.
    """

    def __init__(self, kind: ParseFailure, payload: bytes, detail: str = ""):
        self.kind = kind
        self.payload = payload
        self.detail = detail
        message = f"invalid API response ({kind.value})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class OffsetOutOfRangeError(WeatherProviderError, ValueError):
    """A forecast day offset outside 0..2 was requested."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"day offset {offset} out of range, want 0 (today) to 2 (day after tomorrow)")
