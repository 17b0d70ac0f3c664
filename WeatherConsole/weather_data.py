"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass, field
from typing import Tuple

from classifiers import km_per_hour, moon_phase_name, wind_sector


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class Conditions:
    """Point-in-time snapshot of the current weather."""
    summary: str  # e.g. "Leichter Regen"
    temperature: float
    timestamp: str  # "17.06.2022 17:23 CEST"
    sunrise: str  # "05:18"
    sunset: str
    feels_like: float
    dew_point: float
    pressure: int  # hPa
    humidity: int  # percent
    wind_speed: float  # m/s
    wind_gust: float  # m/s
    wind_direction: float  # degrees

    def wind_speed_kmh(self) -> float:
        return km_per_hour(self.wind_speed)

    def wind_gust_kmh(self) -> float:
        return km_per_hour(self.wind_gust)

    def wind_sector(self) -> str:
        return wind_sector(self.wind_direction)


@dataclass(frozen=True)
class ForecastHourly:
    day: str  # "17.06.2022"
    hour: str  # "17:00"
    temperature: float
    rain_probability: float = 0.0  # 0..100


@dataclass(frozen=True)
class DailyTemperatures:
    max: float
    min: float
    morning: float
    day: float
    evening: float
    night: float


@dataclass(frozen=True)
class Alert:
    start: str  # "17.06.2022 14:00"
    end: str
    name: str
    description: str


@dataclass(frozen=True)
class ForecastDaily:
    day: str
    moonrise: str
    moonset: str
    moon_phase: float  # 0..1, 0.5 is full moon
    temp: DailyTemperatures
    alerts: Tuple[Alert, ...] = ()

    def moon_phase_name(self) -> str:
        return moon_phase_name(self.moon_phase)


@dataclass(frozen=True)
class Forecast:
    """Hourly and daily forecast in upstream (chronological) order."""
    hourly: Tuple[ForecastHourly, ...] = ()
    daily: Tuple[ForecastDaily, ...] = ()


@dataclass(frozen=True)
class WeatherReport:
    """Everything a single lookup for one location produced."""
    location: str
    coordinates: Coordinates
    conditions: Conditions
    forecast: Forecast = field(default_factory=Forecast)
