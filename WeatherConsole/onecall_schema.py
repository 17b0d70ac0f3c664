"""Upstream OpenWeatherMap payload shapes, kept apart from the domain model.

Field names follow the upstream JSON. Unknown fields are ignored. Fields
that are missing or null take their zero value (empty list for arrays),
so completeness checks happen on the parsed result. Types are strict:
a number sent as a string is rejected.
"""
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator


class UpstreamModel(BaseModel):
    model_config = ConfigDict(strict=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class WeatherDescription(UpstreamModel):
    description: str = ""


class CurrentBlock(UpstreamModel):
    weather: List[WeatherDescription] = []
    dt: int = 0
    sunrise: int = 0
    sunset: int = 0
    temp: float = 0.0
    feels_like: float = 0.0
    dew_point: float = 0.0
    pressure: int = 0
    humidity: int = 0
    wind_speed: float = 0.0
    wind_gust: float = 0.0
    wind_deg: float = 0.0


class HourlyBlock(UpstreamModel):
    dt: int = 0
    temp: float = 0.0
    pop: float = 0.0


class DailyTempBlock(UpstreamModel):
    max: float = 0.0
    min: float = 0.0
    morn: float = 0.0
    day: float = 0.0
    eve: float = 0.0
    night: float = 0.0


class AlertBlock(UpstreamModel):
    start: int = 0
    end: int = 0
    name: str = ""
    description: str = ""


class DailyBlock(UpstreamModel):
    dt: int = 0
    moonrise: int = 0
    moonset: int = 0
    moon_phase: float = 0.0
    temp: DailyTempBlock = Field(default_factory=DailyTempBlock)
    alerts: List[AlertBlock] = []


class OneCallResponse(UpstreamModel):
    current: CurrentBlock = Field(default_factory=CurrentBlock)
    hourly: List[HourlyBlock] = []
    daily: List[DailyBlock] = []


class GeoMatch(UpstreamModel):
    lat: float = 0.0
    lon: float = 0.0
    name: str = ""


class GeoResponse(RootModel[List[GeoMatch]]):
    model_config = ConfigDict(strict=True)

    @model_validator(mode="before")
    @classmethod
    def _null_is_empty(cls, data: Any) -> Any:
        return [] if data is None else data
