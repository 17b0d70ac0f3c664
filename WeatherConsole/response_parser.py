"""Turn raw OpenWeatherMap response bodies into the weather domain model."""
import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional, Tuple, Union

from pydantic import ValidationError

from onecall_schema import CurrentBlock, DailyBlock, GeoResponse, HourlyBlock, OneCallResponse
from weather_data import Alert, Conditions, Coordinates, DailyTemperatures, Forecast, ForecastDaily, ForecastHourly
from weather_provider import ParseError, ParseFailure

TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M %Z"
CLOCK_FORMAT = "%H:%M"
DAY_FORMAT = "%d.%m.%Y"
ALERT_FORMAT = "%d.%m.%Y %H:%M"

# Analytics look at today, tomorrow and the day after, and half a day of hours.
MIN_HOURLY_ENTRIES = 12
MIN_DAILY_ENTRIES = 3


def format_timestamp(epoch: int, fmt: str, tz: Optional[tzinfo] = None) -> str:
    """
    Format epoch seconds as local time.

    Args:
        epoch: UNIX timestamp (UTC)
        fmt: strftime format
        tz: Target zone; None means the system local zone

    Returns:
        Formatted string, e.g. "17.06.2022 17:23 CEST"
    """
    return datetime.fromtimestamp(epoch, tz=timezone.utc).astimezone(tz).strftime(fmt)


def parse_weather_response(
    data: Union[bytes, str],
    tz: Optional[tzinfo] = None,
) -> Tuple[Conditions, Forecast]:
    """
    Parse a one-call response body.

    Raises:
        ParseError: MALFORMED, MISSING_CURRENT_WEATHER or
            INSUFFICIENT_FORECAST_DATA, checked in that order
    """
    payload = _as_bytes(data)
    try:
        resp = OneCallResponse.model_validate_json(payload)
    except ValidationError as e:
        logging.debug(f"One-call payload failed validation: {e}")
        raise ParseError(ParseFailure.MALFORMED, payload, str(e)) from e

    if not resp.current.weather:
        raise ParseError(
            ParseFailure.MISSING_CURRENT_WEATHER, payload,
            "want at least one current weather element",
        )
    if len(resp.hourly) < MIN_HOURLY_ENTRIES or len(resp.daily) < MIN_DAILY_ENTRIES:
        raise ParseError(
            ParseFailure.INSUFFICIENT_FORECAST_DATA, payload,
            f"want at least {MIN_HOURLY_ENTRIES} hourly and {MIN_DAILY_ENTRIES} daily entries, "
            f"got {len(resp.hourly)} and {len(resp.daily)}",
        )

    conditions = _conditions(resp.current, tz)
    forecast = Forecast(
        hourly=tuple(_hourly(h, tz) for h in resp.hourly),
        daily=tuple(_daily(d, tz) for d in resp.daily),
    )
    logging.debug(
        f"Parsed one-call response: {conditions.summary}, "
        f"{len(forecast.hourly)} hours, {len(forecast.daily)} days"
    )
    return conditions, forecast


def parse_geo_response(data: Union[bytes, str]) -> Coordinates:
    """
    Parse a direct geocoding response; only the best (first) match is used.

    Raises:
        ParseError: MALFORMED or NO_LOCATION_MATCH
    """
    payload = _as_bytes(data)
    try:
        matches = GeoResponse.model_validate_json(payload).root
    except ValidationError as e:
        raise ParseError(ParseFailure.MALFORMED, payload, str(e)) from e

    if not matches:
        raise ParseError(ParseFailure.NO_LOCATION_MATCH, payload, "want at least one set of coordinates")
    best = matches[0]
    logging.debug(f"Geocoding matched {best.name or 'unnamed location'} at {best.lat},{best.lon}")
    return Coordinates(lat=best.lat, lon=best.lon)


def _as_bytes(data: Union[bytes, str]) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else data


def _conditions(current: CurrentBlock, tz: Optional[tzinfo]) -> Conditions:
    return Conditions(
        summary=current.weather[0].description,
        temperature=current.temp,
        timestamp=format_timestamp(current.dt, TIMESTAMP_FORMAT, tz),
        sunrise=format_timestamp(current.sunrise, CLOCK_FORMAT, tz),
        sunset=format_timestamp(current.sunset, CLOCK_FORMAT, tz),
        feels_like=current.feels_like,
        dew_point=current.dew_point,
        pressure=current.pressure,
        humidity=current.humidity,
        wind_speed=current.wind_speed,
        wind_gust=current.wind_gust,
        wind_direction=current.wind_deg,
    )


def _hourly(hour: HourlyBlock, tz: Optional[tzinfo]) -> ForecastHourly:
    return ForecastHourly(
        day=format_timestamp(hour.dt, DAY_FORMAT, tz),
        hour=format_timestamp(hour.dt, CLOCK_FORMAT, tz),
        temperature=hour.temp,
        rain_probability=hour.pop * 100,
    )


def _daily(day: DailyBlock, tz: Optional[tzinfo]) -> ForecastDaily:
    return ForecastDaily(
        day=format_timestamp(day.dt, DAY_FORMAT, tz),
        moonrise=format_timestamp(day.moonrise, CLOCK_FORMAT, tz),
        moonset=format_timestamp(day.moonset, CLOCK_FORMAT, tz),
        moon_phase=day.moon_phase,
        temp=DailyTemperatures(
            max=day.temp.max,
            min=day.temp.min,
            morning=day.temp.morn,
            day=day.temp.day,
            evening=day.temp.eve,
            night=day.temp.night,
        ),
        alerts=tuple(
            Alert(
                start=format_timestamp(a.start, ALERT_FORMAT, tz),
                end=format_timestamp(a.end, ALERT_FORMAT, tz),
                name=a.name,
                description=a.description,
            )
            for a in day.alerts
        ),
    )
