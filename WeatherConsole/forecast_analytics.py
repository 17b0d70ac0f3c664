"""Values derived from a parsed forecast: rain windows, per-day summaries, alerts."""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from weather_data import Alert, DailyTemperatures, Forecast, ForecastDaily
from weather_provider import OffsetOutOfRangeError

TODAY, TOMORROW, DAY_AFTER_TOMORROW = 0, 1, 2
DAY_NAMES = {
    TODAY: "heute",
    TOMORROW: "morgen",
    DAY_AFTER_TOMORROW: "übermorgen",
}

NO_RAIN = "no rain."
ALL_DAY = "all day long"
FIRST_HOUR = "00:00"
LAST_HOUR = "23:00"


@dataclass(frozen=True)
class DayForecast:
    """Summary of one forecast day as shown by the today/tomorrow commands."""
    day: str
    temp: DailyTemperatures
    rain: str
    alerts: Tuple[Alert, ...]


def rainy_periods(forecast: Forecast, day_offset: int) -> str:
    """
    Describe when it rains on the day at ``day_offset``.

    Hours of that day are scanned in order; every maximal run of hours
    with a rain probability above zero becomes "at HH:MM", "from HH:MM to
    HH:MM" or "all day long" (00:00 through 23:00). A run still open when
    the hours run out ends at the last rainy hour seen.

    Returns:
        Run descriptions joined by ", ", or "no rain."
    """
    day = forecast.daily[day_offset].day
    runs: List[str] = []
    start: Optional[str] = None
    last: Optional[str] = None

    for hour in forecast.hourly:
        if hour.day != day:
            continue
        if hour.rain_probability > 0:
            if start is None:
                start = hour.hour
            last = hour.hour
        elif start is not None:
            runs.append(_describe_run(start, last))
            start = last = None

    if start is not None:
        runs.append(_describe_run(start, last))

    if not runs:
        return NO_RAIN
    return ", ".join(runs)


def _describe_run(start: str, end: str) -> str:
    if start == FIRST_HOUR and end == LAST_HOUR:
        return ALL_DAY
    if start == end:
        return f"at {start}"
    return f"from {start} to {end}"


def forecast_for_day(forecast: Forecast, offset: int) -> DayForecast:
    """
    Select the daily entry at ``offset`` (0 today, 1 tomorrow, 2 day after).

    Raises:
        OffsetOutOfRangeError: If offset is not 0, 1 or 2
    """
    if isinstance(offset, bool) or offset not in DAY_NAMES:
        raise OffsetOutOfRangeError(offset)
    daily = forecast.daily[offset]
    return DayForecast(
        day=daily.day,
        temp=daily.temp,
        rain=rainy_periods(forecast, offset),
        alerts=daily.alerts,
    )


def first_alerts(forecast: Forecast) -> Optional[ForecastDaily]:
    """Return the earliest of the next three days that has alerts, or None."""
    for daily in forecast.daily[:len(DAY_NAMES)]:
        if daily.alerts:
            return daily
    return None
