"""Console text for each CLI function - pure functions for testability."""
from typing import List, Optional, Tuple

from forecast_analytics import (
    DAY_AFTER_TOMORROW, DAY_NAMES, TODAY, TOMORROW,
    DayForecast, first_alerts, forecast_for_day, rainy_periods,
)
from weather_data import Alert, Conditions, Forecast, ForecastDaily, WeatherReport

FUNCTION_OFFSETS = {
    "today": TODAY,
    "tomorrow": TOMORROW,
    "aftertomorrow": DAY_AFTER_TOMORROW,
}


def render_current(conditions: Conditions) -> str:
    """
    Render current conditions.

    Wind speed and gust are shown in km/h, the bearing as a compass sector.
    """
    lines = [
        f"{conditions.timestamp}: {conditions.summary}",
        f"Temperatur {conditions.temperature:.1f} °C (gefühlt {conditions.feels_like:.1f} °C), "
        f"Taupunkt {conditions.dew_point:.1f} °C",
        f"Luftdruck {conditions.pressure} hPa, Luftfeuchtigkeit {conditions.humidity} %",
        f"Wind {conditions.wind_speed_kmh():.1f} km/h aus {conditions.wind_sector()}, "
        f"Böen bis {conditions.wind_gust_kmh():.1f} km/h",
        f"Sonnenaufgang {conditions.sunrise}, Sonnenuntergang {conditions.sunset}",
    ]
    return "\n".join(lines)


def render_forecast(day_forecast: DayForecast, label: str) -> str:
    temp = day_forecast.temp
    lines = [
        f"Vorhersage für {label} ({day_forecast.day}):",
        f"Min {temp.min:.1f} °C, Max {temp.max:.1f} °C",
        f"Morgens {temp.morning:.1f} °C, tagsüber {temp.day:.1f} °C, "
        f"abends {temp.evening:.1f} °C, nachts {temp.night:.1f} °C",
        f"Regen: {day_forecast.rain}",
    ]
    lines.extend(_alert_lines(day_forecast.alerts))
    return "\n".join(lines)


def render_moon(daily: ForecastDaily) -> str:
    return "\n".join([
        f"Mond am {daily.day}: {daily.moon_phase_name()} ({daily.moon_phase:.2f})",
        f"Mondaufgang {daily.moonrise}, Monduntergang {daily.moonset}",
    ])


def render_rain(forecast: Forecast) -> str:
    return "\n".join(
        f"Regen {DAY_NAMES[offset]} ({forecast.daily[offset].day}): {rainy_periods(forecast, offset)}"
        for offset in sorted(DAY_NAMES)
    )


def render_alerts(daily: Optional[ForecastDaily]) -> str:
    if daily is None:
        return "Keine Warnungen."
    return "\n".join([f"Warnungen für {daily.day}:"] + _alert_lines(daily.alerts))


def _alert_lines(alerts: Tuple[Alert, ...]) -> List[str]:
    lines = []
    for alert in alerts:
        lines.append(f"! {alert.name} ({alert.start} bis {alert.end})")
        if alert.description:
            lines.append(f"  {alert.description}")
    return lines


def render(function: str, report: WeatherReport) -> str:
    """
    Render the report section a CLI function asks for.

    Raises:
        ValueError: If the function name is unknown
    """
    forecast = report.forecast
    if function == "current":
        return render_current(report.conditions)
    if function in FUNCTION_OFFSETS:
        offset = FUNCTION_OFFSETS[function]
        return render_forecast(forecast_for_day(forecast, offset), DAY_NAMES[offset])
    if function == "moon":
        return render_moon(forecast.daily[TODAY])
    if function == "rain":
        return render_rain(forecast)
    if function == "alert":
        return render_alerts(first_alerts(forecast))
    raise ValueError(f"unknown function: {function}")
