"""Shared fixtures: OpenWeatherMap payloads pinned to Europe/Berlin."""
import json
from zoneinfo import ZoneInfo

import pytest

# 17.06.2022 00:00 CEST
MIDNIGHT = 1655416800
HOUR = 3600
DAY = 24 * HOUR


@pytest.fixture
def berlin():
    return ZoneInfo("Europe/Berlin")


@pytest.fixture
def onecall_payload():
    """One-call response: 24 hours from 17:00 on 17.06.2022, three days."""
    hourly = [
        {"dt": MIDNIGHT + (17 + i) * HOUR, "temp": 31.38 - i * 0.5, "pop": 0.0}
        for i in range(24)
    ]
    # rain at 19:00 and 20:00 on the 17th, at 09:00 on the 18th
    hourly[2]["pop"] = 0.29
    hourly[3]["pop"] = 0.6
    hourly[16]["pop"] = 0.12

    daily = [
        {
            "dt": MIDNIGHT + 12 * HOUR + k * DAY,
            "moonrise": MIDNIGHT + 24 * 60 + k * DAY,
            "moonset": MIDNIGHT + 8 * HOUR + 14 * 60 + k * DAY,
            "moon_phase": 0.62 + k * 0.03,
            "temp": {
                "day": 28.02, "min": 13.58, "max": 31.38,
                "night": 20.39, "eve": 30.18, "morn": 15.53,
            },
            "alerts": [],
        }
        for k in range(3)
    ]
    return {
        "lat": 50.1109,
        "lon": 8.6821,
        "timezone": "Europe/Berlin",
        "current": {
            "dt": 1655479384,
            "sunrise": MIDNIGHT + 5 * HOUR + 18 * 60,
            "sunset": MIDNIGHT + 21 * HOUR + 46 * 60,
            "temp": 31.38,
            "feels_like": 29.86,
            "pressure": 1021,
            "humidity": 27,
            "dew_point": 10.15,
            "uvi": 3.1,
            "clouds": 40,
            "wind_speed": 2.3,
            "wind_deg": 233,
            "wind_gust": 3.32,
            "weather": [
                {"id": 500, "main": "Rain", "description": "Leichter Regen", "icon": "10d"}
            ],
        },
        "hourly": hourly,
        "daily": daily,
    }


@pytest.fixture
def onecall_body(onecall_payload):
    return json.dumps(onecall_payload).encode("utf-8")


@pytest.fixture
def geo_body():
    return json.dumps([
        {"name": "Paris", "lat": 55.123456, "lon": 3.7654321, "country": "FR"}
    ]).encode("utf-8")
