"""Map raw measurements (wind bearing, moon phase, wind speed) to display values."""
import math
from bisect import bisect_right

UNKNOWN = "UNKNOWN"

# Upper (exclusive) boundary of each 22.5 degree sector, N centred on 0.
_SECTOR_BOUNDS = [11.25 + 22.5 * i for i in range(16)]
_SECTOR_LABELS = [
    "N", "NNO", "NO", "ONO",
    "O", "OSO", "SO", "SSO",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
    "N",
]

_NAMED_PHASES = {
    0.0: "new moon",
    0.25: "first quarter",
    0.5: "full moon",
    0.75: "last quarter",
    1.0: "new moon",
}
_PHASE_RANGES = [
    (0.25, "waxing crescent"),
    (0.5, "waxing gibbous"),
    (0.75, "waning gibbous"),
    (1.0, "waning crescent"),
]


def wind_sector(bearing: float) -> str:
    """
    Classify a wind bearing into one of 16 compass sectors (German labels).

    The bearing is wrapped into [0, 360). Sector upper boundaries are
    exclusive, so 11.25 is NNO and 348.75 is N again.
    """
    if not math.isfinite(bearing):
        return UNKNOWN
    bearing = bearing % 360.0
    return _SECTOR_LABELS[bisect_right(_SECTOR_BOUNDS, bearing)]


def moon_phase_name(fraction: float) -> str:
    """
    Name the moon phase for an upstream phase fraction.

    0 and 1 are new moon, 0.25 first quarter, 0.5 full moon and 0.75 last
    quarter; values in between are waxing/waning crescent or gibbous.
    """
    if not math.isfinite(fraction) or fraction < 0.0 or fraction > 1.0:
        return UNKNOWN
    if fraction in _NAMED_PHASES:
        return _NAMED_PHASES[fraction]
    for upper, name in _PHASE_RANGES:
        if fraction < upper:
            return name
    return UNKNOWN


def km_per_hour(mps: float) -> float:
    """Convert metres per second to kilometres per hour."""
    return mps * 3.6
