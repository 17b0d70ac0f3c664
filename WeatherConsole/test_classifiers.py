"""Tests for wind sector, moon phase and speed conversion."""
import pytest
from classifiers import UNKNOWN, km_per_hour, moon_phase_name, wind_sector

SECTORS = {"N", "NNO", "NO", "ONO", "O", "OSO", "SO", "SSO",
           "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"}


def test_wind_sector_south():
    assert wind_sector(190.0) == "S"


def test_wind_sector_north_wraps():
    assert wind_sector(0) == "N"
    assert wind_sector(360) == "N"
    assert wind_sector(355.0) == "N"
    assert wind_sector(348.75) == "N"


def test_wind_sector_upper_bound_is_exclusive():
    assert wind_sector(11.24) == "N"
    assert wind_sector(11.25) == "NNO"
    assert wind_sector(33.75) == "NO"
    assert wind_sector(348.74) == "NNW"


@pytest.mark.parametrize("bearing,label", [
    (22.5, "NNO"), (45, "NO"), (67.5, "ONO"), (90, "O"), (112.5, "OSO"),
    (135, "SO"), (157.5, "SSO"), (180, "S"), (202.5, "SSW"), (225, "SW"),
    (233, "SW"), (247.5, "WSW"), (270, "W"), (292.5, "WNW"), (315, "NW"),
    (337.5, "NNW"),
])
def test_wind_sector_reference_bearings(bearing, label):
    assert wind_sector(bearing) == label


def test_wind_sector_every_bearing_has_a_label():
    for tenth in range(3600):
        assert wind_sector(tenth / 10) in SECTORS


def test_wind_sector_wraps_out_of_range_bearings():
    assert wind_sector(370.0) == wind_sector(10.0)
    assert wind_sector(-90.0) == "W"


def test_wind_sector_unknown_for_non_finite():
    assert wind_sector(float("nan")) == UNKNOWN
    assert wind_sector(float("inf")) == UNKNOWN


def test_moon_phase_named_points():
    assert moon_phase_name(0) == "new moon"
    assert moon_phase_name(1) == "new moon"
    assert moon_phase_name(0.25) == "first quarter"
    assert moon_phase_name(0.5) == "full moon"
    assert moon_phase_name(0.75) == "last quarter"


@pytest.mark.parametrize("fraction,name", [
    (0.01, "waxing crescent"),
    (0.24, "waxing crescent"),
    (0.3, "waxing gibbous"),
    (0.49, "waxing gibbous"),
    (0.62, "waning gibbous"),
    (0.8, "waning crescent"),
    (0.99, "waning crescent"),
])
def test_moon_phase_ranges(fraction, name):
    assert moon_phase_name(fraction) == name


def test_moon_phase_unknown_outside_cycle():
    assert moon_phase_name(-0.1) == UNKNOWN
    assert moon_phase_name(1.5) == UNKNOWN
    assert moon_phase_name(float("nan")) == UNKNOWN


def test_km_per_hour():
    assert km_per_hour(10.0) == 36.0
    assert km_per_hour(0.0) == 0.0
