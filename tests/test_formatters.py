"""Tests for display formatting."""

from datetime import datetime

import pytest

from hiketrack.formatters import (
    format_date,
    format_distance,
    format_duration,
    format_elevation,
    format_pace,
    format_speed,
)


@pytest.mark.parametrize(
    "meters, expected",
    [(0, "0 m"), (999.4, "999 m"), (1000, "1.00 km"), (12345.6, "12.35 km")],
)
def test_format_distance(meters, expected):
    assert format_distance(meters) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "0:00"), (59.9, "0:59"), (65, "1:05"), (3600, "1:00:00"), (3725, "1:02:05"), (-5, "0:00")],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


@pytest.mark.parametrize(
    "pace, expected",
    [(None, "--:--"), (0, "--:--"), (12.5, "12:30 /km"), (9.0, "9:00 /km"), (float("inf"), "--:--")],
)
def test_format_pace(pace, expected):
    assert format_pace(pace) == expected


@pytest.mark.parametrize("mps, expected", [(None, "0.0 km/h"), (0, "0.0 km/h"), (1.25, "4.5 km/h")])
def test_format_speed(mps, expected):
    assert format_speed(mps) == expected


def test_format_elevation():
    assert format_elevation(123.6) == "124 m"


def test_format_date():
    assert format_date(datetime(2026, 10, 17, 9, 5)) == "Sat, Oct 17, 09:05 AM"


def test_format_date_from_iso_string():
    assert format_date("2026-10-17T14:30:00Z") == "Sat, Oct 17, 02:30 PM"
