"""Human-readable formatting for hike statistics."""

import math
from datetime import datetime


def format_distance(meters: float) -> str:
    """Meters below 1 km, kilometers with two decimals above."""
    if meters < 1000:
        return f"{meters:.0f} m"
    return f"{meters / 1000:.2f} km"


def format_duration(seconds: float) -> str:
    """H:MM:SS when over an hour, M:SS otherwise."""
    total = int(max(0.0, seconds))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_pace(pace_min_per_km: float | None) -> str:
    if not pace_min_per_km or not math.isfinite(pace_min_per_km):
        return "--:--"
    minutes = int(pace_min_per_km)
    seconds = int((pace_min_per_km - minutes) * 60)
    return f"{minutes}:{seconds:02d} /km"


def format_speed(meters_per_second: float | None) -> str:
    if not meters_per_second:
        return "0.0 km/h"
    return f"{meters_per_second * 3.6:.1f} km/h"


def format_elevation(meters: float) -> str:
    return f"{meters:.0f} m"


def format_date(value: datetime | str) -> str:
    """e.g. ``Sat, Oct 18, 09:05 AM``"""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{value:%a, %b} {value.day}, {value:%I:%M %p}"
