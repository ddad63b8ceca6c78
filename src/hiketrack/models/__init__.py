"""Data models for hike tracking."""

from .hike_record import HikeRecord
from .route import LocationSample, RoutePoint
from .stats import StatsSnapshot

__all__ = [
    "HikeRecord",
    "LocationSample",
    "RoutePoint",
    "StatsSnapshot",
]
