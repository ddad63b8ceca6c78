"""GPS hike tracking for the hiking-community app."""

from .errors import (
    HikeTrackError,
    InvalidTransitionError,
    NoLocationError,
    PermissionDeniedError,
    PersistenceError,
)
from .models import HikeRecord, LocationSample, RoutePoint, StatsSnapshot
from .tracking import SessionState, TrackingSession

__all__ = [
    "HikeRecord",
    "HikeTrackError",
    "InvalidTransitionError",
    "LocationSample",
    "NoLocationError",
    "PermissionDeniedError",
    "PersistenceError",
    "RoutePoint",
    "SessionState",
    "StatsSnapshot",
    "TrackingSession",
]
