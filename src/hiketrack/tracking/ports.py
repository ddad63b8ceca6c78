"""Interfaces the tracking session consumes: a location stream and a record sink."""

from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from ..config import LOCATION_MIN_DISTANCE_M, LOCATION_MIN_INTERVAL_MS
from ..models import HikeRecord, LocationSample

LocationCallback = Callable[[LocationSample], None]


class AccuracyTier(str, Enum):
    """Requested positioning accuracy, best first."""

    BEST_FOR_NAVIGATION = "best_for_navigation"
    HIGHEST = "highest"
    HIGH = "high"
    BALANCED = "balanced"
    LOW = "low"


class SubscriptionOptions(BaseModel):
    """Options passed to LocationSource.subscribe()."""

    model_config = ConfigDict(frozen=True)

    accuracy: AccuracyTier = Field(default=AccuracyTier.BEST_FOR_NAVIGATION)
    min_distance_m: float = Field(default=LOCATION_MIN_DISTANCE_M, ge=0)
    min_interval_ms: int = Field(default=LOCATION_MIN_INTERVAL_MS, ge=0)


class LocationSource(Protocol):
    """Platform GPS stream."""

    def request_permission(self) -> bool:
        """Ask for location permission; False means the user refused."""
        ...

    def current_location(self) -> LocationSample | None:
        """Return a one-off fix, or None if no fix is available."""
        ...

    def subscribe(self, options: SubscriptionOptions, callback: LocationCallback) -> Any:
        """Start delivering samples to callback; returns an opaque handle.

        A source serves one live subscriber; subscribing again before
        unsubscribing may raise.
        """
        ...

    def unsubscribe(self, handle: Any) -> None:
        """Stop delivering samples for handle.

        Called with the session lock held, so it must not wait for an in-flight
        callback to finish. A delivery racing past it is ignored by the session.
        """
        ...


class HikeRecordSink(Protocol):
    """Persistence for finished hikes."""

    def save(self, record: HikeRecord) -> str:
        """Persist record and return its saved id. Raises PersistenceError."""
        ...

    def list(self, user_id: str | None = None) -> list[HikeRecord]:
        """Return a user's hikes, newest first."""
        ...

    def get(self, record_id: str) -> HikeRecord | None:
        """Return one hike by id, or None."""
        ...

    def delete(self, record_id: str) -> None:
        """Remove a hike by id."""
        ...
