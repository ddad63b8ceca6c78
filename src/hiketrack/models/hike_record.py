"""Finalized hike record handed to persistence."""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from .route import RoutePoint
from .stats import StatsSnapshot


def _new_id() -> str:
    return str(uuid4())


def _utc_now() -> datetime:
    return datetime.now(UTC)


class HikeRecord(BaseModel):
    """
    A completed hike: the cleaned route plus the stats at stop time.

    ``route_coordinates`` keeps insertion order, which is chronological order.
    """

    id: str = Field(default_factory=_new_id, description="Record identifier")
    user_id: str | None = Field(default=None, description="Owning user, set by the sink")
    date: datetime = Field(default_factory=_utc_now, description="When the hike was saved")
    route_coordinates: list[RoutePoint] = Field(
        default_factory=list,
        description="Accepted route points in chronological order",
    )
    stats: StatsSnapshot = Field(
        default_factory=StatsSnapshot,
        description="Statistics at the moment tracking stopped",
    )

    @property
    def point_count(self) -> int:
        return len(self.route_coordinates)
