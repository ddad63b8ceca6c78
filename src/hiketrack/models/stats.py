"""Live statistics snapshot for a tracking session."""

from pydantic import BaseModel, ConfigDict, Field


class StatsSnapshot(BaseModel):
    """
    Point-in-time statistics for a hike.

    Pace is derived from this snapshot's own distance and duration, so a
    snapshot is always internally consistent. ``pace_min_per_km`` is None
    until some distance has been covered.
    """

    model_config = ConfigDict(frozen=True)

    distance_meters: float = Field(default=0.0, description="Filtered distance covered", ge=0)
    duration_seconds: float = Field(
        default=0.0,
        description="Active time, excluding paused intervals",
        ge=0,
    )
    pace_min_per_km: float | None = Field(
        default=None,
        description="Average pace in minutes per kilometer (None = no pace yet)",
        ge=0,
    )
    elevation_gain_meters: float = Field(
        default=0.0,
        description="Net gain above the starting altitude (meters)",
        ge=0,
    )
    current_speed_mps: float = Field(
        default=0.0,
        description="Most recent reported speed (m/s)",
        ge=0,
    )
