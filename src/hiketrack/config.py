"""Configuration for hike tracking thresholds and environment discovery."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Sample filtering
MIN_ACCEPT_DISTANCE_M = 1.0
MAX_JUMP_DISTANCE_M = 100.0

# Minimum session size worth saving
MIN_SAVE_POINTS = 5
MIN_SAVE_DISTANCE_M = 10.0

# Location subscription defaults
LOCATION_MIN_DISTANCE_M = 5.0
LOCATION_MIN_INTERVAL_MS = 1000

TICK_INTERVAL_SECONDS = 1.0


def find_env_file(start: Path | None = None) -> str | None:
    """
    Locate the nearest .env file, walking up from the working directory.

    Args:
        start: Directory to start from (defaults to cwd)

    Returns:
        Path to the .env file as a string, or None if none was found
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            logger.debug(f"Using env file {candidate}")
            return str(candidate)
    return None


_env_file = find_env_file()


class TrackingSettings(BaseSettings):
    """
    Tunable thresholds for a tracking session.

    Every value can be overridden with a ``HIKE_``-prefixed environment variable,
    e.g. ``HIKE_MAX_JUMP_DISTANCE_M=250``.
    """

    model_config = SettingsConfigDict(
        env_prefix="HIKE_",
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    min_accept_distance_m: float = Field(
        default=MIN_ACCEPT_DISTANCE_M,
        description="Samples at or below this distance from the last point are jitter",
        ge=0,
    )
    max_jump_distance_m: float = Field(
        default=MAX_JUMP_DISTANCE_M,
        description="Samples at or beyond this distance from the last point are glitches",
        gt=0,
    )
    min_save_points: int = Field(
        default=MIN_SAVE_POINTS,
        description="Sessions with this many route points or fewer are discarded on stop",
        ge=0,
    )
    min_save_distance_m: float = Field(
        default=MIN_SAVE_DISTANCE_M,
        description="Sessions at or below this distance are discarded on stop",
        ge=0,
    )
    tick_interval_seconds: float = Field(
        default=TICK_INTERVAL_SECONDS,
        description="Period of the stats refresh tick",
        gt=0,
    )
    location_min_distance_m: float = Field(
        default=LOCATION_MIN_DISTANCE_M,
        description="Minimum movement before the location source reports a sample",
        ge=0,
    )
    location_min_interval_ms: int = Field(
        default=LOCATION_MIN_INTERVAL_MS,
        description="Minimum interval between location samples",
        ge=0,
    )


@lru_cache
def get_tracking_settings() -> TrackingSettings:
    """
    Get tracking settings (cached singleton pattern).

    Returns:
        TrackingSettings instance loaded from environment
    """
    return TrackingSettings()
