"""Noise filter deciding which GPS samples become route points."""

import logging
import math
from dataclasses import dataclass
from enum import Enum

from ..config import MAX_JUMP_DISTANCE_M, MIN_ACCEPT_DISTANCE_M
from ..geo import distance_meters
from ..models import LocationSample, RoutePoint

logger = logging.getLogger(__name__)


class FilterReason(str, Enum):
    ACCEPTED = "accepted"
    JITTER = "jitter"
    JUMP = "jump"
    INVALID = "invalid"


@dataclass(frozen=True)
class FilterDecision:
    """Outcome of offering one sample to the filter."""

    reason: FilterReason
    distance_m: float
    point: RoutePoint | None = None

    @property
    def accepted(self) -> bool:
        return self.reason is FilterReason.ACCEPTED


class SampleFilter:
    """
    Two-sided distance threshold filter.

    A sample is kept only if it moved more than ``min_accept_m`` and less than
    ``max_jump_m`` from the last accepted point. Everything else is dropped
    without smoothing. This is a deliberate approximation, not a Kalman filter:
    a genuine fast segment (e.g. a vehicle ride) is discarded as a glitch.

    Attributes:
        last_point: Last accepted route point (None before reset())
        total_distance_m: Sum of credited distances since reset()
    """

    def __init__(
        self,
        min_accept_m: float = MIN_ACCEPT_DISTANCE_M,
        max_jump_m: float = MAX_JUMP_DISTANCE_M,
    ) -> None:
        if max_jump_m <= min_accept_m:
            raise ValueError("max_jump_m must be greater than min_accept_m")
        self.min_accept_m = min_accept_m
        self.max_jump_m = max_jump_m
        self.last_point: RoutePoint | None = None
        self.total_distance_m = 0.0

    def reset(self, seed: RoutePoint) -> None:
        """Start a new run from seed with zero distance."""
        self.last_point = seed
        self.total_distance_m = 0.0

    def offer(self, sample: LocationSample) -> FilterDecision:
        """
        Decide whether sample becomes the next route point.

        Accepted samples move ``last_point`` and add to ``total_distance_m``;
        rejected ones leave the filter untouched.

        Args:
            sample: Raw location sample

        Returns:
            FilterDecision describing the outcome

        Raises:
            RuntimeError: If reset() has not been called
        """
        if self.last_point is None:
            raise RuntimeError("SampleFilter.offer() called before reset()")

        last = self.last_point
        d = distance_meters(last.latitude, last.longitude, sample.latitude, sample.longitude)

        if not math.isfinite(d):
            logger.debug(f"Dropped sample with non-finite distance at {sample.timestamp}")
            return FilterDecision(FilterReason.INVALID, 0.0)

        if d <= self.min_accept_m:
            logger.debug(f"Dropped jitter sample ({d:.2f} m)")
            return FilterDecision(FilterReason.JITTER, d)

        if d >= self.max_jump_m:
            logger.debug(f"Dropped implausible jump ({d:.1f} m)")
            return FilterDecision(FilterReason.JUMP, d)

        point = sample.to_point()
        self.last_point = point
        self.total_distance_m += d
        return FilterDecision(FilterReason.ACCEPTED, d, point)
