"""Combines distance, time, altitude and speed into a StatsSnapshot."""

import math

from ..models import LocationSample, StatsSnapshot


def compute_pace(distance_m: float, duration_s: float) -> float | None:
    """
    Average pace in minutes per kilometer.

    Returns:
        Pace, or None when no distance has been covered yet
    """
    if distance_m <= 0 or not math.isfinite(distance_m) or not math.isfinite(duration_s):
        return None
    return (max(0.0, duration_s) / 60) / (distance_m / 1000)


class StatsEngine:
    """
    Holds the per-sample inputs (altitude, speed) and builds snapshots.

    Elevation gain is net gain above the session's initial altitude, floored at
    zero, not cumulative ascent. The highest net gain seen is kept so the value
    never decreases when the hiker descends again.
    """

    def __init__(self) -> None:
        self.initial_altitude: float | None = None
        self.current_altitude: float | None = None
        self.elevation_gain_m = 0.0
        self.current_speed_mps = 0.0

    def reset(self, initial: LocationSample | None = None) -> None:
        self.initial_altitude = None
        self.current_altitude = None
        self.elevation_gain_m = 0.0
        self.current_speed_mps = 0.0
        if initial is not None:
            self.observe(initial)

    def observe(self, sample: LocationSample) -> None:
        """Record altitude and speed from an accepted sample."""
        self.observe_altitude(sample)
        self.observe_speed(sample)

    def observe_altitude(self, sample: LocationSample) -> None:
        if sample.altitude is None or not math.isfinite(sample.altitude):
            return
        if self.initial_altitude is None:
            self.initial_altitude = sample.altitude
        self.current_altitude = sample.altitude
        gain = self.current_altitude - self.initial_altitude
        if gain > self.elevation_gain_m:
            self.elevation_gain_m = gain

    def observe_speed(self, sample: LocationSample) -> bool:
        """
        Take the reported speed of any incoming sample, filtered or not.

        Returns:
            True if the current speed changed
        """
        speed = sample.speed
        if speed is None or not math.isfinite(speed) or speed < 0:
            speed = 0.0
        changed = speed != self.current_speed_mps
        self.current_speed_mps = speed
        return changed

    def snapshot(self, distance_m: float, duration_s: float) -> StatsSnapshot:
        distance_m = max(0.0, distance_m)
        duration_s = max(0.0, duration_s)
        return StatsSnapshot(
            distance_meters=distance_m,
            duration_seconds=duration_s,
            pace_min_per_km=compute_pace(distance_m, duration_s),
            elevation_gain_meters=self.elevation_gain_m,
            current_speed_mps=self.current_speed_mps,
        )
