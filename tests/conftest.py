"""Shared fixtures: fake clock, controllable location source and sink."""

from collections.abc import Callable

import pytest

from hiketrack.config import TrackingSettings
from hiketrack.models import LocationSample
from hiketrack.tracking import ManualTicker, TrackingSession

from .helpers import START_LAT, START_LON, FakeClock, FakeLocationSource, FakeSink, north_of


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(start=1_000.0)


@pytest.fixture
def start_fix() -> LocationSample:
    return LocationSample(latitude=START_LAT, longitude=START_LON, altitude=1200.0, timestamp=0.0)


@pytest.fixture
def source(start_fix: LocationSample) -> FakeLocationSource:
    return FakeLocationSource(start_fix)


@pytest.fixture
def sink() -> FakeSink:
    return FakeSink()


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture
def settings() -> TrackingSettings:
    return TrackingSettings()


@pytest.fixture
def session(
    source: FakeLocationSource,
    sink: FakeSink,
    clock: FakeClock,
    ticker: ManualTicker,
    settings: TrackingSettings,
) -> TrackingSession:
    return TrackingSession(source, sink, settings=settings, clock=clock, ticker=ticker, user_id="user-1")


@pytest.fixture
def walk_north() -> Callable[..., list[LocationSample]]:
    """Build samples stepping north from the start point."""

    def _walk(
        steps: int,
        step_m: float,
        start_lat: float = START_LAT,
        altitude: float | None = None,
        climb_per_step: float = 0.0,
        speed: float | None = 1.2,
    ) -> list[LocationSample]:
        samples = []
        lat = start_lat
        for i in range(1, steps + 1):
            lat = north_of(lat, step_m)
            alt = None if altitude is None else altitude + climb_per_step * i
            samples.append(
                LocationSample(
                    latitude=lat,
                    longitude=START_LON,
                    altitude=alt,
                    speed=speed,
                    timestamp=float(i),
                )
            )
        return samples

    return _walk
