"""Test doubles shared across the suite."""

import math
from collections.abc import Callable
from typing import Any

from hiketrack.errors import PersistenceError
from hiketrack.geo import EARTH_RADIUS_M
from hiketrack.models import HikeRecord, LocationSample
from hiketrack.tracking import SubscriptionOptions

START_LAT = 46.5580
START_LON = 7.8350
METERS_PER_DEGREE_LAT = EARTH_RADIUS_M * math.pi / 180


def north_of(lat: float, meters: float) -> float:
    """Latitude exactly ``meters`` north along a meridian."""
    return lat + meters / METERS_PER_DEGREE_LAT


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeLocationSource:
    """Location source whose samples are pushed by the test."""

    def __init__(self, fix: LocationSample | None, permission: bool = True) -> None:
        self.fix = fix
        self.permission = permission
        self.callback: Callable[[LocationSample], None] | None = None
        self.options: SubscriptionOptions | None = None
        self.subscribe_calls = 0
        self.unsubscribe_calls = 0
        self._handle = 0
        self.stale_callbacks: list[Callable[[LocationSample], None]] = []

    def request_permission(self) -> bool:
        return self.permission

    def current_location(self) -> LocationSample | None:
        return self.fix

    def subscribe(self, options: SubscriptionOptions, callback: Any) -> int:
        if self.callback is not None:
            raise RuntimeError("Location source already has a subscriber")
        self._handle += 1
        self.callback = callback
        self.options = options
        self.subscribe_calls += 1
        return self._handle

    def unsubscribe(self, handle: Any) -> None:
        if self.callback is not None:
            self.stale_callbacks.append(self.callback)
        self.callback = None
        self.unsubscribe_calls += 1

    @property
    def subscribed(self) -> bool:
        return self.callback is not None

    def push(self, sample: LocationSample) -> None:
        if self.callback is not None:
            self.callback(sample)


class FakeSink:
    """In-memory sink that can be told to fail."""

    def __init__(self) -> None:
        self.records: dict[str, HikeRecord] = {}
        self.fail = False
        self.save_calls = 0

    def save(self, record: HikeRecord) -> str:
        self.save_calls += 1
        if self.fail:
            raise PersistenceError("backend unavailable")
        self.records[record.id] = record
        return record.id

    def list(self, user_id: str | None = None) -> list[HikeRecord]:
        records = [r for r in self.records.values() if user_id is None or r.user_id == user_id]
        return sorted(records, key=lambda r: r.date, reverse=True)

    def get(self, record_id: str) -> HikeRecord | None:
        return self.records.get(record_id)

    def delete(self, record_id: str) -> None:
        self.records.pop(record_id, None)


