"""Location source that replays recorded samples, for development and tests."""

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..errors import NoLocationError
from ..models import LocationSample
from .ports import LocationCallback, SubscriptionOptions

logger = logging.getLogger(__name__)

_samples_adapter = TypeAdapter(list[LocationSample])


def load_samples(path: str | Path) -> list[LocationSample]:
    """
    Load recorded samples from a JSON file.

    The file holds a JSON array of objects with ``latitude``, ``longitude`` and
    optional ``altitude``, ``speed`` and ``timestamp`` keys. Samples are sorted
    by timestamp.

    Args:
        path: Path to the JSON file

    Returns:
        Samples in chronological order

    Raises:
        NoLocationError: If the file cannot be read or holds no samples
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw: Any = json.load(f)
        samples = _samples_adapter.validate_python(raw)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to load samples from {path}: {e}")
        raise NoLocationError(f"Could not read samples from {path}") from e

    if not samples:
        raise NoLocationError(f"No samples in {path}")

    samples.sort(key=lambda s: s.timestamp)
    logger.info(f"Loaded {len(samples)} samples from {path}")
    return samples


class ReplayLocationSource:
    """
    Replays a fixed list of samples.

    The first sample is the "current location" reported before tracking
    starts; the rest are delivered by emit() or play() to whoever is
    subscribed. Samples emitted while nobody is subscribed are lost, just as a
    real GPS stream would not buffer them.

    Args:
        samples: Recorded samples, first one is the starting fix
        permission_granted: Simulate the user's permission answer
    """

    def __init__(self, samples: Iterable[LocationSample], permission_granted: bool = True) -> None:
        self._samples = list(samples)
        self._cursor = 1 if self._samples else 0
        self.permission_granted = permission_granted
        self.last_options: SubscriptionOptions | None = None
        self._callback: LocationCallback | None = None
        self._handle = 0
        self._now: float | None = None
        self.subscribe_count = 0

    @property
    def subscribed(self) -> bool:
        return self._callback is not None

    @property
    def remaining(self) -> int:
        return len(self._samples) - self._cursor

    def request_permission(self) -> bool:
        return self.permission_granted

    def current_location(self) -> LocationSample | None:
        if not self._samples:
            return None
        return self._samples[max(0, self._cursor - 1)]

    def subscribe(self, options: SubscriptionOptions, callback: LocationCallback) -> int:
        if self._callback is not None:
            raise RuntimeError("Replay source already has a subscriber")
        self._handle += 1
        self._callback = callback
        self.last_options = options
        self.subscribe_count += 1
        return self._handle

    def unsubscribe(self, handle: Any) -> None:
        if handle == self._handle:
            self._callback = None

    def clock(self) -> float:
        """Replay time: timestamp of the most recent sample, or a later advance_to()."""
        if self._now is None:
            first = self.current_location()
            return first.timestamp if first is not None else 0.0
        return self._now

    def advance_to(self, timestamp: float) -> None:
        """Move replay time forward without delivering a sample."""
        if self._now is None or timestamp > self._now:
            self._now = timestamp

    def peek(self) -> LocationSample | None:
        if self._cursor >= len(self._samples):
            return None
        return self._samples[self._cursor]

    def emit(self) -> LocationSample | None:
        """Deliver the next sample; returns it, or None when exhausted."""
        sample = self.peek()
        if sample is None:
            return None
        self._cursor += 1
        self.advance_to(sample.timestamp)
        if self._callback is not None:
            self._callback(sample)
        return sample

    def play(self) -> Iterator[LocationSample]:
        """Deliver samples one by one, yielding each after delivery."""
        while True:
            sample = self.emit()
            if sample is None:
                return
            yield sample
