"""Periodic tick driving stats refresh between location samples."""

import logging
import threading
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class Ticker(Protocol):
    def start(self, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


class IntervalTicker:
    """
    Calls a callback every ``interval`` seconds on a daemon thread.

    cancel() returns immediately without joining, so it is safe to call while
    holding a lock the callback also takes. A callback already in flight may
    still run once; the session drops ticks that arrive outside TRACKING.
    """

    def __init__(self, interval: float = 1.0) -> None:
        self.interval = interval
        self._stop: threading.Event | None = None
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._stop is not None and not self._stop.is_set()

    def start(self, callback: Callable[[], None]) -> None:
        self.cancel()
        stop = threading.Event()
        self._stop = stop
        self._thread = threading.Thread(
            target=self._run,
            args=(stop, callback),
            name="hike-ticker",
            daemon=True,
        )
        self._thread.start()

    def cancel(self) -> None:
        if self._stop is not None:
            self._stop.set()
        self._stop = None
        self._thread = None

    def _run(self, stop: threading.Event, callback: Callable[[], None]) -> None:
        while not stop.wait(self.interval):
            try:
                callback()
            except Exception:
                logger.exception("Tick callback failed")
                stop.set()


class ManualTicker:
    """Ticker that never fires on its own; call fire() to tick."""

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def fire(self) -> None:
        if self._callback is not None:
            self._callback()
