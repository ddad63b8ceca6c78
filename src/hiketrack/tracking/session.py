"""GPS hike-tracking session: state machine, event inbox and record hand-off."""

import logging
import threading
import time
import weakref
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from ..config import TrackingSettings, get_tracking_settings
from ..errors import (
    InvalidTransitionError,
    NoLocationError,
    PermissionDeniedError,
    PersistenceError,
)
from ..models import HikeRecord, LocationSample, RoutePoint, StatsSnapshot
from .ports import HikeRecordSink, LocationSource, SubscriptionOptions
from .sample_filter import SampleFilter
from .stats_engine import StatsEngine
from .ticker import IntervalTicker, Ticker
from .time_accumulator import TimeAccumulator

logger = logging.getLogger(__name__)

PointListener = Callable[[RoutePoint, Sequence[RoutePoint]], None]
StatsListener = Callable[[StatsSnapshot], None]

# Session currently tracking or paused on each location source, keyed by id(source)
_active_sessions: "weakref.WeakValueDictionary[int, TrackingSession]" = (
    weakref.WeakValueDictionary()
)
_active_lock = threading.Lock()


class SessionState(str, Enum):
    IDLE = "idle"
    TRACKING = "tracking"
    PAUSED = "paused"
    STOPPED = "stopped"
    SAVED = "saved"
    DISCARDED = "discarded"


@dataclass(frozen=True)
class _LocationEvent:
    sample: LocationSample
    generation: int


@dataclass(frozen=True)
class _TickEvent:
    generation: int


class TrackingSession:
    """
    One hike-tracking attempt.

    Location callbacks and timer ticks arrive on their own threads; both are
    posted to a single inbox and applied one at a time under the session lock.
    Every subscribe/unsubscribe bumps a generation counter, and events from an
    older generation (or arriving outside TRACKING) are dropped, so nothing
    mutates the session after pause() or stop() returns.

    Usage:
        session = TrackingSession(source, sink)
        session.start()
        ...
        if session.stop() is SessionState.STOPPED:
            session.save()

    Args:
        location_source: GPS stream to subscribe to
        sink: Where finished hikes are saved; save() fails without one
        settings: Thresholds (defaults to environment-loaded TrackingSettings)
        clock: Monotonic seconds used for duration accounting
        now: Wall-clock used to date the saved record
        ticker: Periodic stats refresh (defaults to a 1 s IntervalTicker)
        user_id: Owner stamped on the saved record
        on_point: Called with each accepted point and the full route
        on_stats: Called with every recomputed StatsSnapshot
    """

    def __init__(
        self,
        location_source: LocationSource,
        sink: HikeRecordSink | None,
        settings: TrackingSettings | None = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] | None = None,
        ticker: Ticker | None = None,
        user_id: str | None = None,
        on_point: PointListener | None = None,
        on_stats: StatsListener | None = None,
    ) -> None:
        self.settings = settings or get_tracking_settings()
        self._source = location_source
        self._sink = sink
        self._clock = clock
        self._now = now or (lambda: datetime.now(UTC))
        self._ticker = ticker or IntervalTicker(self.settings.tick_interval_seconds)
        self._user_id = user_id
        self._on_point = on_point
        self._on_stats = on_stats

        self._filter = SampleFilter(
            min_accept_m=self.settings.min_accept_distance_m,
            max_jump_m=self.settings.max_jump_distance_m,
        )
        self._timer = TimeAccumulator()
        self._engine = StatsEngine()

        self._state = SessionState.IDLE
        self._route: list[RoutePoint] = []
        self._stats = StatsSnapshot()
        self._record: HikeRecord | None = None
        self._saving = False

        self._lock = threading.RLock()
        self._inbox: deque[_LocationEvent | _TickEvent] = deque()
        self._generation = 0
        self._subscription: object | None = None

    # ------------------------------------------------------------------
    # Read-only properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def route(self) -> tuple[RoutePoint, ...]:
        with self._lock:
            return tuple(self._route)

    @property
    def stats(self) -> StatsSnapshot:
        return self._stats

    @property
    def pending_record(self) -> HikeRecord | None:
        """Record built by the last failed save(), kept for retry."""
        return self._record

    @property
    def is_saving(self) -> bool:
        return self._saving

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> None:
        """
        Begin tracking from the current location.

        Raises:
            InvalidTransitionError: If the session is not IDLE, or another
                session is already tracking on the same location source
            PermissionDeniedError: If location permission is refused
            NoLocationError: If no current fix is available
        """
        with self._lock:
            self._require("start", SessionState.IDLE)
            self._claim_source()
            try:
                self._begin()
            except Exception:
                self._release_source()
                raise

    def _begin(self) -> None:
        if not self._source.request_permission():
            logger.warning("Location permission denied, tracking not started")
            raise PermissionDeniedError("Location permission not granted")

        fix = self._source.current_location()
        if fix is None:
            logger.warning("No location fix available, tracking not started")
            raise NoLocationError("Could not get current location")

        seed = fix.to_point()
        self._route = [seed]
        self._filter.reset(seed)
        self._engine.reset(fix)
        self._timer.start(self._clock())
        self._record = None
        self._stats = self._engine.snapshot(0.0, 0.0)

        self._state = SessionState.TRACKING
        try:
            self._listen()
        except Exception:
            self._unlisten()
            self._clear()
            self._state = SessionState.IDLE
            raise

        logger.info(f"Tracking started at ({seed.latitude:.6f}, {seed.longitude:.6f})")
        self._emit_point(seed)
        self._emit_stats()

    def pause(self) -> None:
        with self._lock:
            self._require("pause", SessionState.TRACKING)
            self._unlisten()
            self._timer.on_pause(self._clock())
            self._refresh()
            self._state = SessionState.PAUSED
            logger.info(f"Tracking paused at {self._stats.duration_seconds:.0f}s")

    def resume(self) -> None:
        with self._lock:
            self._require("resume", SessionState.PAUSED)
            now = self._clock()
            self._timer.on_resume(now)
            self._state = SessionState.TRACKING
            try:
                self._listen()
            except Exception:
                self._unlisten()
                self._timer.on_pause(now)
                self._state = SessionState.PAUSED
                raise
            logger.info("Tracking resumed")

    def stop(self) -> SessionState:
        """
        End tracking.

        Short sessions (too few points or too little distance) go straight to
        DISCARDED; there is nothing to save.

        Returns:
            SessionState.STOPPED or SessionState.DISCARDED
        """
        with self._lock:
            self._require("stop", SessionState.TRACKING, SessionState.PAUSED)
            self._unlisten()
            self._release_source()
            self._timer.freeze(self._clock())
            self._refresh()

            points = len(self._route)
            distance = self._filter.total_distance_m
            if points <= self.settings.min_save_points or distance <= self.settings.min_save_distance_m:
                logger.info(f"Session too short to save ({points} points, {distance:.1f} m), discarding")
                self._clear()
                self._state = SessionState.DISCARDED
            else:
                logger.info(f"Tracking stopped ({points} points, {distance:.1f} m)")
                self._state = SessionState.STOPPED
            return self._state

    def save(self) -> str:
        """
        Hand the finished hike to the sink.

        The record is built once; a retry after a failure re-sends the same id
        and date.

        Returns:
            Id returned by the sink

        Raises:
            InvalidTransitionError: If not STOPPED or a save is already running
            PersistenceError: If the sink fails (session stays STOPPED)
        """
        with self._lock:
            self._require("save", SessionState.STOPPED)
            if self._saving:
                raise InvalidTransitionError("save", "saving")
            if self._sink is None:
                raise PersistenceError("No hike record sink configured")
            sink = self._sink
            if self._record is None:
                self._record = HikeRecord(
                    user_id=self._user_id,
                    date=self._now(),
                    route_coordinates=list(self._route),
                    stats=self._stats,
                )
            record = self._record
            self._saving = True

        try:
            saved_id = sink.save(record)
        except PersistenceError:
            logger.error(f"Failed to save hike {record.id}, keeping it for retry")
            raise
        except Exception as e:
            logger.error(f"Failed to save hike {record.id}: {e}")
            raise PersistenceError(f"Could not save hike {record.id}") from e
        finally:
            with self._lock:
                self._saving = False

        with self._lock:
            self._clear()
            self._state = SessionState.SAVED
        logger.info(f"Hike saved as {saved_id}")
        return saved_id

    def discard(self) -> None:
        with self._lock:
            self._require("discard", SessionState.STOPPED)
            if self._saving:
                raise InvalidTransitionError("discard", "saving")
            self._clear()
            self._state = SessionState.DISCARDED
            logger.info("Hike discarded")

    # ------------------------------------------------------------------
    # Event inbox
    # ------------------------------------------------------------------

    def _post(self, event: _LocationEvent | _TickEvent) -> None:
        self._inbox.append(event)
        with self._lock:
            while self._inbox:
                self._apply(self._inbox.popleft())

    def _apply(self, event: _LocationEvent | _TickEvent) -> None:
        if self._state is not SessionState.TRACKING or event.generation != self._generation:
            logger.debug(f"Dropped stale {type(event).__name__} while {self._state.value}")
            return

        if isinstance(event, _TickEvent):
            self._refresh()
            return

        speed_changed = self._engine.observe_speed(event.sample)
        decision = self._filter.offer(event.sample)
        if not decision.accepted or decision.point is None:
            if speed_changed:
                self._refresh()
            return

        self._route.append(decision.point)
        self._engine.observe_altitude(event.sample)
        self._refresh()
        self._emit_point(decision.point)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require(self, operation: str, *allowed: SessionState) -> None:
        if self._state not in allowed:
            raise InvalidTransitionError(operation, self._state.value)

    def _claim_source(self) -> None:
        with _active_lock:
            owner = _active_sessions.get(id(self._source))
            if owner is not None and owner is not self:
                message = (
                    f"Cannot start() while another session is {owner.state.value} "
                    "on this location source"
                )
                logger.error(message)
                raise InvalidTransitionError("start", self._state.value, message)
            _active_sessions[id(self._source)] = self

    def _release_source(self) -> None:
        with _active_lock:
            if _active_sessions.get(id(self._source)) is self:
                del _active_sessions[id(self._source)]

    def _listen(self) -> None:
        self._generation += 1
        generation = self._generation
        options = SubscriptionOptions(
            min_distance_m=self.settings.location_min_distance_m,
            min_interval_ms=self.settings.location_min_interval_ms,
        )
        self._subscription = self._source.subscribe(
            options, lambda sample: self._post(_LocationEvent(sample, generation))
        )
        self._ticker.start(lambda: self._post(_TickEvent(generation)))

    def _unlisten(self) -> None:
        self._generation += 1
        self._ticker.cancel()
        if self._subscription is not None:
            handle, self._subscription = self._subscription, None
            self._source.unsubscribe(handle)

    def _refresh(self) -> None:
        self._stats = self._engine.snapshot(
            self._filter.total_distance_m,
            self._timer.elapsed_active_seconds(self._clock()),
        )
        self._emit_stats()

    def _clear(self) -> None:
        self._route = []
        self._record = None
        self._stats = StatsSnapshot()
        self._inbox.clear()

    def _emit_point(self, point: RoutePoint) -> None:
        if self._on_point is not None:
            self._on_point(point, tuple(self._route))

    def _emit_stats(self) -> None:
        if self._on_stats is not None:
            self._on_stats(self._stats)
