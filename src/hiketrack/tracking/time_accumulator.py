"""Active-time bookkeeping across pause/resume cycles."""


class TimeAccumulator:
    """
    Tracks active duration, excluding paused intervals.

    Times are seconds from a single clock. The clock is assumed to be
    non-decreasing; clock skew is not corrected.
    """

    def __init__(self) -> None:
        self.session_start: float | None = None
        self.total_paused = 0.0
        self.pause_started: float | None = None
        self.stopped_at: float | None = None

    @property
    def is_paused(self) -> bool:
        return self.pause_started is not None

    def start(self, now: float) -> None:
        self.session_start = now
        self.total_paused = 0.0
        self.pause_started = None
        self.stopped_at = None

    def on_pause(self, now: float) -> None:
        if self.pause_started is None:
            self.pause_started = now

    def on_resume(self, now: float) -> None:
        if self.pause_started is not None:
            self.total_paused += max(0.0, now - self.pause_started)
            self.pause_started = None

    def freeze(self, now: float) -> None:
        """Pin the end of the session; elapsed time stops advancing."""
        if self.stopped_at is None:
            self.stopped_at = now

    def elapsed_active_seconds(self, now: float) -> float:
        """
        Seconds spent outside of pauses since start().

        An in-progress pause is excluded up to ``now`` (or the freeze time).
        """
        if self.session_start is None:
            return 0.0
        end = self.stopped_at if self.stopped_at is not None else now
        paused = self.total_paused
        if self.pause_started is not None:
            paused += max(0.0, end - self.pause_started)
        return max(0.0, end - self.session_start - paused)
