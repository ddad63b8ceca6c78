"""GPS hike-tracking core."""

from .ports import AccuracyTier, HikeRecordSink, LocationSource, SubscriptionOptions
from .replay import ReplayLocationSource, load_samples
from .sample_filter import FilterDecision, FilterReason, SampleFilter
from .session import SessionState, TrackingSession
from .stats_engine import StatsEngine, compute_pace
from .ticker import IntervalTicker, ManualTicker
from .time_accumulator import TimeAccumulator

__all__ = [
    "AccuracyTier",
    "FilterDecision",
    "FilterReason",
    "HikeRecordSink",
    "IntervalTicker",
    "LocationSource",
    "ManualTicker",
    "ReplayLocationSource",
    "SampleFilter",
    "SessionState",
    "StatsEngine",
    "SubscriptionOptions",
    "TimeAccumulator",
    "TrackingSession",
    "compute_pace",
    "load_samples",
]
