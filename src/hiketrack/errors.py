"""Exceptions raised by the hike tracking core and its persistence adapters."""


class HikeTrackError(Exception):
    """Base class for all hiketrack errors."""


class NoLocationError(HikeTrackError):
    """No location fix was available when tracking was started."""


class PermissionDeniedError(HikeTrackError):
    """Location permission was refused; the tracking attempt is abandoned."""


class PersistenceError(HikeTrackError):
    """A hike record could not be saved, loaded or deleted."""


class InvalidTransitionError(HikeTrackError):
    """A session operation was called from a state that does not allow it."""

    def __init__(self, operation: str, state: str, message: str | None = None) -> None:
        self.operation = operation
        self.state = state
        super().__init__(message or f"Cannot {operation}() while session is {state}")
