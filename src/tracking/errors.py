"""Exception types raised by the tracking core."""

from .models.enums import LocationErrorCode


class TrackingError(Exception):
    """Base class for all runtrack errors."""


class LocationUnavailableError(TrackingError):
    """The host cannot provide location services at all."""

    def __init__(self, message: str = "GPS is not available on this device") -> None:
        super().__init__(message)


class InvalidTransitionError(TrackingError):
    """A lifecycle call was made from a phase that does not allow it."""


class LocationError(TrackingError):
    """
    Recoverable error reported by a location source while tracking.

    These never stop a session; the session records them as a warning
    and keeps waiting for samples.
    """

    MESSAGES = {
        LocationErrorCode.PERMISSION_DENIED: "Location permission denied. Check your settings.",
        LocationErrorCode.POSITION_UNAVAILABLE: "Position unavailable. Waiting for a GPS fix.",
        LocationErrorCode.TIMEOUT: "Timed out waiting for a GPS fix.",
    }

    def __init__(self, code: LocationErrorCode, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or self.MESSAGES[code])


class TrackFileError(TrackingError):
    """A recorded track file could not be read or parsed."""


class RunStoreError(TrackingError):
    """The run store could not be read, written, or lacks the requested run."""
