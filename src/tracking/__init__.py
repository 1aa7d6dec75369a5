"""GPS run tracking core for runtrack."""

from .errors import (
    InvalidTransitionError,
    LocationError,
    LocationUnavailableError,
    RunStoreError,
    TrackFileError,
    TrackingError,
)
from .geo import haversine_km
from .session import RunTrackingSession
from .sources import LocationOptions, ManualLocationSource, ManualTicker
from .store import RunStore

__all__ = [
    "RunTrackingSession",
    "RunStore",
    "haversine_km",
    # Sources
    "LocationOptions",
    "ManualLocationSource",
    "ManualTicker",
    # Errors
    "TrackingError",
    "LocationUnavailableError",
    "LocationError",
    "InvalidTransitionError",
    "TrackFileError",
    "RunStoreError",
]
