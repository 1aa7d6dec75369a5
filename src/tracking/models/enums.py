"""Enumeration types for tracking models."""

from enum import Enum


class TrackingPhase(str, Enum):
    """Lifecycle phase of a tracking session."""

    IDLE = "idle"
    TRACKING = "tracking"
    PAUSED = "paused"


class LocationErrorCode(str, Enum):
    """Recoverable errors reported by a location source while tracking."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
