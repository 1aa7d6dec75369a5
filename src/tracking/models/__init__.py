"""Data models for runtrack."""

from .enums import LocationErrorCode, TrackingPhase
from .run import Run
from .sample import GeoSample
from .summary import RunSummary, TrackSnapshot
from .units import (
    UnitSystem,
    format_distance,
    format_elapsed,
    format_pace,
    format_speed,
    km_to_miles,
    miles_to_km,
    pace_for_unit,
)

__all__ = [
    # Session models
    "GeoSample",
    "TrackSnapshot",
    "RunSummary",
    # Stored records
    "Run",
    # Enums
    "TrackingPhase",
    "LocationErrorCode",
    # Units
    "UnitSystem",
    "km_to_miles",
    "miles_to_km",
    "format_distance",
    "format_elapsed",
    "format_pace",
    "format_speed",
    "pace_for_unit",
]
