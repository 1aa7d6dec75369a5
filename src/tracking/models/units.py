"""Unit conversion and formatting utilities for distance, pace and time."""

from enum import Enum


class UnitSystem(str, Enum):
    """Unit system for distance measurements."""

    METRIC = "metric"  # kilometers
    IMPERIAL = "imperial"  # miles


# Conversion constants
KM_TO_MILES = 0.621371
MILES_TO_KM = 1.609344


def km_to_miles(km: float) -> float:
    """
    Convert kilometers to miles.

    Args:
        km: Distance in kilometers

    Returns:
        Distance in miles
    """
    return km * KM_TO_MILES


def miles_to_km(miles: float) -> float:
    """Convert miles to kilometers."""
    return miles * MILES_TO_KM


def _unit_label(unit: UnitSystem) -> str:
    return "mi" if unit == UnitSystem.IMPERIAL else "km"


def format_pace(pace_min_per_unit: float | None, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """
    Format pace as M:SS per unit.

    A pace of None (no distance covered yet) renders as "--:--".

    Args:
        pace_min_per_unit: Pace in minutes per kilometer or mile
        unit: Unit system (for label only)

    Returns:
        Formatted pace string (e.g., "4:41 /km" or "7:32 /mi")
    """
    if pace_min_per_unit is None:
        return f"--:-- /{_unit_label(unit)}"
    minutes = int(pace_min_per_unit)
    seconds = int((pace_min_per_unit - minutes) * 60)
    return f"{minutes}:{seconds:02d} /{_unit_label(unit)}"


def format_distance(distance_km: float, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """
    Format a distance held in kilometers in the requested unit.

    Args:
        distance_km: Distance in kilometers
        unit: Unit system to display

    Returns:
        Formatted distance string (e.g., "8.43 km" or "5.24 mi")
    """
    if unit == UnitSystem.IMPERIAL:
        return f"{km_to_miles(distance_km):.2f} mi"
    return f"{distance_km:.2f} km"


def format_speed(speed_kmh: float, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """Format a speed held in km/h in the requested unit."""
    if unit == UnitSystem.IMPERIAL:
        return f"{km_to_miles(speed_kmh):.1f} mph"
    return f"{speed_kmh:.1f} km/h"


def format_elapsed(seconds: int) -> str:
    """
    Format a second count as HH:MM:SS.

    Hours are not wrapped, so a 25 hour session renders as "25:00:00".
    """
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def pace_for_unit(pace_min_per_km: float | None, unit: UnitSystem) -> float | None:
    """Convert a min/km pace to min per the display unit."""
    if pace_min_per_km is None or unit == UnitSystem.METRIC:
        return pace_min_per_km
    return pace_min_per_km / KM_TO_MILES
