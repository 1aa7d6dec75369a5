"""Stored run record built from a finished tracking session."""

import uuid
from datetime import date

from pydantic import BaseModel, Field

from .sample import GeoSample
from .summary import RunSummary

# Rough energy estimate used by the run log: kcal per km
CALORIES_PER_KM = 60


class Run(BaseModel):
    """A completed run as kept in the local run log."""

    run_id: str = Field(
        default_factory=lambda: uuid.uuid4().hex,
        description="Unique identifier for the run",
        alias="id",
    )
    run_date: date = Field(
        default_factory=date.today,
        description="Date the run took place",
        alias="date",
    )
    distance_km: float = Field(
        description="Total distance in kilometers",
        alias="distance",
        ge=0,
    )
    duration_minutes: int = Field(
        description="Total duration in whole minutes",
        alias="duration",
        ge=0,
    )
    pace_min_per_km: float = Field(
        default=0.0,
        description="Average pace in minutes per kilometer",
        alias="pace",
        ge=0,
    )
    calories: int | None = Field(
        default=None,
        description="Estimated energy expenditure in kcal",
        ge=0,
    )
    notes: str | None = Field(
        default=None,
        description="User description of the run",
        max_length=800,
    )
    route: list[GeoSample] | None = Field(
        default=None,
        description="Recorded GPS route",
        alias="gpsRoute",
    )
    elevation_gain_m: float | None = Field(
        default=None,
        description="Elevation gain in meters",
        alias="elevationGain",
        ge=0,
    )
    max_speed_kmh: float | None = Field(
        default=None,
        description="Maximum speed in km/h",
        alias="maxSpeed",
        ge=0,
    )
    avg_speed_kmh: float | None = Field(
        default=None,
        description="Average speed in km/h",
        alias="avgSpeed",
        ge=0,
    )
    is_public: bool = Field(
        default=False,
        description="Whether the run is shared publicly",
        alias="isPublic",
    )
    share_url: str | None = Field(
        default=None,
        description="Public link when the run is shared",
        alias="shareUrl",
    )

    model_config = {"populate_by_name": True}

    @staticmethod
    def calculate_pace(distance_km: float, duration_minutes: float) -> float:
        """Average pace in min/km, 0 when no distance was covered."""
        if distance_km > 0:
            return duration_minutes / distance_km
        return 0.0

    @classmethod
    def from_summary(
        cls,
        summary: RunSummary,
        notes: str | None = None,
        run_date: date | None = None,
    ) -> "Run":
        """Build a run log entry from a finished session summary."""
        return cls(
            run_date=run_date or date.today(),
            distance_km=summary.total_distance_km,
            duration_minutes=summary.total_duration_minutes,
            pace_min_per_km=cls.calculate_pace(
                summary.total_distance_km, summary.total_duration_minutes
            ),
            calories=round(summary.total_distance_km * CALORIES_PER_KM),
            notes=notes,
            route=list(summary.route),
            elevation_gain_m=summary.elevation_gain_m,
            max_speed_kmh=summary.max_speed_kmh,
            avg_speed_kmh=summary.average_speed_kmh,
        )

    @classmethod
    def from_entry(
        cls,
        distance_km: float,
        duration_minutes: int,
        notes: str | None = None,
        run_date: date | None = None,
    ) -> "Run":
        """
        Build a run log entry typed in by hand.

        Raises:
            ValueError: If distance or duration is not positive
        """
        if distance_km <= 0 or duration_minutes <= 0:
            raise ValueError("Distance and duration must both be greater than zero")
        return cls(
            run_date=run_date or date.today(),
            distance_km=distance_km,
            duration_minutes=duration_minutes,
            pace_min_per_km=cls.calculate_pace(distance_km, duration_minutes),
            calories=round(distance_km * CALORIES_PER_KM),
            notes=notes,
        )
