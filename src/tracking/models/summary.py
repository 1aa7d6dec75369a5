"""Session output models: live snapshot and finalized run summary."""

from pydantic import BaseModel, Field

from .enums import TrackingPhase
from .sample import GeoSample


class TrackSnapshot(BaseModel):
    """Point-in-time view of a tracking session for display."""

    phase: TrackingPhase
    elapsed_seconds: int = Field(ge=0)
    formatted_elapsed: str
    distance_km: float = Field(ge=0)
    current_speed_kmh: float = Field(ge=0)
    max_speed_kmh: float = Field(ge=0)
    elevation_gain_m: float = Field(ge=0)
    sample_count: int = Field(ge=0)
    current_pace_min_per_km: float | None = Field(
        default=None,
        description="Minutes per km so far; None until some distance is covered",
    )
    last_warning: str | None = None

    model_config = {"frozen": True}


class RunSummary(BaseModel):
    """
    Finalized result of one tracking session.

    All distances are in kilometers, speeds in km/h, elevation in meters.
    """

    total_distance_km: float = Field(
        description="Total accumulated distance in kilometers",
        ge=0,
    )
    total_duration_minutes: int = Field(
        description="Elapsed tracking time truncated to whole minutes",
        ge=0,
    )
    elapsed_seconds: int = Field(
        description="Elapsed tracking time in seconds, excluding pauses",
        ge=0,
    )
    route: list[GeoSample] = Field(
        default_factory=list,
        description="Every sample received during the session, in arrival order",
    )
    elevation_gain_m: float = Field(
        description="Sum of positive altitude changes in meters",
        ge=0,
    )
    max_speed_kmh: float = Field(
        description="Highest speed derived between consecutive samples",
        ge=0,
    )
    average_speed_kmh: float = Field(
        description="Distance over elapsed time, 0 when no time elapsed",
        ge=0,
    )

    model_config = {"frozen": True}
