"""Position sample model delivered by a location source."""

from pydantic import BaseModel, Field


class GeoSample(BaseModel):
    """
    A single position fix from a location source.

    Field aliases follow the browser geolocation payload (lat/lng/timestamp),
    so recorded tracks can be loaded directly. Samples are taken as received:
    no ordering or duplicate checks are applied.
    """

    latitude: float = Field(
        description="Latitude in decimal degrees",
        alias="lat",
        ge=-90,
        le=90,
    )
    longitude: float = Field(
        description="Longitude in decimal degrees",
        alias="lng",
        ge=-180,
        le=180,
    )
    timestamp_millis: int = Field(
        description="Capture time in milliseconds",
        alias="timestamp",
    )
    altitude_meters: float | None = Field(
        default=None,
        description="Altitude in meters, absent if the device cannot report it",
        alias="altitude",
    )
    reported_speed_mps: float | None = Field(
        default=None,
        description="Device-reported speed in meters/second (informational only)",
        alias="speed",
    )

    model_config = {"populate_by_name": True, "frozen": True}
