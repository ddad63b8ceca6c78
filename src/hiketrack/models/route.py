"""Route point and raw location sample models."""

from pydantic import BaseModel, ConfigDict, Field


class RoutePoint(BaseModel):
    """
    A single accepted point on a hike's route.

    Route points are appended in chronological order and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(description="Latitude in decimal degrees", ge=-90, le=90)
    longitude: float = Field(description="Longitude in decimal degrees", ge=-180, le=180)


class LocationSample(BaseModel):
    """
    A raw GPS reading as delivered by the location source.

    Samples are transient: the session keeps only the ones the filter accepts,
    and only as RoutePoints.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(description="Latitude in decimal degrees", ge=-90, le=90)
    longitude: float = Field(description="Longitude in decimal degrees", ge=-180, le=180)
    altitude: float | None = Field(
        default=None,
        description="Altitude above sea level (meters), if the device reports one",
    )
    speed: float | None = Field(
        default=None,
        description="Device-reported speed (m/s); some platforms use -1 when unknown",
    )
    timestamp: float = Field(
        default=0.0,
        description="Time of the reading (Unix epoch seconds)",
    )

    def to_point(self) -> RoutePoint:
        """Strip the sample down to the coordinates kept on the route."""
        return RoutePoint(latitude=self.latitude, longitude=self.longitude)
