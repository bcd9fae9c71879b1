"""Value types for the public API."""

from pydantic import BaseModel, Field


class Location(BaseModel):
    """Observer position on the WGS84 ellipsoid, east-positive longitude."""
    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees")

    class Config:
        frozen = True
