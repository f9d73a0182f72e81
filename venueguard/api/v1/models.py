from typing import Optional
from pydantic import BaseModel, Field

from venueguard.models.location import INT64_MAX, INT64_MIN
from venueguard.models.wire import GeoPoint, InputMediaVenue, LocationPayload, VenuePayload


# Request Models
class LocationRequest(BaseModel):
    latitude: float = Field(..., description="Latitude coordinate")
    longitude: float = Field(..., description="Longitude coordinate")
    horizontal_accuracy: float = Field(0.0, description="Accuracy radius in meters")
    access_hash: int = Field(
        0, ge=INT64_MIN, le=INT64_MAX, description="Opaque signed 64-bit access hash of the location"
    )


class VenueRequest(BaseModel):
    location: LocationRequest
    title: str = Field(..., description="Venue name")
    address: str = Field("", description="Venue address")
    provider: str = Field("", description="Venue provider, e.g. 'foursquare' or 'gplaces'")
    id: str = Field("", description="Venue identifier in the provider database")
    type: str = Field("", description="Provider-specific venue type")


# Response Models
class LocationResponse(BaseModel):
    is_empty: bool
    is_valid_map_point: bool
    location: Optional[LocationPayload] = None
    geo_point: GeoPoint = Field(..., discriminator="type")


class VenueResponse(BaseModel):
    venue: VenuePayload
    input_media_venue: InputMediaVenue


class ErrorDetail(BaseModel):
    message: str
    field: str
