"""Records handed to the wire encoder and to client-facing API objects."""
from typing import Literal, Optional, Union
from pydantic import BaseModel, Field

ACCURACY_RADIUS_MASK = 1


class InputGeoPointEmpty(BaseModel):
    type: Literal["inputGeoPointEmpty"] = "inputGeoPointEmpty"

    class Config:
        frozen = True


class InputGeoPoint(BaseModel):
    type: Literal["inputGeoPoint"] = "inputGeoPoint"
    flags: int = 0
    lat: float
    long: float
    accuracy_radius: Optional[int] = None

    class Config:
        frozen = True


GeoPoint = Union[InputGeoPointEmpty, InputGeoPoint]


class InputMediaVenue(BaseModel):
    geo_point: GeoPoint = Field(..., discriminator="type")
    title: str
    address: str
    provider: str
    venue_id: str
    venue_type: str

    class Config:
        frozen = True


class LocationPayload(BaseModel):
    latitude: float
    longitude: float
    horizontal_accuracy: float = 0.0

    class Config:
        frozen = True


class VenuePayload(BaseModel):
    location: LocationPayload
    title: str
    address: str
    provider: str
    id: str
    type: str

    class Config:
        frozen = True
