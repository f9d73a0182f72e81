import math
from typing import Optional
from pydantic import BaseModel, Field

from venueguard.models.wire import (
    ACCURACY_RADIUS_MASK,
    GeoPoint,
    InputGeoPoint,
    InputGeoPointEmpty,
    LocationPayload,
)
from venueguard.validation.coordinates import (
    fix_accuracy,
    is_valid_coordinate,
    is_valid_map_latitude,
)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_valid_access_hash(access_hash: int) -> bool:
    return INT64_MIN <= access_hash <= INT64_MAX


class Location(BaseModel):
    """
    Geographic point with a horizontal accuracy radius.

    An empty location is a sentinel for "no usable point", not an error.
    Build instances with ``from_components`` (or ``empty``); the factory never
    fails and turns out-of-range or non-finite coordinates into the sentinel.
    """

    is_empty: bool = True
    latitude: float = Field(0.0, ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(0.0, ge=-180, le=180, allow_inf_nan=False)
    horizontal_accuracy: float = Field(0.0, ge=0, le=1500, allow_inf_nan=False)
    access_hash: int = Field(0, ge=INT64_MIN, le=INT64_MAX)

    class Config:
        frozen = True

    @classmethod
    def empty(cls) -> "Location":
        return cls()

    @classmethod
    def from_components(
        cls,
        latitude: float,
        longitude: float,
        horizontal_accuracy: float = 0.0,
        access_hash: int = 0,
    ) -> "Location":
        """
        Validate coordinates and build a location.

        Args:
            latitude: Degrees, must be finite and within [-90, 90]
            longitude: Degrees, must be finite and within [-180, 180]
            horizontal_accuracy: Meters, clamped into [0, 1500]
            access_hash: Opaque signed 64-bit token carried through unchanged

        Returns:
            A populated location, or the empty location if the coordinates
            are invalid or the access hash does not fit in 64 bits
        """
        if not is_valid_coordinate(latitude, longitude) or not is_valid_access_hash(access_hash):
            return cls.empty()

        return cls(
            is_empty=False,
            latitude=latitude,
            longitude=longitude,
            horizontal_accuracy=fix_accuracy(horizontal_accuracy),
            access_hash=access_hash,
        )

    @classmethod
    def from_api_location(
        cls, latitude: float, longitude: float, horizontal_accuracy: float = 0.0
    ) -> "Location":
        """Build from a client API location, which has no access hash."""
        return cls.from_components(latitude, longitude, horizontal_accuracy, 0)

    def is_valid_map_point(self) -> bool:
        """True if the point can be drawn on a Web Mercator map."""
        return not self.is_empty and is_valid_map_latitude(self.latitude)

    def with_access_hash(self, access_hash: int) -> "Location":
        """Copy with another access hash. Raises ValueError if it does not fit in 64 bits."""
        if not is_valid_access_hash(access_hash):
            raise ValueError(f"Access hash {access_hash} is out of int64 range")
        return self.model_copy(update={"access_hash": access_hash})

    def to_payload(self) -> Optional[LocationPayload]:
        if self.is_empty:
            return None
        return LocationPayload(
            latitude=self.latitude,
            longitude=self.longitude,
            horizontal_accuracy=self.horizontal_accuracy,
        )

    def to_input_geo_point(self) -> GeoPoint:
        if self.is_empty:
            return InputGeoPointEmpty()

        flags = 0
        accuracy_radius = None
        if self.horizontal_accuracy > 0:
            flags |= ACCURACY_RADIUS_MASK
            accuracy_radius = int(math.ceil(self.horizontal_accuracy))

        return InputGeoPoint(
            flags=flags,
            lat=self.latitude,
            long=self.longitude,
            accuracy_radius=accuracy_radius,
        )


def build_location(
    latitude: float,
    longitude: float,
    horizontal_accuracy: float = 0.0,
    access_hash: int = 0,
) -> Location:
    return Location.from_components(latitude, longitude, horizontal_accuracy, access_hash)
