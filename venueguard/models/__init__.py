from venueguard.models.location import Location, build_location
from venueguard.models.venue import Venue
from venueguard.models.wire import (
    InputGeoPoint,
    InputGeoPointEmpty,
    InputMediaVenue,
    LocationPayload,
    VenuePayload,
)

__all__ = [
    "InputGeoPoint",
    "InputGeoPointEmpty",
    "InputMediaVenue",
    "Location",
    "LocationPayload",
    "Venue",
    "VenuePayload",
    "build_location",
]
