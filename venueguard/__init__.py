"""Sanitization and validation of venue data before it reaches the wire."""
from venueguard.core.exceptions import (
    InvalidAddressError,
    InvalidIdError,
    InvalidLocationError,
    InvalidProviderError,
    InvalidTitleError,
    InvalidTypeError,
    InvalidUtf8Error,
    VenueError,
    VenueGuardError,
)
from venueguard.models import Location, Venue, build_location
from venueguard.validation import clean_input_string

__version__ = "0.1.0"

__all__ = [
    "InvalidAddressError",
    "InvalidIdError",
    "InvalidLocationError",
    "InvalidProviderError",
    "InvalidTitleError",
    "InvalidTypeError",
    "InvalidUtf8Error",
    "Location",
    "Venue",
    "VenueError",
    "VenueGuardError",
    "build_location",
    "clean_input_string",
]
