import logging
from typing import Optional, Union
from pydantic import BaseModel, Field

from venueguard.core.exceptions import (
    InvalidAddressError,
    InvalidIdError,
    InvalidLocationError,
    InvalidProviderError,
    InvalidTitleError,
    InvalidTypeError,
    InvalidUtf8Error,
)
from venueguard.models.location import Location
from venueguard.models.wire import InputMediaVenue, VenuePayload
from venueguard.validation.strings import MAX_STRING_LENGTH, clean_input_string

logger = logging.getLogger(__name__)

Text = Union[str, bytes, bytearray]


def _clean_field(value: Text, error_cls):
    try:
        return clean_input_string(value)
    except InvalidUtf8Error as e:
        logger.debug(f"Rejected venue {error_cls.field}: {e}")
        raise error_cls(f"Invalid venue {error_cls.field}: {e}") from e


class Venue(BaseModel):
    """
    A named place anchored to a location.

    ``validate_and_create`` is the entry point for untrusted input; ``new``
    stores trusted values as-is.
    """

    location: Location = Field(default_factory=Location.empty)
    title: str = Field("", max_length=MAX_STRING_LENGTH)
    address: str = Field("", max_length=MAX_STRING_LENGTH)
    provider: str = Field("", max_length=MAX_STRING_LENGTH)
    id: str = Field("", max_length=MAX_STRING_LENGTH)
    venue_type: str = Field("", max_length=MAX_STRING_LENGTH)

    class Config:
        frozen = True

    @classmethod
    def new(
        cls,
        location: Location,
        title: str,
        address: str,
        provider: str,
        id: str,
        venue_type: str,
    ) -> "Venue":
        """Build a venue from already validated data, without any checks."""
        return cls.model_construct(
            location=location,
            title=title,
            address=address,
            provider=provider,
            id=id,
            venue_type=venue_type,
        )

    @classmethod
    def validate_and_create(
        cls,
        location: Location,
        title: Text,
        address: Text,
        provider: Text,
        id: Text,
        venue_type: Text,
    ) -> "Venue":
        """
        Validate untrusted venue data.

        Args:
            location: Location of the venue, must not be empty
            title: Venue name
            address: Venue address
            provider: Venue database the id belongs to, e.g. "foursquare"
            id: Identifier of the venue in the provider database
            venue_type: Provider-specific venue category

        Returns:
            Venue holding the sanitized strings

        Raises:
            InvalidLocationError: If the location is empty
            InvalidTitleError, InvalidAddressError, InvalidProviderError,
            InvalidIdError, InvalidTypeError: If the field is not valid UTF-8
        """
        if location.is_empty:
            logger.debug("Rejected venue with empty location")
            raise InvalidLocationError("Venue must be non-empty")

        title = _clean_field(title, InvalidTitleError)
        address = _clean_field(address, InvalidAddressError)
        provider = _clean_field(provider, InvalidProviderError)
        id = _clean_field(id, InvalidIdError)
        venue_type = _clean_field(venue_type, InvalidTypeError)

        # Unreachable while Location is frozen; keeps the non-empty guarantee next to the return
        if location.is_empty:
            raise InvalidLocationError("Wrong venue location specified")

        return cls.new(location, title, address, provider, id, venue_type)

    def empty(self) -> bool:
        return self.location.is_empty

    def is_same_provider_id(self, other: "Venue") -> bool:
        """True if both venues name the same place in the same provider database."""
        return self.has_provider_id(other.provider, other.id)

    def has_provider_id(self, provider: str, id: str) -> bool:
        return self.provider == provider and self.id == id

    def with_location(self, location: Location) -> "Venue":
        return self.model_copy(update={"location": location})

    def to_payload(self) -> Optional[VenuePayload]:
        location = self.location.to_payload()
        if location is None:
            return None
        return VenuePayload(
            location=location,
            title=self.title,
            address=self.address,
            provider=self.provider,
            id=self.id,
            type=self.venue_type,
        )

    def to_input_media_venue(self) -> InputMediaVenue:
        return InputMediaVenue(
            geo_point=self.location.to_input_geo_point(),
            title=self.title,
            address=self.address,
            provider=self.provider,
            venue_id=self.id,
            venue_type=self.venue_type,
        )
