import logging

from venueguard.core.exceptions import VenueError
from venueguard.models.location import Location
from venueguard.models.venue import Text, Venue

logger = logging.getLogger(__name__)


class VenueService:
    """Validates locations and venues coming from API clients."""

    def normalize_location(
        self,
        latitude: float,
        longitude: float,
        horizontal_accuracy: float = 0.0,
        access_hash: int = 0,
    ) -> Location:
        location = Location.from_components(latitude, longitude, horizontal_accuracy, access_hash)
        if location.is_empty:
            logger.info(f"Coordinates lat={latitude}, lng={longitude} are out of range, using empty location")
        elif not location.is_valid_map_point():
            logger.info(f"Location lat={latitude} is valid but cannot be shown on a map")
        return location

    def create_venue(
        self,
        location: Location,
        title: Text,
        address: Text,
        provider: Text,
        id: Text,
        venue_type: Text,
    ) -> Venue:
        try:
            venue = Venue.validate_and_create(location, title, address, provider, id, venue_type)
        except VenueError as e:
            logger.warning(f"Venue rejected, field '{e.field}': {e}")
            raise

        logger.info(f"Validated venue provider='{venue.provider}', id='{venue.id}'")
        return venue
