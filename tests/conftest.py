import pytest

from venueguard.models.location import Location
from venueguard.services.venues import VenueService


@pytest.fixture
def moscow() -> Location:
    """Red Square, Moscow, with a 10 m accuracy radius."""
    return Location.from_components(55.7558, 37.6173, 10.0, 0)


@pytest.fixture
def venue_service() -> VenueService:
    return VenueService()
