from functools import lru_cache

from venueguard.services.venues import VenueService


@lru_cache()
def get_venue_service() -> VenueService:
    """Get VenueService instance."""
    return VenueService()
