import logging
from fastapi import APIRouter, Depends, HTTPException

from venueguard.api.dependencies import get_venue_service
from venueguard.api.v1.models import (
    ErrorDetail,
    LocationRequest,
    LocationResponse,
    VenueRequest,
    VenueResponse,
)
from venueguard.core.exceptions import VenueError
from venueguard.services.venues import VenueService


logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/locations", response_model=LocationResponse)
async def normalize_location_api(
    request: LocationRequest,
    venue_service: VenueService = Depends(get_venue_service),
):
    """Validate coordinates and clamp the accuracy radius. Invalid points come back empty."""
    location = venue_service.normalize_location(
        latitude=request.latitude,
        longitude=request.longitude,
        horizontal_accuracy=request.horizontal_accuracy,
        access_hash=request.access_hash,
    )
    return LocationResponse(
        is_empty=location.is_empty,
        is_valid_map_point=location.is_valid_map_point(),
        location=location.to_payload(),
        geo_point=location.to_input_geo_point(),
    )


@router.post("/venues", response_model=VenueResponse)
async def create_venue_api(
    request: VenueRequest,
    venue_service: VenueService = Depends(get_venue_service),
):
    """Sanitize venue fields and return the venue with its wire projection."""
    location = venue_service.normalize_location(
        latitude=request.location.latitude,
        longitude=request.location.longitude,
        horizontal_accuracy=request.location.horizontal_accuracy,
        access_hash=request.location.access_hash,
    )
    try:
        venue = venue_service.create_venue(
            location=location,
            title=request.title,
            address=request.address,
            provider=request.provider,
            id=request.id,
            venue_type=request.type,
        )
    except VenueError as e:
        detail = ErrorDetail(message=str(e), field=e.field)
        raise HTTPException(status_code=400, detail=detail.model_dump())

    return VenueResponse(
        venue=venue.to_payload(),
        input_media_venue=venue.to_input_media_venue(),
    )
