from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from checkin_app.core.config import settings
from checkin_app.core.dependencies import get_geo_search, get_venue_service
from checkin_app.schemas.venue import VenueCreate, VenueResponse
from checkin_app.services import GeoSearchEngine, VenueService

router = APIRouter()

@router.get("/search", response_model=List[VenueResponse])
def search_venues(
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius: float = Query(settings.DEFAULT_SEARCH_RADIUS_KM, gt=0, le=settings.MAX_SEARCH_RADIUS_KM, description="Radius in kilometers"),
    category: Optional[str] = Query(None),
    query: Optional[str] = Query(None),
    engine: GeoSearchEngine = Depends(get_geo_search)
):
    """
    Search venues near a point, nearest first
    """
    return engine.search(latitude, longitude, radius_km=radius, category=category, query=query)

@router.post("/", response_model=VenueResponse, status_code=201)
def create_venue(
    venue: VenueCreate,
    service: VenueService = Depends(get_venue_service)
):
    """
    Create a venue
    """
    return service.create_venue(venue)

@router.get("/{venue_id}", response_model=VenueResponse)
def get_venue(
    venue_id: int,
    service: VenueService = Depends(get_venue_service)
):
    """
    Get a venue by id
    """
    return service.get_venue(venue_id)
