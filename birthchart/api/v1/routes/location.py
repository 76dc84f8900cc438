from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Query

from birthchart.api.dependencies import get_location_service
from birthchart.services.location_service import LocationService

router = APIRouter()


@router.get(
    "/locations/search",
    response_model=List[Dict[str, Any]],
    summary="Search the gazetteer for cities and their coordinates",
)
async def search_locations(
    q: str = Query(..., description="Search query for city name (e.g., 'san', 'new york')"),
    limit: int = Query(10, ge=1, le=50),
    service: LocationService = Depends(get_location_service),
):
    """
    Search for a city by name. Returns gazetteer entries whose name
    contains the query, with their display name and coordinates.

    Queries shorter than two characters return an empty list.
    """
    return service.search_cities(query=q, limit=limit)
