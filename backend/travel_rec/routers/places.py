"""Google Places proxy router."""

from fastapi import APIRouter, HTTPException, Query

from travel_rec.services.places_client import places_client

router = APIRouter()


@router.get("/search")
async def search_places(
    location: str = Query(..., description="lat,lng"),
    radius: int | None = Query(None, gt=0, le=50000),
    type: str | None = None,
):
    return await places_client.nearby_search(location, radius=radius, place_type=type)


@router.get("/details")
async def place_details(place_id: str = Query(..., alias="placeId", min_length=1)):
    return await places_client.place_details(place_id)


@router.get("/hotels")
async def nearby_hotels(location: str | None = None):
    if not location:
        raise HTTPException(status_code=400, detail="Location parameter is required")
    return await places_client.nearby_lodging(location)
