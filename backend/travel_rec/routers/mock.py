"""Mock data router — Amadeus-shaped fixtures for offline development."""

import logging

from fastapi import APIRouter, HTTPException, Query, Request

from travel_rec.data import mock_data

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/test")
async def router_test():
    return {"message": "Mock API is working"}


@router.get("/locations")
async def mock_locations(request: Request, keyword: str | None = None):
    if not keyword or len(keyword) < 2:
        raise HTTPException(status_code=400, detail="Keyword must be at least 2 characters")

    locations = mock_data.search_locations(keyword)
    logger.info(f"Found {len(locations)} mock locations for keyword: {keyword}")
    return {
        "data": locations,
        "meta": {"count": len(locations), "links": {"self": str(request.url)}},
    }


@router.get("/hotels")
async def mock_hotels(
    city_code: str | None = Query(None, alias="cityCode"),
    check_in: str | None = Query(None, alias="checkInDate"),
    check_out: str | None = Query(None, alias="checkOutDate"),
):
    hotels = mock_data.hotels_for_city(city_code, check_in, check_out)
    return {
        "data": hotels,
        "meta": {"count": len(hotels), "source": "mock", "cityCode": city_code},
    }
