"""Booking.com endpoints backed by the hotel simulator."""

from datetime import date

from fastapi import APIRouter, HTTPException, Query

from travel_rec.services.booking_service import booking_service

router = APIRouter()


@router.get("/test")
async def router_test():
    return {"message": "Booking.com API router is working", "status": "OK"}


@router.get("/hotels")
async def search_hotels(
    destination: str | None = None,
    check_in: date | None = Query(None, alias="checkIn"),
    check_out: date | None = Query(None, alias="checkOut"),
    adults: int = Query(2, ge=1),
    rooms: int = Query(1, ge=1),
    min_rating: float = Query(0, alias="minRating", ge=0, le=5),
    max_price: float | None = Query(None, alias="maxPrice", gt=0),
    amenities: str | None = Query(None, description="Comma-separated amenities every hotel must have"),
):
    if not destination or not destination.strip():
        raise HTTPException(status_code=400, detail="Destination is required")
    if not check_in or not check_out:
        raise HTTPException(status_code=400, detail="Check-in and check-out dates are required")

    return booking_service.search_hotels(
        destination=destination,
        check_in=check_in,
        check_out=check_out,
        adults=adults,
        rooms=rooms,
        min_rating=min_rating,
        max_price=max_price,
        amenities=amenities.split(",") if amenities else None,
    )


@router.get("/hotels/{hotel_id}")
async def get_hotel(hotel_id: str):
    hotel = booking_service.get_hotel(hotel_id)
    if not hotel:
        raise HTTPException(status_code=404, detail="Hotel not found")
    return {"status": "success", "hotel": hotel}


@router.get("/hotels/{hotel_id}/reviews")
async def get_reviews(
    hotel_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=50),
):
    return booking_service.get_reviews(hotel_id, page=page, limit=limit)
