"""Amadeus proxy router — locations, flights, hotels and destination recommendations.

Query parameter names follow the Amadeus/client camelCase convention.
"""

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from travel_rec.services.amadeus_client import amadeus_client

logger = logging.getLogger(__name__)

router = APIRouter()


class FlightPricingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    flight_offers: list[dict] = Field(..., alias="flightOffers", min_length=1)


@router.get("/test")
async def router_test():
    return {"message": "Amadeus router is working correctly"}


@router.get("/debug-auth")
async def debug_auth():
    """Acquire (or reuse) a token and report its status without exposing it."""
    token = await amadeus_client.tokens.get_access_token()
    return {
        "success": True,
        "message": "Successfully authenticated with Amadeus API",
        "token_info": {
            "token_exists": bool(token),
            "token_length": len(token),
            "expires_at": amadeus_client.tokens.status()["expires_at"],
        },
    }


@router.get("/locations")
async def search_locations(
    keyword: str | None = None,
    sub_type: str = Query("CITY,AIRPORT", alias="subType"),
):
    if not keyword or len(keyword.strip()) < 2:
        raise HTTPException(status_code=400, detail="Keyword must be at least 2 characters")
    return await amadeus_client.search_locations(keyword.strip(), sub_type=sub_type)


@router.get("/flight-offers")
async def search_flight_offers(
    origin: str = Query(..., alias="originLocationCode", min_length=3, max_length=3),
    destination: str = Query(..., alias="destinationLocationCode", min_length=3, max_length=3),
    departure_date: date = Query(..., alias="departureDate"),
    return_date: date | None = Query(None, alias="returnDate"),
    adults: int = Query(1, ge=1, le=9),
    travel_class: str | None = Query(
        None, alias="travelClass", pattern="^(ECONOMY|PREMIUM_ECONOMY|BUSINESS|FIRST)$"
    ),
    non_stop: bool | None = Query(None, alias="nonStop"),
    currency: str | None = Query(None, alias="currencyCode"),
    max_results: int = Query(10, alias="max", ge=1, le=250),
):
    if return_date and return_date < departure_date:
        raise HTTPException(status_code=400, detail="returnDate must not be before departureDate")

    return await amadeus_client.search_flight_offers(
        origin=origin,
        destination=destination,
        departure_date=departure_date,
        return_date=return_date,
        adults=adults,
        travel_class=travel_class,
        non_stop=non_stop,
        currency=currency,
        max_results=max_results,
    )


@router.post("/flight-offers/pricing")
async def price_flight_offers(req: FlightPricingRequest):
    return await amadeus_client.price_flight_offers(req.flight_offers)


@router.get("/flight-price-analysis")
async def flight_price_analysis(
    origin: str = Query(..., alias="originIataCode", min_length=3, max_length=3),
    destination: str = Query(..., alias="destinationIataCode", min_length=3, max_length=3),
    departure_date: date = Query(..., alias="departureDate"),
    currency: str | None = Query(None, alias="currencyCode"),
):
    return await amadeus_client.flight_price_analysis(
        origin=origin,
        destination=destination,
        departure_date=departure_date,
        currency=currency,
    )


@router.get("/hotel-offers")
async def search_hotel_offers(
    city_code: str | None = Query(None, alias="cityCode"),
    check_in: date | None = Query(None, alias="checkInDate"),
    check_out: date | None = Query(None, alias="checkOutDate"),
    adults: int = Query(1, ge=1, le=9),
    room_quantity: int = Query(1, alias="roomQuantity", ge=1, le=9),
):
    if not city_code:
        raise HTTPException(status_code=400, detail="cityCode is required")
    if not check_in or not check_out:
        raise HTTPException(status_code=400, detail="checkInDate and checkOutDate are required")
    if check_in >= check_out:
        raise HTTPException(status_code=400, detail="checkInDate must be before checkOutDate")

    return await amadeus_client.search_hotel_offers(
        city_code=city_code,
        check_in=check_in,
        check_out=check_out,
        adults=adults,
        room_quantity=room_quantity,
    )


@router.get("/hotel-offers/{offer_id}")
async def get_hotel_offer(offer_id: str):
    return await amadeus_client.get_hotel_offer(offer_id)


@router.get("/destinations")
async def recommended_destinations(
    keyword: str | None = None,
    origin_city_code: str | None = Query(None, alias="originCityCode"),
    destination_types: str | None = Query(None, alias="destinationTypes"),
):
    return await amadeus_client.recommended_destinations(
        keyword=keyword,
        origin_city_code=origin_city_code,
        destination_types=destination_types,
    )
