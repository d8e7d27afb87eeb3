from datetime import date

import pytest

from travel_rec.services.affiliate_service import AffiliateService
from travel_rec.services.booking_service import REVIEW_TOTAL, SEARCH_RESULT_COUNT, BookingService

CHECK_IN = date(2026, 7, 1)
CHECK_OUT = date(2026, 7, 5)


@pytest.fixture
def service():
    return BookingService()


def test_search_is_deterministic(service):
    first = service.search_hotels("New York", CHECK_IN, CHECK_OUT)
    second = service.search_hotels("new york", CHECK_IN, CHECK_OUT)

    assert first == second
    assert first["status"] == "success"
    assert first["count"] == SEARCH_RESULT_COUNT == len(first["hotels"])


def test_search_hotels_have_listing_fields(service):
    hotel = service.search_hotels("Rome", CHECK_IN, CHECK_OUT)["hotels"][0]

    assert hotel["id"] == "rome-1"
    assert hotel["name"].startswith("Rome ")
    assert 2.0 <= hotel["rating"] <= 5.0
    assert 50 <= hotel["price"]["current"] <= 349
    assert hotel["price"]["original"] >= hotel["price"]["current"]
    assert hotel["price"]["currency"] == "USD"
    assert "hotelid=rome-1" in hotel["booking_link"]
    assert "checkin=2026-07-01" in hotel["booking_link"]
    assert "hotelID=rome-1" in hotel["expedia_link"]


def test_search_filters_by_rating_and_price(service):
    result = service.search_hotels("Rome", CHECK_IN, CHECK_OUT, min_rating=4.0, max_price=200)

    assert result["count"] == len(result["hotels"])
    for hotel in result["hotels"]:
        assert hotel["rating"] >= 4.0
        assert hotel["price"]["current"] <= 200


def test_search_filters_by_amenities(service):
    result = service.search_hotels("Rome", CHECK_IN, CHECK_OUT, amenities=["spa", " Fitness Center"])

    for hotel in result["hotels"]:
        assert {"Spa", "Fitness Center"} <= set(hotel["amenities"])


def test_hotel_details_match_search_listing(service):
    listed = service.search_hotels("Kyoto", CHECK_IN, CHECK_OUT)["hotels"][2]
    detail = service.get_hotel(listed["id"])

    assert detail["id"] == listed["id"]
    assert detail["name"] == listed["name"]
    assert detail["rating"] == listed["rating"]
    assert detail["price"] == listed["price"]
    assert detail["address"]["city"] == "Kyoto"
    assert len(detail["room_types"]) == 3


@pytest.mark.parametrize("hotel_id", ["", "kyoto", "Kyoto-1", "kyoto-x"])
def test_malformed_hotel_id_is_not_found(service, hotel_id):
    assert service.get_hotel(hotel_id) is None


def test_reviews_paginate_up_to_total(service):
    page = service.get_reviews("kyoto-1", page=2, limit=20)
    assert page["total"] == REVIEW_TOTAL
    assert len(page["reviews"]) == 20
    assert page["reviews"][0]["id"] == "review-kyoto-1-20"

    last = service.get_reviews("kyoto-1", page=3, limit=20)
    assert len(last["reviews"]) == REVIEW_TOTAL - 40

    beyond = service.get_reviews("kyoto-1", page=4, limit=20)
    assert beyond["reviews"] == []


def test_review_category_scores_stay_near_overall(service):
    for review in service.get_reviews("kyoto-1", limit=50)["reviews"]:
        assert 1 <= review["rating"] <= 5
        for score in review["category_ratings"].values():
            assert abs(score - review["rating"]) <= 1


def test_affiliate_links():
    affiliates = AffiliateService(booking_affiliate_id="aid-1", expedia_affiliate_id="exp-1")

    assert affiliates.booking_link("h1", "2026-07-01", "2026-07-05") == (
        "https://www.booking.com/hotel.html?aid=aid-1&hotelid=h1&checkin=2026-07-01&checkout=2026-07-05"
    )
    assert affiliates.expedia_link("h1", "2026-07-01", "2026-07-05") == (
        "https://www.expedia.com/hotel?hotelID=h1&checkIn=2026-07-01&checkOut=2026-07-05&affid=exp-1"
    )


async def test_booking_test_endpoint(client):
    resp = await client.get("/api/external/booking/test")
    assert resp.json() == {"message": "Booking.com API router is working", "status": "OK"}


async def test_hotels_endpoint_requires_destination(client):
    resp = await client.get(
        "/api/external/booking/hotels", params={"checkIn": "2026-07-01", "checkOut": "2026-07-05"}
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "Destination is required"}


async def test_hotels_endpoint_requires_dates(client):
    resp = await client.get("/api/external/booking/hotels", params={"destination": "Rome"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Check-in and check-out dates are required"}


async def test_hotels_endpoint_parses_amenities(client):
    resp = await client.get(
        "/api/external/booking/hotels",
        params={"destination": "Rome", "checkIn": "2026-07-01", "checkOut": "2026-07-05", "amenities": "Pool,Spa"},
    )
    assert resp.status_code == 200
    for hotel in resp.json()["hotels"]:
        assert {"Pool", "Spa"} <= set(hotel["amenities"])


async def test_hotel_detail_endpoint(client):
    resp = await client.get("/api/external/booking/hotels/rome-3")
    assert resp.status_code == 200
    assert resp.json()["hotel"]["id"] == "rome-3"

    resp = await client.get("/api/external/booking/hotels/not_an_id")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Hotel not found"}


async def test_reviews_endpoint_caps_limit(client):
    resp = await client.get("/api/external/booking/hotels/rome-3/reviews", params={"limit": 51})
    assert resp.status_code == 400
