import httpx
import pytest

from travel_rec.routers import amadeus as amadeus_router
from travel_rec.services.amadeus_client import AmadeusClient


def install_client(monkeypatch, handler, client_id="id", client_secret="secret") -> AmadeusClient:
    client = AmadeusClient(
        base_url="https://amadeus.test",
        client_id=client_id,
        client_secret=client_secret,
        transport=httpx.MockTransport(handler),
    )
    monkeypatch.setattr(amadeus_router, "amadeus_client", client)
    return client


def token_then(routes: dict, token_status: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/security/oauth2/token":
            if token_status != 200:
                return httpx.Response(token_status, json={"error": "invalid_client"})
            return httpx.Response(200, json={"access_token": "abc123", "expires_in": 1799})
        status, body = routes[request.url.path]
        return httpx.Response(status, json=body)

    return handler


async def test_router_test_endpoint(client):
    resp = await client.get("/api/external/amadeus/test")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Amadeus router is working correctly"}


async def test_locations_returns_upstream_body(client, monkeypatch):
    body = {"data": [{"iataCode": "PAR", "name": "PARIS"}], "meta": {"count": 1}}
    install_client(monkeypatch, token_then({"/v1/reference-data/locations": (200, body)}))

    resp = await client.get("/api/external/amadeus/locations", params={"keyword": "Paris"})

    assert resp.status_code == 200
    assert resp.json() == body


@pytest.mark.parametrize("params", [{}, {"keyword": "P"}, {"keyword": "  "}])
async def test_locations_rejects_short_keyword(client, params):
    resp = await client.get("/api/external/amadeus/locations", params=params)
    assert resp.status_code == 400
    assert resp.json() == {"message": "Keyword must be at least 2 characters"}


async def test_auth_failure_status_is_propagated(client, monkeypatch):
    install_client(monkeypatch, token_then({}, token_status=401))

    resp = await client.get("/api/external/amadeus/locations", params={"keyword": "Paris"})

    assert resp.status_code == 401
    body = resp.json()
    assert body["message"] == "Failed to authenticate with Amadeus API"
    assert body["details"] == {"error": "invalid_client"}


async def test_missing_credentials_is_server_error(client, monkeypatch):
    install_client(monkeypatch, token_then({}), client_id="", client_secret="")

    resp = await client.get("/api/external/amadeus/debug-auth")

    assert resp.status_code == 500
    assert resp.json()["error"] == "Amadeus API credentials not configured"


async def test_debug_auth_reports_token_without_exposing_it(client, monkeypatch):
    install_client(monkeypatch, token_then({}))

    resp = await client.get("/api/external/amadeus/debug-auth")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["token_info"]["token_exists"] is True
    assert body["token_info"]["token_length"] == len("abc123")
    assert "abc123" not in resp.text


async def test_flight_offers_requires_route(client):
    resp = await client.get("/api/external/amadeus/flight-offers", params={"departureDate": "2026-05-01"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid request"


async def test_flight_offers_rejects_return_before_departure(client):
    resp = await client.get(
        "/api/external/amadeus/flight-offers",
        params={
            "originLocationCode": "JFK",
            "destinationLocationCode": "LHR",
            "departureDate": "2026-05-10",
            "returnDate": "2026-05-01",
        },
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "returnDate must not be before departureDate"}


async def test_flight_offers_upstream_error_passthrough(client, monkeypatch):
    errors = {"errors": [{"status": 400, "code": 477, "title": "INVALID FORMAT"}]}
    install_client(monkeypatch, token_then({"/v2/shopping/flight-offers": (400, errors)}))

    resp = await client.get(
        "/api/external/amadeus/flight-offers",
        params={"originLocationCode": "JFK", "destinationLocationCode": "LHR", "departureDate": "2026-05-10"},
    )

    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Failed to search flights"
    assert body["details"] == errors


@pytest.mark.parametrize(
    "params, message",
    [
        ({"checkInDate": "2026-06-01", "checkOutDate": "2026-06-03"}, "cityCode is required"),
        ({"cityCode": "PAR", "checkInDate": "2026-06-01"}, "checkInDate and checkOutDate are required"),
        (
            {"cityCode": "PAR", "checkInDate": "2026-06-03", "checkOutDate": "2026-06-03"},
            "checkInDate must be before checkOutDate",
        ),
    ],
)
async def test_hotel_offers_validation(client, params, message):
    resp = await client.get("/api/external/amadeus/hotel-offers", params=params)
    assert resp.status_code == 400
    assert resp.json() == {"message": message}


async def test_hotel_offers_returns_offers(client, monkeypatch):
    offers = {"data": [{"hotel": {"hotelId": "HLPAR001"}, "offers": [{"id": "OFF1"}]}]}
    install_client(monkeypatch, token_then({
        "/v1/reference-data/locations/hotels/by-city": (200, {"data": [{"hotelId": "HLPAR001"}]}),
        "/v3/shopping/hotel-offers": (200, offers),
    }))

    resp = await client.get(
        "/api/external/amadeus/hotel-offers",
        params={"cityCode": "PAR", "checkInDate": "2026-06-01", "checkOutDate": "2026-06-03"},
    )

    assert resp.status_code == 200
    assert resp.json() == offers


async def test_hotel_offer_not_found_passthrough(client, monkeypatch):
    install_client(monkeypatch, token_then({
        "/v3/shopping/hotel-offers/GONE": (404, {"errors": [{"code": 1257}]}),
    }))

    resp = await client.get("/api/external/amadeus/hotel-offers/GONE")

    assert resp.status_code == 404
    assert resp.json()["message"] == "Failed to get hotel offer details"


async def test_pricing_requires_offers(client):
    resp = await client.post("/api/external/amadeus/flight-offers/pricing", json={"flightOffers": []})
    assert resp.status_code == 400
