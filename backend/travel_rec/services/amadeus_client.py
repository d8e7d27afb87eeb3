"""Amadeus API client — authenticated proxy for locations, flights, hotels and destinations."""

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Any

import httpx

from travel_rec.config import settings
from travel_rec.errors import UpstreamAPIError
from travel_rec.services.amadeus_auth import AmadeusTokenCache, utcnow
from travel_rec.services.cache_service import cache_service

logger = logging.getLogger(__name__)

TRAVEL_CLASSES = {"ECONOMY", "PREMIUM_ECONOMY", "BUSINESS", "FIRST"}

# Upper bound on hotel ids sent to the offers endpoint in one call
MAX_HOTEL_IDS = 20


class AmadeusClient:
    """Adapter for the Amadeus Self-Service API.

    Every call obtains a bearer token from the token cache and returns the
    upstream JSON body unchanged. Upstream failures raise ``UpstreamAPIError``
    with the upstream status code; there is no retry and no mock fallback.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._base_url = (base_url or settings.amadeus_base_url).rstrip("/")
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self.tokens = AmadeusTokenCache(
            client_id=settings.amadeus_api_key if client_id is None else client_id,
            client_secret=settings.amadeus_api_secret if client_secret is None else client_secret,
            get_client=self._get_client,
            clock=clock,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=settings.amadeus_timeout,
                transport=self._transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        failure_message: str,
        params: dict | None = None,
        json: Any = None,
    ) -> dict:
        token = await self.tokens.get_access_token()
        client = await self._get_client()
        clean_params = {k: v for k, v in (params or {}).items() if v is not None}

        logger.debug(f"Amadeus {method} {path} params={clean_params}")
        try:
            resp = await client.request(
                method,
                path,
                params=clean_params or None,
                json=json,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.RequestError as e:
            logger.error(f"Amadeus request error on {path}: {e}")
            raise UpstreamAPIError(502, failure_message, error=str(e)) from e

        if resp.is_error:
            try:
                details = resp.json()
            except ValueError:
                details = {"raw": resp.text}
            logger.error(f"Amadeus {path} returned {resp.status_code}")
            raise UpstreamAPIError(
                resp.status_code,
                failure_message,
                error=f"Amadeus responded with HTTP {resp.status_code}",
                details=details,
            )

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Amadeus {path} returned a non-JSON body")
            raise UpstreamAPIError(
                502,
                failure_message,
                error="Amadeus returned a non-JSON response",
                details={"raw": resp.text[:500]},
            ) from e

    async def search_locations(
        self, keyword: str, sub_type: str = "CITY,AIRPORT", limit: int | None = None
    ) -> dict:
        """Search cities and airports by keyword."""
        cached = await cache_service.get_locations(keyword, sub_type, limit)
        if cached is not None:
            return cached

        data = await self._request(
            "GET",
            "/v1/reference-data/locations",
            "Failed to fetch locations from Amadeus API",
            params={"keyword": keyword, "subType": sub_type, "page[limit]": limit},
        )
        logger.info(f"Found {len(data.get('data', []))} locations for '{keyword}'")
        await cache_service.set_locations(keyword, sub_type, limit, data)
        return data

    async def search_flight_offers(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        return_date: date | None = None,
        adults: int = 1,
        travel_class: str | None = None,
        non_stop: bool | None = None,
        currency: str | None = None,
        max_results: int = 10,
    ) -> dict:
        """Search flight offers for a route and date."""
        if travel_class and travel_class.upper() not in TRAVEL_CLASSES:
            raise ValueError(f"Unknown travel class: {travel_class}")

        params = {
            "originLocationCode": origin.upper(),
            "destinationLocationCode": destination.upper(),
            "departureDate": departure_date.isoformat(),
            "returnDate": return_date.isoformat() if return_date else None,
            "adults": adults,
            "travelClass": travel_class.upper() if travel_class else None,
            "nonStop": str(non_stop).lower() if non_stop is not None else None,
            "currencyCode": currency,
            "max": max_results,
        }
        return await self._request(
            "GET",
            "/v2/shopping/flight-offers",
            "Failed to search flights",
            params=params,
        )

    async def price_flight_offers(self, flight_offers: list[dict]) -> dict:
        """Confirm the current price of one or more flight offers."""
        return await self._request(
            "POST",
            "/v1/shopping/flight-offers/pricing",
            "Failed to confirm flight price",
            json={"data": {"type": "flight-offers-pricing", "flightOffers": flight_offers}},
        )

    async def flight_price_analysis(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        currency: str | None = None,
    ) -> dict:
        """Historical price quartiles for a route on a date."""
        return await self._request(
            "GET",
            "/v1/analytics/itinerary-price-metrics",
            "Failed to get flight price analysis",
            params={
                "originIataCode": origin.upper(),
                "destinationIataCode": destination.upper(),
                "departureDate": departure_date.isoformat(),
                "currencyCode": currency,
            },
        )

    async def search_hotel_offers(
        self,
        city_code: str,
        check_in: date,
        check_out: date,
        adults: int = 1,
        room_quantity: int = 1,
    ) -> dict:
        """Best-rate hotel offers in a city.

        The offers endpoint takes hotel ids, so the city's hotels are listed first.
        """
        hotels = await self._request(
            "GET",
            "/v1/reference-data/locations/hotels/by-city",
            "Error fetching hotel data from Amadeus API",
            params={"cityCode": city_code.upper()},
        )
        hotel_ids = [h["hotelId"] for h in hotels.get("data", []) if h.get("hotelId")]
        if not hotel_ids:
            logger.info(f"No hotels listed for city {city_code}")
            return {"data": []}

        data = await self._request(
            "GET",
            "/v3/shopping/hotel-offers",
            "Error fetching hotel data from Amadeus API",
            params={
                "hotelIds": ",".join(hotel_ids[:MAX_HOTEL_IDS]),
                "checkInDate": check_in.isoformat(),
                "checkOutDate": check_out.isoformat(),
                "adults": adults,
                "roomQuantity": room_quantity,
                "bestRateOnly": "true",
            },
        )
        logger.info(f"Found {len(data.get('data', []))} hotel offers in {city_code}")
        return data

    async def get_hotel_offer(self, offer_id: str) -> dict:
        return await self._request(
            "GET",
            f"/v3/shopping/hotel-offers/{offer_id}",
            "Failed to get hotel offer details",
        )

    async def recommended_destinations(
        self,
        keyword: str | None = None,
        origin_city_code: str | None = None,
        destination_types: str | None = None,
        traveler_country_code: str = "US",
    ) -> dict:
        """Keyword lookup when a keyword is given, otherwise recommendations from an origin."""
        if keyword:
            return await self.search_locations(
                keyword, sub_type=destination_types or "CITY,AIRPORT", limit=10
            )

        return await self._request(
            "GET",
            "/v1/reference-data/recommended-locations",
            "Failed to fetch destinations from Amadeus API",
            params={
                "cityCodes": (origin_city_code or "PAR").upper(),
                "travelerCountryCode": traveler_country_code,
                "destinationType": destination_types,
            },
        )

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


amadeus_client = AmadeusClient()
