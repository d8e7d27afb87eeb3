"""Google Places nearby search and place details."""

import logging

import httpx

from travel_rec.config import settings
from travel_rec.errors import UpstreamAPIError
from travel_rec.services.cache_service import cache_service

logger = logging.getLogger(__name__)

DETAIL_FIELDS = (
    "name,rating,formatted_address,formatted_phone_number,website,"
    "photos,price_level,reviews,opening_hours"
)

LODGING_RADIUS_M = 5000

PASSING_STATUSES = {"OK", "ZERO_RESULTS"}


class GooglePlacesClient:
    """Adapter for the Google Places web service."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = settings.google_places_api_key if api_key is None else api_key
        self._base_url = base_url or settings.google_places_base_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=15.0,
                transport=self._transport,
            )
        return self._client

    async def _get(self, path: str, params: dict, failure_message: str) -> dict:
        if not self._api_key:
            raise UpstreamAPIError(500, "Google Places API key not configured")

        client = await self._get_client()
        query = {k: v for k, v in params.items() if v is not None}
        query["key"] = self._api_key
        try:
            resp = await client.get(path, params=query)
        except httpx.RequestError as e:
            logger.error(f"Google Places request error on {path}: {e}")
            raise UpstreamAPIError(502, failure_message, error=str(e)) from e

        if resp.is_error:
            logger.error(f"Google Places {path} returned {resp.status_code}")
            raise UpstreamAPIError(
                resp.status_code,
                failure_message,
                error=f"Google Places responded with HTTP {resp.status_code}",
                details={"raw": resp.text},
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise UpstreamAPIError(
                502, failure_message, error="Google Places returned a non-JSON response"
            ) from e

        # Places reports quota and request errors as HTTP 200 with a status field
        body = data if isinstance(data, dict) else {}
        status = body.get("status")
        if status not in PASSING_STATUSES:
            logger.error(f"Google Places {path} returned status {status}")
            raise UpstreamAPIError(
                502,
                failure_message,
                error=body.get("error_message") or f"Google Places returned status {status}",
                details=data,
            )
        return data

    async def nearby_search(
        self, location: str, radius: int | None = None, place_type: str | None = None
    ) -> dict:
        return await self._get(
            "/maps/api/place/nearbysearch/json",
            {"location": location, "radius": radius, "type": place_type},
            "Failed to search places",
        )

    async def place_details(self, place_id: str) -> dict:
        cached = await cache_service.get_place_details(place_id)
        if cached is not None:
            return cached

        data = await self._get(
            "/maps/api/place/details/json",
            {"place_id": place_id, "fields": DETAIL_FIELDS},
            "Failed to get place details",
        )
        if data.get("status") == "OK":
            await cache_service.set_place_details(place_id, data)
        return data

    async def nearby_lodging(self, location: str) -> list[dict]:
        """Hotels within walking-ish distance of a ``lat,lng`` point."""
        data = await self._get(
            "/maps/api/place/nearbysearch/json",
            {"location": location, "radius": LODGING_RADIUS_M, "type": "lodging"},
            "Failed to fetch hotels from Google Places API",
        )
        results = data.get("results", [])
        logger.info(f"Found {len(results)} lodging places near {location}")
        return results

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


places_client = GooglePlacesClient()
