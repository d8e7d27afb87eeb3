"""Stripe subscription service."""

import logging

import httpx

from travel_rec.config import settings
from travel_rec.errors import UpstreamAPIError

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Creates Stripe subscriptions through the Stripe REST API."""

    def __init__(
        self,
        secret_key: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._secret_key = settings.stripe_secret_key if secret_key is None else secret_key
        self._base_url = base_url or settings.stripe_base_url
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=20.0,
                transport=self._transport,
            )
        return self._client

    async def create_subscription(self, customer_id: str, price_id: str) -> dict:
        """Create an incomplete subscription and return the client secret to confirm payment."""
        if not self._secret_key:
            raise UpstreamAPIError(500, "Stripe is not configured")

        client = await self._get_client()
        try:
            resp = await client.post(
                "/v1/subscriptions",
                data={
                    "customer": customer_id,
                    "items[0][price]": price_id,
                    "payment_behavior": "default_incomplete",
                    "expand[]": "latest_invoice.payment_intent",
                },
                auth=(self._secret_key, ""),
            )
        except httpx.RequestError as e:
            logger.error(f"Stripe request error: {e}")
            raise UpstreamAPIError(502, "Subscription creation failed", error=str(e)) from e

        try:
            body = resp.json()
        except ValueError:
            body = {}
        if resp.is_error:
            error = body.get("error", {}) if isinstance(body, dict) else {}
            logger.error(f"Subscription creation failed: {resp.status_code} {error.get('code')}")
            raise UpstreamAPIError(
                resp.status_code,
                "Subscription creation failed",
                error=error.get("message") or f"Stripe responded with HTTP {resp.status_code}",
                details=error,
            )

        # Both are expanded objects thanks to expand[]
        invoice = body.get("latest_invoice") or {}
        payment_intent = invoice.get("payment_intent") or {}
        logger.info(f"Created subscription {body.get('id')} for customer {customer_id}")
        return {
            "subscription_id": body.get("id"),
            "client_secret": payment_intent.get("client_secret"),
        }

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


subscription_service = SubscriptionService()
