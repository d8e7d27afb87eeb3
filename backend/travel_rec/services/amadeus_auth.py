"""Amadeus OAuth2 client-credentials token cache."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta, timezone

import httpx

from travel_rec.errors import AmadeusAuthError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/security/oauth2/token"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AmadeusTokenCache:
    """Caches one bearer token until its expiry.

    A token is reused while ``now < expires_at``; otherwise a new one is
    requested. Failed requests raise and leave the cache untouched. Refreshes
    are single-flight: concurrent callers during expiry wait on one request.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        get_client: Callable[[], Awaitable[httpx.AsyncClient]],
        clock: Callable[[], datetime] = utcnow,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._get_client = get_client
        self._clock = clock
        self._token: str | None = None
        self._expires_at: datetime | None = None
        self._lock = asyncio.Lock()

    @property
    def expires_at(self) -> datetime | None:
        return self._expires_at

    def _is_valid(self) -> bool:
        return (
            self._token is not None
            and self._expires_at is not None
            and self._clock() < self._expires_at
        )

    async def get_access_token(self) -> str:
        if self._is_valid():
            return self._token

        async with self._lock:
            # Another caller may have refreshed while we waited
            if self._is_valid():
                return self._token
            return await self._fetch_token()

    async def _fetch_token(self) -> str:
        if not self._client_id or not self._client_secret:
            logger.error("Amadeus credentials are not set")
            raise AmadeusAuthError("Amadeus API credentials not configured")

        client = await self._get_client()
        try:
            resp = await client.post(
                TOKEN_PATH,
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                },
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except httpx.RequestError as e:
            logger.error(f"Amadeus token request failed: {e}")
            raise AmadeusAuthError(f"Failed to get access token: {e}") from e

        if resp.is_error:
            details = _safe_json(resp)
            logger.error(f"Amadeus token request rejected: {resp.status_code}")
            raise AmadeusAuthError(
                f"Failed to get access token: HTTP {resp.status_code}",
                status_code=resp.status_code,
                details=details,
            )

        data = _safe_json(resp)
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            logger.error("Amadeus token response had no access_token")
            raise AmadeusAuthError("Invalid token response from Amadeus API", details=data)

        expires_in = int(data.get("expires_in", 1799))
        self._token = token
        self._expires_at = self._clock() + timedelta(seconds=expires_in)
        logger.info(f"Amadeus token refreshed, expires at {self._expires_at.isoformat()}")
        return token

    def invalidate(self) -> None:
        self._token = None
        self._expires_at = None

    def status(self) -> dict:
        return {
            "token_exists": self._is_valid(),
            "expires_at": self._expires_at.isoformat() if self._expires_at else None,
        }


def _safe_json(resp: httpx.Response):
    try:
        return resp.json()
    except ValueError:
        return {"raw": resp.text}
