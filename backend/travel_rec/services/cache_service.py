"""Redis cache service for slow-changing upstream lookups (locations, place details)."""

import json
import logging
from typing import Any

import redis.asyncio as redis

from travel_rec.config import settings

logger = logging.getLogger(__name__)

TTL_PLACE_DETAILS = 24 * 60 * 60  # 24 hours


class CacheService:
    """Redis-backed JSON cache. Every operation degrades to a miss when redis is down."""

    def __init__(self):
        self._redis: redis.Redis | None = None
        self.enabled = settings.cache_enabled

    async def _get_redis(self) -> redis.Redis | None:
        if not self.enabled:
            return None
        if self._redis is None:
            try:
                self._redis = redis.from_url(
                    settings.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, cache disabled: {e}")
                self._redis = None
                return None
        return self._redis

    async def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or error."""
        try:
            r = await self._get_redis()
            if r is None:
                return None
            raw = await r.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception as e:
            logger.debug(f"Cache get failed for {key}: {e}")
            return None

    async def set(self, key: str, value: Any, ttl: int) -> bool:
        """Set a value with TTL. Returns False on error."""
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.set(key, json.dumps(value, default=str), ex=ttl)
            return True
        except Exception as e:
            logger.debug(f"Cache set failed for {key}: {e}")
            return False

    # Typed helpers

    def location_key(self, keyword: str, sub_type: str, limit: int | None) -> str:
        return f"amadeus:locations:{keyword.lower()}:{sub_type}:{limit or ''}"

    def place_details_key(self, place_id: str) -> str:
        return f"places:details:{place_id}"

    async def get_locations(self, keyword: str, sub_type: str, limit: int | None) -> dict | None:
        return await self.get(self.location_key(keyword, sub_type, limit))

    async def set_locations(self, keyword: str, sub_type: str, limit: int | None, data: dict):
        await self.set(self.location_key(keyword, sub_type, limit), data, settings.location_cache_ttl)

    async def get_place_details(self, place_id: str) -> dict | None:
        return await self.get(self.place_details_key(place_id))

    async def set_place_details(self, place_id: str, data: dict):
        await self.set(self.place_details_key(place_id), data, TTL_PLACE_DETAILS)

    async def close(self):
        if self._redis:
            await self._redis.aclose()
            self._redis = None


cache_service = CacheService()
