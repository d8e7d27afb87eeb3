"""Shared fixtures: in-memory SQLite database and an ASGI client against the app."""

import os

# Must be set before travel_rec.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("CACHE_ENABLED", "false")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("APP_ENV", "development")

from collections.abc import AsyncGenerator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import travel_rec.models  # noqa: E402,F401
from travel_rec.database import Base, get_db  # noqa: E402
from travel_rec.main import app  # noqa: E402


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client bound to the app, with get_db pointed at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def _destination_payload(**overrides) -> dict:
    payload = {
        "name": "Lisbon",
        "location": {
            "country": "Portugal",
            "city": "Lisbon",
            "coordinates": {"latitude": 38.7223, "longitude": -9.1393},
        },
        "description": "Hilly coastal capital with trams, fado and beaches nearby.",
        "images": ["https://picsum.photos/seed/lisbon/800/600"],
        "climate": "temperate",
        "budget_level": "moderate",
        "activities": ["food", "surfing"],
        "best_time_to_visit": ["spring", "fall"],
        "accommodations": [{"name": "Alfama Guesthouse", "type": "guesthouse", "price_range": "$$"}],
        "ratings": {"average": 4.5, "count": 120},
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def destination_payload():
    return _destination_payload


class FakeRedis:
    """In-memory stand-in for the redis.asyncio client used by CacheService."""

    def __init__(self):
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def ping(self):
        return True

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value
        self.ttls[key] = ex
        return True

    async def aclose(self):
        pass


@pytest.fixture
def memory_cache(monkeypatch):
    """A live CacheService backed by FakeRedis, installed where the clients look it up."""
    from travel_rec.services import amadeus_client, places_client
    from travel_rec.services.cache_service import CacheService

    cache = CacheService()
    cache.enabled = True
    cache._redis = FakeRedis()
    monkeypatch.setattr(amadeus_client, "cache_service", cache)
    monkeypatch.setattr(places_client, "cache_service", cache)
    return cache
