"""Destination service — CRUD and filtered search over curated destinations."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_rec.models.destination import Destination
from travel_rec.schemas.destination import DestinationCreate, DestinationUpdate

logger = logging.getLogger(__name__)

# Plural search words mapped to the singular matched in name/description
KEYWORD_SINGULARS = {
    "beaches": "beach",
    "temples": "temple",
    "countries": "country",
}


def to_columns(data: dict) -> dict:
    """Flatten the nested API shape (location, ratings) onto table columns."""
    columns = dict(data)

    if "location" in columns:
        location = columns.pop("location") or {}
        coordinates = location.get("coordinates") or {}
        columns["country"] = location.get("country")
        columns["city"] = location.get("city")
        columns["latitude"] = coordinates.get("latitude")
        columns["longitude"] = coordinates.get("longitude")

    if "ratings" in columns:
        ratings = columns.pop("ratings") or {}
        columns["rating_average"] = ratings.get("average", 0)
        columns["rating_count"] = ratings.get("count", 0)

    return columns


def normalize_keyword(keyword: str) -> str:
    term = keyword.strip().lower()
    return KEYWORD_SINGULARS.get(term, term)


class DestinationService:
    async def list_destinations(self, db: AsyncSession) -> list[Destination]:
        result = await db.execute(select(Destination).order_by(Destination.created_at, Destination.name))
        return list(result.scalars().all())

    async def get_destination(self, db: AsyncSession, destination_id: uuid.UUID) -> Destination | None:
        result = await db.execute(select(Destination).where(Destination.id == destination_id))
        return result.scalar_one_or_none()

    async def create_destination(self, db: AsyncSession, req: DestinationCreate) -> Destination:
        destination = Destination(**to_columns(req.model_dump(mode="json")))
        db.add(destination)
        await db.commit()
        await db.refresh(destination)
        logger.info(f"Created destination {destination.id} ({destination.name})")
        return destination

    async def update_destination(
        self, db: AsyncSession, destination_id: uuid.UUID, req: DestinationUpdate
    ) -> Destination | None:
        destination = await self.get_destination(db, destination_id)
        if not destination:
            return None

        update_data = to_columns(req.model_dump(mode="json", exclude_unset=True, exclude_none=True))
        for field, value in update_data.items():
            setattr(destination, field, value)

        await db.commit()
        await db.refresh(destination)
        return destination

    async def delete_destination(self, db: AsyncSession, destination_id: uuid.UUID) -> bool:
        destination = await self.get_destination(db, destination_id)
        if not destination:
            return False

        await db.delete(destination)
        await db.commit()
        logger.info(f"Deleted destination {destination_id}")
        return True

    async def search_destinations(
        self,
        db: AsyncSession,
        budget: str | None = None,
        climate: str | None = None,
        activity: str | None = None,
        keyword: str | None = None,
    ) -> list[Destination]:
        """All given filters must match."""
        query = select(Destination)
        if budget:
            query = query.where(Destination.budget_level == budget)
        if climate:
            query = query.where(Destination.climate == climate)

        result = await db.execute(query.order_by(Destination.created_at, Destination.name))
        destinations = list(result.scalars().all())

        # JSON list membership is dialect-specific in SQL; filter here instead
        if activity:
            destinations = [d for d in destinations if activity in (d.activities or [])]

        if keyword and keyword.strip():
            term = normalize_keyword(keyword)
            destinations = [
                d for d in destinations
                if term in d.name.lower() or term in (d.description or "").lower()
            ]

        return destinations


destination_service = DestinationService()
