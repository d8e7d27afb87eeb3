"""Seed script for the development database."""

import asyncio
import logging

from sqlalchemy import select

from travel_rec.database import async_session_factory, init_models
from travel_rec.models.destination import Destination
from travel_rec.schemas.destination import DestinationCreate
from travel_rec.services.destination_service import to_columns

logger = logging.getLogger(__name__)

DESTINATIONS = [
    {
        "name": "Bora Bora",
        "location": {"country": "French Polynesia", "city": "Vaitape",
                     "coordinates": {"latitude": -16.5004, "longitude": -151.7415}},
        "description": "Lagoon island with overwater bungalows and a white sand beach ringed by coral reef.",
        "images": ["https://picsum.photos/seed/bora-bora/800/600"],
        "climate": "tropical",
        "budget_level": "luxury",
        "activities": ["snorkeling", "diving", "beach"],
        "best_time_to_visit": ["spring", "fall"],
        "accommodations": [{"name": "Lagoon Resort", "type": "resort", "price_range": "$$$$"}],
        "ratings": {"average": 4.8, "count": 312},
    },
    {
        "name": "Kyoto",
        "location": {"country": "Japan", "city": "Kyoto",
                     "coordinates": {"latitude": 35.0116, "longitude": 135.7681}},
        "description": "Former imperial capital known for its temples, gardens and tea houses.",
        "images": ["https://picsum.photos/seed/kyoto/800/600"],
        "climate": "temperate",
        "budget_level": "moderate",
        "activities": ["sightseeing", "hiking", "food"],
        "best_time_to_visit": ["spring", "fall"],
        "ratings": {"average": 4.7, "count": 540},
    },
    {
        "name": "Marrakech",
        "location": {"country": "Morocco", "city": "Marrakech",
                     "coordinates": {"latitude": 31.6295, "longitude": -7.9811}},
        "description": "Walled medina with souks, riads and day trips to the Atlas mountains and desert.",
        "images": ["https://picsum.photos/seed/marrakech/800/600"],
        "climate": "arid",
        "budget_level": "budget",
        "activities": ["shopping", "food", "hiking"],
        "best_time_to_visit": ["spring", "fall"],
        "ratings": {"average": 4.4, "count": 208},
    },
    {
        "name": "Banff",
        "location": {"country": "Canada", "city": "Banff",
                     "coordinates": {"latitude": 51.1784, "longitude": -115.5708}},
        "description": "Mountain town inside a national park, with glacial lakes and ski runs.",
        "images": ["https://picsum.photos/seed/banff/800/600"],
        "climate": "continental",
        "budget_level": "moderate",
        "activities": ["hiking", "skiing", "wildlife"],
        "best_time_to_visit": ["summer", "winter"],
        "ratings": {"average": 4.6, "count": 275},
    },
    {
        "name": "Svalbard",
        "location": {"country": "Norway", "city": "Longyearbyen"},
        "description": "Arctic archipelago for polar bear safaris and the northern lights.",
        "climate": "polar",
        "budget_level": "luxury",
        "activities": ["wildlife", "northern lights"],
        "best_time_to_visit": ["winter"],
        "ratings": {"average": 4.5, "count": 64},
    },
]


async def seed(session_factory=async_session_factory):
    async with session_factory() as db:
        result = await db.execute(select(Destination).limit(1))
        if result.scalar_one_or_none():
            logger.info("Database already seeded. Skipping.")
            return

        for raw in DESTINATIONS:
            req = DestinationCreate(**raw)
            db.add(Destination(**to_columns(req.model_dump(mode="json"))))

        await db.commit()
        logger.info(f"Seeded {len(DESTINATIONS)} destinations")


async def main():
    await init_models()
    await seed()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
