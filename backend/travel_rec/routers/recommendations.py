"""Destination recommendations router — CRUD and search over curated destinations."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from travel_rec.database import get_db
from travel_rec.schemas.destination import (
    BudgetLevel,
    Climate,
    DestinationCreate,
    DestinationResponse,
    DestinationUpdate,
)
from travel_rec.services.destination_service import destination_service

router = APIRouter()


@router.get("", response_model=list[DestinationResponse])
async def list_destinations(db: AsyncSession = Depends(get_db)):
    destinations = await destination_service.list_destinations(db)
    return [DestinationResponse.from_model(d) for d in destinations]


@router.get("/search", response_model=list[DestinationResponse])
async def search_destinations(
    budget: BudgetLevel | None = None,
    climate: Climate | None = None,
    activity: str | None = None,
    q: str | None = Query(None, description="Keyword matched against name and description"),
    db: AsyncSession = Depends(get_db),
):
    """Search destinations; every given filter must match."""
    destinations = await destination_service.search_destinations(
        db,
        budget=budget.value if budget else None,
        climate=climate.value if climate else None,
        activity=activity,
        keyword=q,
    )
    return [DestinationResponse.from_model(d) for d in destinations]


@router.get("/{destination_id}", response_model=DestinationResponse)
async def get_destination(destination_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    destination = await destination_service.get_destination(db, destination_id)
    if not destination:
        raise HTTPException(status_code=404, detail="Destination not found")
    return DestinationResponse.from_model(destination)


@router.post("", status_code=201, response_model=DestinationResponse)
async def create_destination(req: DestinationCreate, db: AsyncSession = Depends(get_db)):
    destination = await destination_service.create_destination(db, req)
    return DestinationResponse.from_model(destination)


@router.put("/{destination_id}", response_model=DestinationResponse)
async def update_destination(
    destination_id: uuid.UUID,
    req: DestinationUpdate,
    db: AsyncSession = Depends(get_db),
):
    destination = await destination_service.update_destination(db, destination_id, req)
    if not destination:
        raise HTTPException(status_code=404, detail="Destination not found")
    return DestinationResponse.from_model(destination)


@router.delete("/{destination_id}")
async def delete_destination(destination_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    deleted = await destination_service.delete_destination(db, destination_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Destination not found")
    return {"message": "Destination deleted successfully"}
