"""Stripe-backed premium subscriptions."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from travel_rec.services.subscription_service import subscription_service

router = APIRouter()


class SubscriptionCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(..., alias="customerId", min_length=1)
    price_id: str = Field(..., alias="priceId", min_length=1)


@router.post("")
async def create_subscription(req: SubscriptionCreate):
    return await subscription_service.create_subscription(req.customer_id, req.price_id)
