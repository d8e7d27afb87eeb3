import uuid
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from travel_rec.models.destination import Destination

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CamelModel(BaseModel):
    """Accepts and emits camelCase field names; snake_case input is accepted too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Climate(str, Enum):
    tropical = "tropical"
    temperate = "temperate"
    arid = "arid"
    continental = "continental"
    polar = "polar"


class BudgetLevel(str, Enum):
    budget = "budget"
    moderate = "moderate"
    luxury = "luxury"


class Season(str, Enum):
    spring = "spring"
    summer = "summer"
    fall = "fall"
    winter = "winter"


class Coordinates(CamelModel):
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)


class Location(CamelModel):
    country: NonEmptyStr
    city: str | None = None
    coordinates: Coordinates | None = None


class Accommodation(CamelModel):
    name: str | None = None
    type: str | None = None
    price_range: str | None = None
    link: str | None = None


class Ratings(CamelModel):
    average: float = Field(0, ge=0, le=5)
    count: int = Field(0, ge=0)


class DestinationCreate(CamelModel):
    name: NonEmptyStr
    location: Location
    description: NonEmptyStr
    images: list[str] = []
    climate: Climate
    budget_level: BudgetLevel
    activities: list[str] = []
    best_time_to_visit: list[Season] = []
    accommodations: list[Accommodation] = []
    ratings: Ratings = Ratings()


class DestinationUpdate(CamelModel):
    name: NonEmptyStr | None = None
    location: Location | None = None
    description: NonEmptyStr | None = None
    images: list[str] | None = None
    climate: Climate | None = None
    budget_level: BudgetLevel | None = None
    activities: list[str] | None = None
    best_time_to_visit: list[Season] | None = None
    accommodations: list[Accommodation] | None = None
    ratings: Ratings | None = None


class DestinationResponse(CamelModel):
    id: uuid.UUID = Field(alias="_id")
    name: str
    location: Location
    description: str
    images: list[str]
    climate: Climate
    budget_level: BudgetLevel
    activities: list[str]
    best_time_to_visit: list[Season]
    accommodations: list[Accommodation]
    ratings: Ratings
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_model(cls, d: Destination) -> "DestinationResponse":
        coordinates = None
        if d.latitude is not None or d.longitude is not None:
            coordinates = Coordinates(latitude=d.latitude, longitude=d.longitude)
        return cls(
            id=d.id,
            name=d.name,
            location=Location(country=d.country, city=d.city, coordinates=coordinates),
            description=d.description,
            images=d.images or [],
            climate=d.climate,
            budget_level=d.budget_level,
            activities=d.activities or [],
            best_time_to_visit=d.best_time_to_visit or [],
            accommodations=d.accommodations or [],
            ratings=Ratings(average=d.rating_average or 0, count=d.rating_count or 0),
            created_at=d.created_at,
            updated_at=d.updated_at,
        )
