import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator

from parcel_api.models.domain import ParcelStatus

Latitude = Annotated[Decimal, Field(ge=-90, le=90, max_digits=10, decimal_places=8)]
Longitude = Annotated[Decimal, Field(ge=-180, le=180, max_digits=11, decimal_places=8)]
Amount = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]


class ParcelRequestCreate(BaseModel):
    """Required fields are checked by the record validation so a missing one
    is reported as ``MISSING_REQUIRED_FIELD`` with its name."""

    customer_id: uuid.UUID | None = None

    pickup_lat: Latitude | None = None
    pickup_lng: Longitude | None = None
    dropoff_lat: Latitude | None = None
    dropoff_lng: Longitude | None = None

    weight_kg: Amount | None = Field(default=None, gt=0)
    volume_m3: Amount | None = Field(default=None, gt=0)
    description: str | None = None
    max_budget: Amount | None = Field(default=None, ge=0)
    deadline: AwareDatetime | None = None

    status: ParcelStatus | None = None

    pickup_contact_name: str | None = Field(default=None, max_length=255)
    pickup_contact_phone: str | None = Field(default=None, max_length=50)
    delivery_contact_name: str | None = Field(default=None, max_length=255)
    delivery_contact_phone: str | None = Field(default=None, max_length=50)

    parcel_photos: list[str] | None = None

    @field_validator(
        "description",
        "pickup_contact_name",
        "pickup_contact_phone",
        "delivery_contact_name",
        "delivery_contact_phone",
    )
    @classmethod
    def strip_strings(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return value.strip()


class ParcelRequestUpdate(BaseModel):
    """Partial update; ``version`` is the optimistic-lock token read with the record."""

    version: int | None = Field(default=None, ge=1)

    pickup_lat: Latitude | None = None
    pickup_lng: Longitude | None = None
    dropoff_lat: Latitude | None = None
    dropoff_lng: Longitude | None = None

    weight_kg: Amount | None = Field(default=None, gt=0)
    volume_m3: Amount | None = Field(default=None, gt=0)
    description: str | None = None
    max_budget: Amount | None = Field(default=None, ge=0)
    deadline: AwareDatetime | None = None

    status: ParcelStatus | None = None

    pickup_contact_name: str | None = Field(default=None, max_length=255)
    pickup_contact_phone: str | None = Field(default=None, max_length=50)
    delivery_contact_name: str | None = Field(default=None, max_length=255)
    delivery_contact_phone: str | None = Field(default=None, max_length=50)

    parcel_photos: list[str] | None = None


class ParcelRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    customer_id: uuid.UUID
    pickup_lat: Decimal
    pickup_lng: Decimal
    dropoff_lat: Decimal
    dropoff_lng: Decimal
    weight_kg: Decimal
    volume_m3: Decimal
    description: str | None
    max_budget: Decimal
    deadline: datetime
    status: ParcelStatus
    pickup_contact_name: str | None
    pickup_contact_phone: str | None
    delivery_contact_name: str | None
    delivery_contact_phone: str | None
    parcel_photos: list[str]
    created_at: datetime
    updated_at: datetime
    version: int


class ParcelRequestListResponse(BaseModel):
    items: list[ParcelRequestResponse]


class CustomerProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    full_name: str
    email: str | None
    phone: str | None
