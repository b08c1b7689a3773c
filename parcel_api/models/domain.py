"""Storage-independent parcel request record and its lifecycle rules.

A record starts out transient: every field may be unset. ``prepare_for_insert``
and ``prepare_for_update`` are pure functions that return an adjusted copy,
so the defaulting rules can be exercised without a database.
"""

import enum
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from parcel_api.errors import MissingRequiredFieldError, TimestampOrderError


class ParcelStatus(str, enum.Enum):
    OPEN = "OPEN"
    MATCHED = "MATCHED"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


DEFAULT_STATUS = ParcelStatus.OPEN

# Checked in this order, so the first missing one is reported.
REQUIRED_FIELDS: tuple[str, ...] = (
    "customer_id",
    "pickup_lat",
    "pickup_lng",
    "dropoff_lat",
    "dropoff_lng",
    "weight_kg",
    "volume_m3",
    "max_budget",
    "deadline",
)

# Owned by storage and the lifecycle hooks, never by caller updates.
SYSTEM_FIELDS: frozenset[str] = frozenset({"id", "created_at", "updated_at", "version"})


def _as_utc(value: datetime) -> datetime:
    # naive values are read as UTC; SQLite drops offsets on storage
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ParcelRequestRecord(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: uuid.UUID | None = None
    customer_id: uuid.UUID | None = None

    pickup_lat: Decimal | None = None
    pickup_lng: Decimal | None = None
    dropoff_lat: Decimal | None = None
    dropoff_lng: Decimal | None = None

    weight_kg: Decimal | None = None
    volume_m3: Decimal | None = None
    description: str | None = None
    max_budget: Decimal | None = None
    deadline: datetime | None = None

    status: ParcelStatus | None = None

    pickup_contact_name: str | None = None
    pickup_contact_phone: str | None = None
    delivery_contact_name: str | None = None
    delivery_contact_phone: str | None = None

    parcel_photos: list[str] | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None
    version: int | None = None

    @field_validator("deadline", "created_at", "updated_at")
    @classmethod
    def normalize_to_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        return _as_utc(value)

    @property
    def is_transient(self) -> bool:
        return self.id is None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def prepare_for_insert(record: ParcelRequestRecord, now: datetime) -> ParcelRequestRecord:
    """Fill insert-time defaults without touching values the caller already set."""
    now = _as_utc(now)
    created_at = record.created_at or now
    updates: dict = {"created_at": created_at}
    if record.updated_at is None:
        # never earlier than a caller-supplied created_at
        updates["updated_at"] = max(now, created_at)
    if record.status is None:
        updates["status"] = DEFAULT_STATUS
    if record.parcel_photos is None:
        updates["parcel_photos"] = []
    else:
        updates["parcel_photos"] = list(record.parcel_photos)
    return record.model_copy(update=updates)


def prepare_for_update(record: ParcelRequestRecord, now: datetime) -> ParcelRequestRecord:
    now = _as_utc(now)
    if record.created_at is not None:
        now = max(now, record.created_at)
    return record.model_copy(update={"updated_at": now})


def validate_for_storage(record: ParcelRequestRecord) -> None:
    for field_name in REQUIRED_FIELDS:
        if getattr(record, field_name) is None:
            raise MissingRequiredFieldError(field_name)
    if (
        record.created_at is not None
        and record.updated_at is not None
        and record.updated_at < record.created_at
    ):
        raise TimestampOrderError(record.created_at.isoformat(), record.updated_at.isoformat())
