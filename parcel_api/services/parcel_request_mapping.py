"""Conversion between the domain record and the ``parcel_requests`` row."""

from typing import Any

from parcel_api.models.domain import ParcelRequestRecord
from parcel_api.models.parcel_request import ParcelRequestRow

# Record fields that map one-to-one onto columns of the same name.
COLUMN_FIELDS: tuple[str, ...] = (
    "customer_id",
    "pickup_lat",
    "pickup_lng",
    "dropoff_lat",
    "dropoff_lng",
    "weight_kg",
    "volume_m3",
    "description",
    "max_budget",
    "deadline",
    "status",
    "pickup_contact_name",
    "pickup_contact_phone",
    "delivery_contact_name",
    "delivery_contact_phone",
    "parcel_photos",
    "created_at",
    "updated_at",
)

# Never rewritten once the row exists.
INSERT_ONLY_COLUMNS: frozenset[str] = frozenset({"created_at"})


def record_to_row_values(record: ParcelRequestRecord) -> dict[str, Any]:
    values: dict[str, Any] = {name: getattr(record, name) for name in COLUMN_FIELDS}
    if values["parcel_photos"] is not None:
        values["parcel_photos"] = list(values["parcel_photos"])
    if record.id is not None:
        values["id"] = record.id
    return values


def record_from_row(row: ParcelRequestRow) -> ParcelRequestRecord:
    values = {name: getattr(row, name) for name in COLUMN_FIELDS}
    values["parcel_photos"] = list(row.parcel_photos or [])
    return ParcelRequestRecord(id=row.id, version=row.version, **values)


def new_row(record: ParcelRequestRecord) -> ParcelRequestRow:
    return ParcelRequestRow(**record_to_row_values(record))


def apply_to_row(row: ParcelRequestRow, record: ParcelRequestRecord) -> ParcelRequestRow:
    for name, value in record_to_row_values(record).items():
        if name == "id" or name in INSERT_ONLY_COLUMNS:
            continue
        setattr(row, name, value)
    return row
