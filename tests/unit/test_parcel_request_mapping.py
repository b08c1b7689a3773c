import uuid
from datetime import datetime, timezone
from decimal import Decimal

from parcel_api.models.domain import ParcelRequestRecord, ParcelStatus, prepare_for_insert
from parcel_api.models.parcel_request import ParcelRequestRow
from parcel_api.services.parcel_request_mapping import (
    apply_to_row,
    new_row,
    record_from_row,
    record_to_row_values,
)

NOW = datetime(2025, 5, 20, 9, 30, tzinfo=timezone.utc)


def _prepared_record() -> ParcelRequestRecord:
    return prepare_for_insert(
        ParcelRequestRecord(
            customer_id=uuid.uuid4(),
            pickup_lat=Decimal("12.34560000"),
            pickup_lng=Decimal("56.7891000"),
            dropoff_lat=Decimal("12.40000000"),
            dropoff_lng=Decimal("56.80000000"),
            weight_kg=Decimal("5.00"),
            volume_m3=Decimal("0.20"),
            max_budget=Decimal("100.00"),
            deadline=datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc),
            parcel_photos=["https://cdn.example.com/p/1.jpg"],
        ),
        NOW,
    )


def test_row_values_use_column_names_and_omit_unassigned_id():
    values = record_to_row_values(_prepared_record())

    assert "id" not in values
    assert "version" not in values
    assert values["status"] is ParcelStatus.OPEN
    assert values["parcel_photos"] == ["https://cdn.example.com/p/1.jpg"]
    assert set(values) <= {column.name for column in ParcelRequestRow.__table__.columns}


def test_row_values_copy_photo_list():
    record = _prepared_record()

    values = record_to_row_values(record)
    values["parcel_photos"].append("extra")

    assert record.parcel_photos == ["https://cdn.example.com/p/1.jpg"]


def test_record_from_row_carries_identity_and_version():
    row = new_row(_prepared_record())
    row.id = uuid.uuid4()
    row.version = 3

    record = record_from_row(row)

    assert record.id == row.id
    assert record.version == 3
    assert record.is_transient is False
    assert record.customer_id == row.customer_id


def test_record_from_row_treats_null_photos_as_empty():
    row = new_row(_prepared_record())
    row.id = uuid.uuid4()
    row.version = 1
    row.parcel_photos = None

    assert record_from_row(row).parcel_photos == []


def test_apply_to_row_never_rewrites_created_at():
    row = new_row(_prepared_record())
    original_created = row.created_at
    changed = _prepared_record().model_copy(
        update={"created_at": datetime(2030, 1, 1, tzinfo=timezone.utc), "description": "fragile"}
    )

    apply_to_row(row, changed)

    assert row.created_at == original_created
    assert row.description == "fragile"
