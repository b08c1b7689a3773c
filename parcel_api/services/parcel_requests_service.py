import uuid
from datetime import datetime
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from parcel_api.models.domain import (
    SYSTEM_FIELDS,
    ParcelRequestRecord,
    ParcelStatus,
    prepare_for_insert,
    prepare_for_update,
    utc_now,
    validate_for_storage,
)
from parcel_api.models.parcel_request import ParcelRequestRow
from parcel_api.observability import log_event, metrics_store, observe_timing
from parcel_api.services.parcel_request_mapping import apply_to_row, new_row, record_from_row


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        metrics_store.increment("parcel_request_storage_error_total")
        raise


def _get_row(db: Session, parcel_request_id: uuid.UUID) -> ParcelRequestRow:
    row = db.get(ParcelRequestRow, parcel_request_id)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Parcel request not found"
        )
    return row


def create_parcel_request(
    db: Session,
    record: ParcelRequestRecord,
    now: datetime | None = None,
) -> ParcelRequestRecord:
    validate_for_storage(record)
    prepared = prepare_for_insert(record, now or utc_now())

    with observe_timing("parcel_request_create_seconds"):
        row = new_row(prepared)
        db.add(row)
        _commit(db)
        db.refresh(row)

    metrics_store.increment("parcel_request_created_total")
    log_event(
        "parcel_request_created",
        parcel_request_id=str(row.id),
        customer_id=str(row.customer_id),
    )
    return record_from_row(row)


def get_parcel_request(db: Session, parcel_request_id: uuid.UUID) -> ParcelRequestRecord:
    return record_from_row(_get_row(db, parcel_request_id))


def list_parcel_requests(
    db: Session,
    customer_id: uuid.UUID | None = None,
    status_filter: ParcelStatus | None = None,
) -> list[ParcelRequestRecord]:
    query = select(ParcelRequestRow)
    if customer_id:
        query = query.where(ParcelRequestRow.customer_id == customer_id)
    if status_filter:
        query = query.where(ParcelRequestRow.status == status_filter)
    rows = db.scalars(
        query.order_by(ParcelRequestRow.created_at.desc(), ParcelRequestRow.id.desc())
    )
    return [record_from_row(row) for row in rows]


def update_parcel_request(
    db: Session,
    parcel_request_id: uuid.UUID,
    changes: dict[str, Any],
    expected_version: int | None = None,
    now: datetime | None = None,
) -> ParcelRequestRecord:
    row = _get_row(db, parcel_request_id)
    if expected_version is not None and row.version != expected_version:
        metrics_store.increment("parcel_request_version_conflict_total")
        raise StaleDataError(
            f"parcel_requests {parcel_request_id} is at version {row.version}, "
            f"expected {expected_version}"
        )

    current = record_from_row(row)
    allowed = {key: value for key, value in changes.items() if key not in SYSTEM_FIELDS}
    if "status" in allowed and allowed["status"] is None:
        del allowed["status"]
    if "parcel_photos" in allowed and allowed["parcel_photos"] is None:
        allowed["parcel_photos"] = []
    updated = ParcelRequestRecord.model_validate({**current.model_dump(), **allowed})
    validate_for_storage(updated)
    updated = prepare_for_update(updated, now or utc_now())

    with observe_timing("parcel_request_update_seconds"):
        apply_to_row(row, updated)
        _commit(db)
        db.refresh(row)

    metrics_store.increment("parcel_request_updated_total")
    log_event(
        "parcel_request_updated",
        parcel_request_id=str(row.id),
        customer_id=str(row.customer_id),
    )
    return record_from_row(row)


def delete_parcel_request(db: Session, parcel_request_id: uuid.UUID) -> None:
    row = _get_row(db, parcel_request_id)
    customer_id = str(row.customer_id)
    db.delete(row)
    _commit(db)

    metrics_store.increment("parcel_request_deleted_total")
    log_event(
        "parcel_request_deleted",
        parcel_request_id=str(parcel_request_id),
        customer_id=customer_id,
    )
