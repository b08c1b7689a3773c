import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from parcel_api.db.session import get_db
from parcel_api.errors import MissingRequiredFieldError, ParcelRequestError, UnknownCustomerError
from parcel_api.models.domain import ParcelRequestRecord, ParcelStatus, validate_for_storage
from parcel_api.observability import log_event
from parcel_api.schemas.parcel_request import (
    CustomerProfileResponse,
    ParcelRequestCreate,
    ParcelRequestListResponse,
    ParcelRequestResponse,
    ParcelRequestUpdate,
)
from parcel_api.services.parcel_requests_service import (
    create_parcel_request,
    delete_parcel_request,
    get_parcel_request,
    list_parcel_requests,
    update_parcel_request,
)
from parcel_api.services.profile_lookup import ProfileLookup, get_profile_lookup

router = APIRouter(prefix="/api/v1/parcel-requests", tags=["parcel-requests"])


def _translate_domain_error(err: ParcelRequestError) -> HTTPException:
    detail = {"code": err.code, "message": err.message}
    if isinstance(err, MissingRequiredFieldError):
        detail["field"] = err.field
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


def _conflict(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message)


@router.post(
    "",
    response_model=ParcelRequestResponse,
    summary="Create parcel request",
    status_code=status.HTTP_201_CREATED,
)
def create_parcel_request_endpoint(
    payload: ParcelRequestCreate,
    db: Session = Depends(get_db),
    profile_lookup: ProfileLookup = Depends(get_profile_lookup),
) -> ParcelRequestResponse:
    record = ParcelRequestRecord(**payload.model_dump())
    try:
        validate_for_storage(record)
        if profile_lookup(db, record.customer_id) is None:
            raise UnknownCustomerError(str(record.customer_id))
        record = create_parcel_request(db, record)
    except ParcelRequestError as err:
        raise _translate_domain_error(err) from err
    except IntegrityError as err:
        log_event("parcel_request_create_rejected", customer_id=str(payload.customer_id))
        raise _conflict("Parcel request violates a storage constraint") from err

    return ParcelRequestResponse.model_validate(record, from_attributes=True)


@router.get("", response_model=ParcelRequestListResponse, summary="List parcel requests")
def list_parcel_requests_endpoint(
    db: Session = Depends(get_db),
    customer_id: uuid.UUID | None = Query(default=None),
    status_filter: ParcelStatus | None = Query(default=None, alias="status"),
) -> ParcelRequestListResponse:
    records = list_parcel_requests(db, customer_id=customer_id, status_filter=status_filter)
    return ParcelRequestListResponse(
        items=[ParcelRequestResponse.model_validate(r, from_attributes=True) for r in records]
    )


@router.get(
    "/{parcel_request_id}", response_model=ParcelRequestResponse, summary="Get parcel request"
)
def get_parcel_request_endpoint(
    parcel_request_id: uuid.UUID,
    db: Session = Depends(get_db),
) -> ParcelRequestResponse:
    record = get_parcel_request(db, parcel_request_id)
    return ParcelRequestResponse.model_validate(record, from_attributes=True)


@router.patch(
    "/{parcel_request_id}",
    response_model=ParcelRequestResponse,
    summary="Update parcel request",
)
def update_parcel_request_endpoint(
    parcel_request_id: uuid.UUID,
    payload: ParcelRequestUpdate,
    db: Session = Depends(get_db),
) -> ParcelRequestResponse:
    changes = payload.model_dump(exclude_unset=True, exclude={"version"})
    try:
        record = update_parcel_request(
            db, parcel_request_id, changes, expected_version=payload.version
        )
    except ParcelRequestError as err:
        raise _translate_domain_error(err) from err
    except StaleDataError as err:
        log_event("parcel_request_version_conflict", parcel_request_id=str(parcel_request_id))
        raise _conflict("Parcel request was modified concurrently; reload and retry") from err
    except IntegrityError as err:
        raise _conflict("Parcel request violates a storage constraint") from err

    return ParcelRequestResponse.model_validate(record, from_attributes=True)


@router.delete(
    "/{parcel_request_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete parcel request",
)
def delete_parcel_request_endpoint(
    parcel_request_id: uuid.UUID,
    db: Session = Depends(get_db),
) -> Response:
    delete_parcel_request(db, parcel_request_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{parcel_request_id}/customer",
    response_model=CustomerProfileResponse,
    summary="Fetch the customer profile that owns a parcel request",
)
def get_parcel_request_customer_endpoint(
    parcel_request_id: uuid.UUID,
    db: Session = Depends(get_db),
    profile_lookup: ProfileLookup = Depends(get_profile_lookup),
) -> CustomerProfileResponse:
    record = get_parcel_request(db, parcel_request_id)
    profile = profile_lookup(db, record.customer_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return CustomerProfileResponse.model_validate(profile, from_attributes=True)
