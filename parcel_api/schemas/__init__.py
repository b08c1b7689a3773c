from parcel_api.schemas.parcel_request import (
    CustomerProfileResponse,
    ParcelRequestCreate,
    ParcelRequestListResponse,
    ParcelRequestResponse,
    ParcelRequestUpdate,
)

__all__ = [
    "ParcelRequestCreate",
    "ParcelRequestUpdate",
    "ParcelRequestResponse",
    "ParcelRequestListResponse",
    "CustomerProfileResponse",
]
