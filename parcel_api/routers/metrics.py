from fastapi import APIRouter

from parcel_api.observability import metrics_store
from parcel_api.schemas.metrics import MetricsResponse, ParcelRequestActivity

router = APIRouter(prefix="/metrics", tags=["metrics"])

# ParcelRequestActivity field -> counter bumped by the parcel request service
_ACTIVITY_COUNTERS = {
    "created": "parcel_request_created_total",
    "updated": "parcel_request_updated_total",
    "deleted": "parcel_request_deleted_total",
    "version_conflicts": "parcel_request_version_conflict_total",
    "storage_errors": "parcel_request_storage_error_total",
}


@router.get("", summary="Observability metrics", response_model=MetricsResponse)
def metrics_endpoint() -> MetricsResponse:
    snapshot = metrics_store.snapshot()
    counters = snapshot.counters or {}

    activity = ParcelRequestActivity(
        **{field: counters.get(name, 0) for field, name in _ACTIVITY_COUNTERS.items()}
    )
    return MetricsResponse(
        parcel_requests=activity,
        counters=counters,
        timings=snapshot.timings or {},
    )
