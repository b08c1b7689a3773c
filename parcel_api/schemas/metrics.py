from pydantic import BaseModel


class TimingMetricStats(BaseModel):
    count: int
    avg_s: float
    max_s: float


class ParcelRequestActivity(BaseModel):
    """Parcel request lifecycle counts since the process started."""

    created: int = 0
    updated: int = 0
    deleted: int = 0
    version_conflicts: int = 0
    storage_errors: int = 0


class MetricsResponse(BaseModel):
    parcel_requests: ParcelRequestActivity
    counters: dict[str, int]
    timings: dict[str, TimingMetricStats]
