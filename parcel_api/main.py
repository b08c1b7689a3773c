import time
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from parcel_api.config import allowed_origins, ensure_secure_runtime_settings, settings
from parcel_api.db.migration_check import prepare_schema
from parcel_api.db.session import engine
from parcel_api.observability import configure_logging, log_event, metrics_store, set_request_id
from parcel_api.routers.health import router as health_router
from parcel_api.routers.metrics import router as metrics_router
from parcel_api.routers.parcel_requests import router as parcel_requests_router


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging(settings.log_level)
    ensure_secure_runtime_settings()
    prepare_schema(engine)
    yield


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Parcel delivery requests posted by marketplace customers",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next) -> Response:
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    set_request_id(request_id)

    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start

    response.headers["X-Request-ID"] = request_id
    metrics_store.increment("http_requests_total")
    metrics_store.observe("http_request_duration_seconds", elapsed)
    log_event(
        "http_request",
        parcel_request_id=request.path_params.get("parcel_request_id"),
    )
    return response


app.include_router(health_router)
app.include_router(parcel_requests_router)
app.include_router(metrics_router)
