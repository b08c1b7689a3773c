import os
import uuid

os.environ.setdefault("PARCEL_DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("PARCEL_TESTING", "true")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

import parcel_api.models  # noqa: E402, F401
from parcel_api.config import settings  # noqa: E402
from parcel_api.db.base import Base  # noqa: E402
from parcel_api.db.session import engine as app_engine  # noqa: E402
from parcel_api.main import app  # noqa: E402
from parcel_api.models.profile import ProfileRow  # noqa: E402
from parcel_api.observability import metrics_store  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def enable_testing_mode():
    original = settings.testing
    settings.testing = True
    yield
    settings.testing = original


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=app_engine)
    Base.metadata.create_all(bind=app_engine)
    yield


@pytest.fixture(autouse=True)
def reset_metrics_store():
    metrics_store.reset()
    yield


@pytest.fixture
def db_session():
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=app_engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def customer_id(db_session) -> uuid.UUID:
    profile_id = uuid.uuid4()
    db_session.add(
        ProfileRow(
            id=profile_id,
            full_name="Ada Sender",
            email="ada@example.com",
            phone="+10000000001",
        )
    )
    db_session.commit()
    return profile_id
