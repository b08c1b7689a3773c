# Import SQLAlchemy models so they register on Base.metadata
from parcel_api.models.parcel_request import ParcelRequestRow  # noqa: F401
from parcel_api.models.profile import ProfileRow  # noqa: F401
