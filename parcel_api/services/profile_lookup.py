import uuid
from datetime import datetime
from typing import Protocol

from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from parcel_api.models.profile import ProfileRow


class ProfileSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    full_name: str
    email: str | None
    phone: str | None
    created_at: datetime


class ProfileLookup(Protocol):
    def __call__(self, db: Session, profile_id: uuid.UUID) -> ProfileSummary | None: ...


def fetch_profile(db: Session, profile_id: uuid.UUID) -> ProfileSummary | None:
    row = db.get(ProfileRow, profile_id)
    if row is None:
        return None
    return ProfileSummary.model_validate(row)


def get_profile_lookup() -> ProfileLookup:
    return fetch_profile
