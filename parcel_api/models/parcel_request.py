import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from parcel_api.db.base import Base
from parcel_api.models.domain import ParcelStatus

LAT_PRECISION = (10, 8)
LNG_PRECISION = (11, 8)
AMOUNT_PRECISION = (10, 2)


class ParcelRequestRow(Base):
    __tablename__ = "parcel_requests"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("profiles.id"), nullable=False, index=True
    )

    pickup_lat: Mapped[Decimal] = mapped_column(Numeric(*LAT_PRECISION), nullable=False)
    pickup_lng: Mapped[Decimal] = mapped_column(Numeric(*LNG_PRECISION), nullable=False)
    dropoff_lat: Mapped[Decimal] = mapped_column(Numeric(*LAT_PRECISION), nullable=False)
    dropoff_lng: Mapped[Decimal] = mapped_column(Numeric(*LNG_PRECISION), nullable=False)

    weight_kg: Mapped[Decimal] = mapped_column(Numeric(*AMOUNT_PRECISION), nullable=False)
    volume_m3: Mapped[Decimal] = mapped_column(Numeric(*AMOUNT_PRECISION), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    max_budget: Mapped[Decimal] = mapped_column(Numeric(*AMOUNT_PRECISION), nullable=False)
    deadline: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    status: Mapped[ParcelStatus] = mapped_column(
        Enum(ParcelStatus, name="parcel_status"), nullable=False, index=True
    )

    pickup_contact_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    pickup_contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    delivery_contact_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    delivery_contact_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)

    parcel_photos: Mapped[list[str]] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=False
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
