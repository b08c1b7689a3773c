"""create profiles, parcel_requests

Revision ID: 20261017_0001
Revises:
Create Date: 2026-10-17 00:00:00
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "20261017_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

parcel_status = sa.Enum(
    "OPEN",
    "MATCHED",
    "IN_TRANSIT",
    "DELIVERED",
    "CANCELLED",
    name="parcel_status",
)


def upgrade() -> None:
    bind = op.get_bind()
    parcel_status.create(bind, checkfirst=True)

    op.create_table(
        "profiles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "parcel_requests",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("customer_id", sa.Uuid(), nullable=False),
        sa.Column("pickup_lat", sa.Numeric(precision=10, scale=8), nullable=False),
        sa.Column("pickup_lng", sa.Numeric(precision=11, scale=8), nullable=False),
        sa.Column("dropoff_lat", sa.Numeric(precision=10, scale=8), nullable=False),
        sa.Column("dropoff_lng", sa.Numeric(precision=11, scale=8), nullable=False),
        sa.Column("weight_kg", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("volume_m3", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("max_budget", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", parcel_status, nullable=False),
        sa.Column("pickup_contact_name", sa.String(length=255), nullable=True),
        sa.Column("pickup_contact_phone", sa.String(length=50), nullable=True),
        sa.Column("delivery_contact_name", sa.String(length=255), nullable=True),
        sa.Column("delivery_contact_phone", sa.String(length=50), nullable=True),
        sa.Column(
            "parcel_photos",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["customer_id"], ["profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_parcel_requests_customer_id", "parcel_requests", ["customer_id"], unique=False
    )
    op.create_index("ix_parcel_requests_status", "parcel_requests", ["status"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_parcel_requests_status", table_name="parcel_requests")
    op.drop_index("ix_parcel_requests_customer_id", table_name="parcel_requests")
    op.drop_table("parcel_requests")
    op.drop_table("profiles")

    bind = op.get_bind()
    parcel_status.drop(bind, checkfirst=True)
