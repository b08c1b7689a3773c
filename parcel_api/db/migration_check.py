"""Startup schema handling for the ``parcel_requests`` / ``profiles`` tables.

Deployments that run Alembic set ``REQUIRE_MIGRATIONS`` and the app refuses to
start unless the database sits at the migration head. Demo and test setups
let the app create the tables itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Engine

from parcel_api.config import is_production_mode, settings
from parcel_api.db.base import Base
from parcel_api.observability import log_event

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


class SchemaOutOfDateError(RuntimeError):
    def __init__(self, current: Optional[str], head: str) -> None:
        super().__init__(
            f"Parcel request schema is at revision {current or '<none>'}, "
            f"expected {head}. Run: alembic upgrade head"
        )
        self.current = current
        self.head = head


def get_alembic_head_revision() -> str:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    return ScriptDirectory.from_config(config).get_current_head()


def get_current_db_revision(engine: Engine) -> Optional[str]:
    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


def assert_db_is_up_to_date(engine: Engine) -> None:
    current = get_current_db_revision(engine)
    head = get_alembic_head_revision()
    if current != head:
        raise SchemaOutOfDateError(current, head)


def maybe_create_schema(engine: Engine) -> bool:
    """Create missing tables when ``AUTO_CREATE_SCHEMA`` allows it.

    Returns whether ``create_all`` ran.
    """
    if not settings.auto_create_schema:
        return False
    if is_production_mode():
        raise RuntimeError("AUTO_CREATE_SCHEMA must be disabled in APP_MODE=production")

    import parcel_api.models  # noqa: F401 (registers ParcelRequestRow and ProfileRow)

    Base.metadata.create_all(bind=engine)
    return True


def prepare_schema(engine: Engine) -> None:
    if settings.require_migrations:
        assert_db_is_up_to_date(engine)
        log_event("parcel_schema_verified")
    elif maybe_create_schema(engine):
        log_event("parcel_schema_created")
