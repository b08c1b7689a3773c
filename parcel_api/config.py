from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_APP_MODES = {"demo", "pilot", "production"}
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


class Settings(BaseSettings):
    app_name: str = "Parcel Request Service"

    database_url: str = Field(
        default="sqlite+pysqlite:///./parcel_api.db",
        validation_alias="PARCEL_DATABASE_URL",
    )
    cors_allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    testing: bool = Field(default=False, validation_alias="PARCEL_TESTING")
    app_mode: str = Field(default="demo", validation_alias="APP_MODE")
    auto_create_schema: bool = Field(default=True, validation_alias="AUTO_CREATE_SCHEMA")
    require_migrations: bool = Field(default=False, validation_alias="REQUIRE_MIGRATIONS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @field_validator("app_mode")
    @classmethod
    def validate_app_mode(cls, value: str) -> str:
        mode = value.lower().strip()
        if mode not in ALLOWED_APP_MODES:
            allowed = ", ".join(sorted(ALLOWED_APP_MODES))
            raise ValueError(f"APP_MODE must be one of: {allowed}")
        return mode

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper().strip()
        if level not in ALLOWED_LOG_LEVELS:
            allowed = ", ".join(sorted(ALLOWED_LOG_LEVELS))
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return level


settings = Settings()


def allowed_origins() -> list[str]:
    return [origin.strip() for origin in settings.cors_allowed_origins.split(",") if origin.strip()]


def is_production_mode() -> bool:
    return settings.app_mode == "production"


def ensure_secure_runtime_settings() -> None:
    """Fail fast when production-like runtime uses insecure defaults."""
    if not settings.testing and _is_sqlite_url(settings.database_url):
        raise RuntimeError("PARCEL_DATABASE_URL must use postgres when PARCEL_TESTING is false")
    if is_production_mode() and settings.auto_create_schema:
        raise RuntimeError("AUTO_CREATE_SCHEMA must be disabled in APP_MODE=production")


def _is_sqlite_url(database_url: str) -> bool:
    value = database_url.strip().lower()
    return value.startswith("sqlite")
