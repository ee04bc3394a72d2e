"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (database_url, secret_key) come from the environment only, with no defaults
    - get_settings() is cached (lru_cache): single instance per process
    - The engine is built from these settings in the lifespan, never at import time

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Non-secret settings carry defaults that work with docker-compose
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    secret_key: str
    access_token_expire_minutes: int = 720
    auth_required: bool = False

    # Bootstrap
    seed_default_users: bool = True
    default_user_password: str = "password"

    # Clinic calendar
    clinic_timezone: str = "UTC"

    @field_validator("clinic_timezone")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v}") from e
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def clinic_zone(self) -> ZoneInfo:
        return ZoneInfo(self.clinic_timezone)


@lru_cache
def get_settings() -> Settings:
    return Settings()
