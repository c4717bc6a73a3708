"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a working default: the app starts with no .env at all
    - get_settings() is cached (lru_cache), one instance per process
    - storage_backend selects MemoryStorage ("memory") or SqlStorage ("database")

Design Decisions:
    - Default backend is in-memory; a database is opt-in via STORAGE_BACKEND=database
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: Literal["memory", "database"] = "memory"

    # Database (storage_backend == "database")
    database_url: str = "sqlite+aiosqlite:///./weekly_focus.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Create tables on startup instead of running alembic (local SQLite only)
    database_create_schema: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    static_dir: str = "static"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
