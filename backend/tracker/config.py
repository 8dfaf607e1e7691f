"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from the environment or .env, never from code paths
    - get_settings() is cached (lru_cache) — single instance per process
    - log_format is either "json" or "text"; anything else fails at startup

Design Decisions:
    - Defaults target the docker-compose Postgres so a bare checkout starts
    - Pool settings are ignored for sqlite URLs (see DatabaseSessionManager)
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tracker settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Tracker API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://tracker:tracker@db:5432/tracker"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v: str) -> str:
        """Plain postgres URLs are rewritten to the asyncpg dialect."""
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return "postgresql+asyncpg://" + v[len(prefix):]
        return v

    # HTTP
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
