"""
Configuration helpers for the gym records API.

Settings are read from environment variables once and cached, so that
routers/services/repositories do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

STORAGE_BACKENDS = {"sql", "json"}


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    database_url: str
    json_data_file: str
    log_level: str
    log_file: str | None
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _list(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "sql").strip().lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///gym.db").strip(),
        json_data_file=os.getenv("JSON_DATA_FILE", "gym_data.json").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=(os.getenv("LOG_FILE") or "").strip() or None,
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
    )
