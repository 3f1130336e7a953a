from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Warranty Manager API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./warranty_manager.db"
    cors_origins: list[str] = ["http://localhost:5000"]

    # Warranty rules
    warranty_years: int = 3
    expiring_soon_days: int = 90
    enforce_extension_after_default: bool = True

    # Projections / analytics
    strict_references: bool = False  # raise on dangling brand/product references
    analytics_top_n: int = 5

    # Support requests
    support_country_code: str = "PT"
    default_owner_id: str = "default"

    seed_brands: bool = True

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_services: str = "INFO"         # warranty_manager.application.services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
