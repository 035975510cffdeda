from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Field Service Reports API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./field_reports.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Fault code alerts (Slack incoming webhook; empty disables delivery)
    slack_webhook_url: str = ""
    public_base_url: str = "http://localhost:3000"
    notification_timeout: float = 10.0

    # Report list paging
    default_per_page: int = 20
    max_per_page: int = 100

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_notifications: str = "INFO"    # fault code alert delivery

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
