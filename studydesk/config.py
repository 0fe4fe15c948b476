"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STUDYDESK_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "StudyDesk"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Local storage
    # A single SQLite file plays the role of per-browser local storage
    storage_path: Path = Path("studydesk.db")

    @computed_field
    @property
    def storage_url(self) -> str:
        """SQLAlchemy URL for the local storage file."""
        return f"sqlite:///{self.storage_path}"

    # Populate empty collections with the demo records on first start
    seed_demo_data: bool = True

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def sanitize_error(error: Exception, *, generic_message: str = "An internal error occurred.") -> str:
    """
    Return a user-safe error message.

    In development, returns the full exception string for debugging.
    In staging/production, returns a generic message to avoid leaking internals.
    """
    settings = get_settings()
    if settings.environment == "development":
        return str(error)
    return generic_message
