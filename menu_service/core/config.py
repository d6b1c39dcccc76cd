"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Menu Service"

    # Menu seed data (defaults to the packaged menu.yaml)
    menu_seed_file: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_request_bodies: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
