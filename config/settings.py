"""
Configuration Settings

Centralized configuration management using Pydantic and environment variables.
"""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Local overrides can be placed in a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Leasify API settings
    leasify_api_base_url: str = "https://app.leasify.se/api/v3"
    request_timeout_seconds: Optional[float] = None  # None waits indefinitely
    device_name: str = "ACME Demo App"

    # Durable credential slot (plain text bearer token)
    token_file: Path = Path.home() / ".leasify" / "token"

    # Dashboard settings
    poll_interval_seconds: int = 5
    page_size: int = 8
    demo_mode: bool = False  # Serve static demo data instead of the live API

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "json"

    # Application settings
    environment: str = "development"
    debug: bool = False


# Singleton instance
settings = Settings()
