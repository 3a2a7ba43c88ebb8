"""Client configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Client settings loaded from QSOLOG_* environment variables."""

    api_base_url: str = "http://localhost:8080/api/v1"
    request_timeout_seconds: float = 10.0
    session_storage_path: Path | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="QSOLOG_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
