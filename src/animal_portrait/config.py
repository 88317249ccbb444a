"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    session_ttl_seconds: int = 3600
    max_upload_bytes: int = 10 * 1024 * 1024
    progress_step: int = Field(default=10, gt=0)
    progress_cap: int = 90
    progress_interval_seconds: float = 0.3
    generation_delay_seconds: float = 3.0
    completion_delay_seconds: float = 0.5
    payment_delay_seconds: float = 2.0

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
