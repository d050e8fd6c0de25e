"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    list_delay_seconds: float = Field(default=1.0, ge=0.0)
    mutation_delay_seconds: float = Field(default=0.5, ge=0.0)
    serialize_mutations: bool = False
    image_dir: Path = Path(".cache/images")
    effect_buffer_size: int = Field(default=64, ge=0)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
