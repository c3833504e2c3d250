"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("POKEDEX_ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from ``POKEDEX_*`` environment variables."""

    api_base_url: str = "https://pokeapi.co/api/v2"
    cache_ttl_seconds: float = Field(default=300.0, gt=0)
    http_timeout_seconds: float = Field(default=10.0, gt=0)
    retry_attempts: int = Field(default=1, ge=0)
    retry_delay_seconds: float = Field(default=0.3, ge=0)
    log_level: str = "WARNING"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
