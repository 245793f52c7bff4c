"""Application configuration."""

import os
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_bot.adapters.off_client import DEFAULT_BASE_URL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    telegram_bot_token: str = Field(
        validation_alias=AliasChoices("telegram_bot_token", "bot_token")
    )
    cache_path: Path = Path("calorie_cache.json")
    ledger_path: Path = Path("calories.json")
    ledger_timezone: str = "UTC"
    off_base_url: str = DEFAULT_BASE_URL
    off_timeout_seconds: float = 15
    polling_timeout_seconds: int = 30
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("telegram_bot_token")
    @classmethod
    def _require_token(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value
