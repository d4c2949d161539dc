"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FEED_URL = "https://raw.githubusercontent.com/KSMake/Canal_Discharge/main/BWO_merged_long.csv"


class Settings(BaseSettings):
    """Centralized configuration loaded from environment or .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    feed_url: str = Field(default=DEFAULT_FEED_URL, alias="CANALFLOW_FEED_URL")
    request_timeout: float = Field(default=30.0, alias="CANALFLOW_REQUEST_TIMEOUT")
    delimiter: str = Field(default=",", alias="CANALFLOW_DELIMITER")

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"delimiter must be a single character, got {value!r}")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
