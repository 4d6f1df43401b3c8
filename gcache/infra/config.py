"""Configuration loading for gcache."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(
        "localhost",
        description="Bind host for the HTTP server",
        validation_alias=AliasChoices("HOST", "GCACHE_HOST"),
    )
    port: int = Field(
        5000,
        ge=1,
        le=65535,
        description="Bind port for the HTTP server",
        validation_alias=AliasChoices("PORT", "GCACHE_PORT"),
    )
    max_size: int = Field(100, gt=0, description="Initial cache capacity in entries")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )
    log_format: Literal["json", "console"] = Field("json", description="Log format (json or console)")
    log_file: str | None = Field(
        None,
        description="Append logs to this file in addition to stdout",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
