"""Application configuration management."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment or `.env`."""

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_decimals: int = Field(
        default=6, alias="BALANCE_MAX_DECIMALS", ge=1, le=18
    )
    subscript_threshold: int = Field(
        default=4, alias="BALANCE_SUBSCRIPT_THRESHOLD", ge=1, le=18
    )
    significant_digits: int = Field(
        default=4, alias="BALANCE_SIGNIFICANT_DIGITS", ge=1, le=18
    )

    output_format: str = Field(
        default="table",
        alias="BALANCE_OUTPUT",
        pattern="^(text|json|table)$",
    )

    cache_ttl_seconds: int = Field(
        default=30, alias="CACHE_TTL_SECONDS", ge=1, le=3600
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", alias="LOG_LEVEL"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Return cached Settings instance, raising a helpful message on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid configuration: {exc}") from exc


__all__ = ["Settings", "load_settings"]
