"""Lightweight configuration for the Conquest game."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CONQUEST_", env_file=".env", env_file_encoding="utf-8"
    )

    player_color: str = Field(default="Azul", min_length=1, description="Army the player controls")
    territory_count: int = Field(
        default=5,
        description="Number of territories drawn from the seed table",
        gt=0,
    )
    seed: str | None = Field(
        default=None,
        description="Seed for a reproducible game; unset draws from the OS",
    )
    log_level: LogLevel = Field(default="WARNING", description="Root logging level")
    color_output: bool = Field(default=True, description="Color army names in the console")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
