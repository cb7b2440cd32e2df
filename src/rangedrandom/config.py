"""
RangedRandom Configuration

Loads seeding configuration from environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rangedrandom.constants import SEED_VALUE_MAX, SEED_VALUE_MIN


class Settings(BaseSettings):
    """RangedRandom settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RANGEDRANDOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base seed for lazily created instances (None = fresh entropy)
    seed: Optional[int] = Field(default=None, ge=SEED_VALUE_MIN, le=SEED_VALUE_MAX)

    # Log the seed of every lazily created instance so runs can be replayed
    log_seeds: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
