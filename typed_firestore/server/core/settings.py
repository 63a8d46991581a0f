"""Process-wide settings loaded from the environment.

Per-call behaviour (batch sizes, throttling) is configured through the
option models in ``runtime.chunking.definitions``. Only switches that apply
to a whole process, such as progress verbosity, live here.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    verbose: bool = Field(
        default=False,
        description="Log progress of batched reads and chunk processing",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next read picks up the environment again."""
    get_settings.cache_clear()
