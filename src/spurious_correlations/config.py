"""Configuration management using Pydantic Settings.

Every field can be overridden with a ``SPURIOUS_``-prefixed environment
variable (``SPURIOUS_MONTHS_BACK=60``) or a ``.env`` file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from spurious_correlations.schemas import Granularity


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPURIOUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "spurious-correlations"
    app_env: Literal["development", "production", "test"] = "development"
    debug: bool = False

    # Render cycle defaults
    months_back: int = Field(default=36, ge=1)
    granularity: Granularity = Granularity.MONTHLY
    pair_count: int = Field(default=50, ge=1)
    seed: int | None = None

    # Optional JSON list of spec mappings replacing the built-in pool
    pool_file: Path | None = None


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings  # noqa: PLW0603
    _settings = None
