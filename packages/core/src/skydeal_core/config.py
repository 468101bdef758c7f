"""Core configuration via environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class CoreSettings(BaseSettings):
    """Settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="SKYDEAL_", env_file=".env", extra="ignore"
    )

    # Replaces the bundled airport table when set
    airports_file: Path | None = None

    default_currency: str = "EUR"


settings = CoreSettings()
