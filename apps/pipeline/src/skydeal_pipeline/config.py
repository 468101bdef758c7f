"""Pipeline configuration via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class PipelineSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SKYDEAL_PIPELINE_", env_file=".env", extra="ignore"
    )

    # Amadeus offers carry no passenger list; the search request's count is used
    default_passengers: int = 1

    default_sort: str = "PRICE"

    log_level: str = "INFO"


settings = PipelineSettings()
