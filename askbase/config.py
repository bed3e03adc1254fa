"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuerySettings(BaseModel):
    """Question listing configuration."""

    # Number of questions returned per page by the filter query
    page_size: int = Field(default=5, ge=1)


class SeedSettings(BaseModel):
    """Initial data configuration."""

    # JSON file with initial tags, answers and questions
    # Can be set via SEED__PATH env var; None starts with an empty knowledge base
    path: Path | None = None


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override:

        ENVIRONMENT=production
        DEBUG=false
        QUERY__PAGE_SIZE=5
        SEED__PATH=/data/seed.json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows SEED__PATH syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    query: QuerySettings = QuerySettings()
    seed: SeedSettings = SeedSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
