from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from esindexer.exceptions import ConfigError


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "esindexer"
    log_level: str = "INFO"
    json_logs: bool = False
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


class ElasticsearchConfig(BaseModel):
    """Target search engine. Port is kept as text; it is only interpolated into URLs."""

    host: str = "127.0.0.1"
    port: str = "9200"
    timeout: float = 30.0  # seconds, per request


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="ESINDEXER_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    elasticsearch: ElasticsearchConfig = ElasticsearchConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigError(f"Invalid esindexer configuration: {exc}") from exc
