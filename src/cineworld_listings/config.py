"""Application configuration using pydantic-settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3000, validation_alias=AliasChoices("api_port", "port"))

    # Origins allowed to call the API from a browser. Requests without an
    # Origin header (curl, health checks) are always allowed.
    cors_origin_regex: str = (
        r"^(http://localhost(:\d+)?"
        r"|https://(www\.)?lewishowles\.github\.io"
        r"|https://([a-zA-Z0-9-]+\.)*howles\.dev)$"
    )

    # Branch pages show local times without a date or zone
    timezone: str = "Europe/London"
    locale: str = "en-GB"

    # Browser session
    browser_headless: bool = True
    navigation_timeout_ms: int = 60000
    navigation_wait_until: str = "networkidle"

    log_level: str = "INFO"


# Global settings instance
settings = Settings()
