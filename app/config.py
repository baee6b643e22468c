"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    inquiry_api_base_url: str = Field(
        default="http://localhost:8080/api",
        description="Base URL of the remote API that stores inquiry templates",
        min_length=1,
    )
    inquiry_api_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for the template API before giving up",
        gt=0,
    )
    share_base_url: str = Field(
        default="http://localhost:3000",
        description="Public front end URL used to build template share links",
        min_length=1,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level configured when the application starts",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )

    @model_validator(mode="after")
    def _validate_urls(self) -> "Settings":
        for name in ("inquiry_api_base_url", "share_base_url"):
            value = getattr(self, name)
            if not value.startswith(("http://", "https://")):
                raise ValueError(f"{name.upper()} must start with http:// or https://")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
