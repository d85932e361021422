"""Runtime configuration for the local Maven artifact finder."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from ``MVNLOCAL_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MVNLOCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field("mvnlocal artifact finder")
    version: str = Field("0.1.0")

    # Local repository
    local_repository: str = Field("~/.m2/repository", validate_default=True)
    # Empty means every declared dependency, whatever its scope.
    dependency_scopes: List[str] = Field(default_factory=list)

    # ASGI server
    host: str = Field("127.0.0.1")
    port: int = Field(8000)

    # Logging
    log_level: str = Field("INFO")
    log_format: str = Field("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    @field_validator("local_repository")
    @classmethod
    def _expand_user(cls, value: str) -> str:
        # Only the configured location knows about the user's home directory.
        return os.path.expanduser(value)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
