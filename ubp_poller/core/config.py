from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings loaded from environment variables and .env file.

    Account credentials are not part of the settings; they are rows in the
    accounts table of the store passed on the command line.
    """

    ENV: Literal["development", "staging", "production"] = "development"
    """Environment mode: selects the log renderer."""

    DEBUG: bool = False
    """Enable debug logging."""

    # Outbound HTTP
    PROXY_URL: Optional[str] = None
    """Forward proxy for every request to the partner API. Required."""

    UBP_API_TIMEOUT: float = 30.0
    """Timeout in seconds for partner API requests."""

    # Notifications
    SLACK_HOOK_URL: Optional[str] = None
    """Webhook receiving one message per new transaction. Required with --notify."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing .env repeatedly."""
    return Settings()
