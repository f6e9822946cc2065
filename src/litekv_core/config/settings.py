"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from litekv_core.constants import DEFAULT_API_URL


class Settings(BaseSettings):
    """Central configuration for the LiteKV client and CLI."""

    model_config = SettingsConfigDict(env_prefix="LITEKV_", env_file=".env")

    # --- Service ---
    app_id: str | None = Field(
        default=None,
        description="Application id scoping every key-value operation",
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the LiteKV HTTP API",
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        description="Per-request timeout in seconds (None waits indefinitely)",
    )

    # --- Cache ---
    should_cache: bool = Field(
        default=False,
        description="Keep a local read-through cache for the lifetime of the store",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level name",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for collectors",
    )

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the base URL so paths join with a single slash."""
        return value.rstrip("/")

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float | None) -> float | None:
        """Reject non-positive timeouts."""
        if value is not None and value <= 0:
            msg = "request_timeout_seconds must be positive"
            raise ValueError(msg)
        return value
