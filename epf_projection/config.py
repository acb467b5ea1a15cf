"""Application settings loaded from environment variables.

Variables are prefixed with ``EPF_`` (e.g. ``EPF_LOG_LEVEL=DEBUG``) and may also
come from a local ``.env`` file.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from epf_projection.core.projection import MAX_YEARS


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="EPF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Run Flask in debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        description="Origins allowed to call /api/*",
    )
    max_years: int = Field(
        default=100,
        ge=1,
        le=MAX_YEARS,
        description="Longest horizon the API will simulate",
    )
    service_name: str = Field(default="epf-projection")
