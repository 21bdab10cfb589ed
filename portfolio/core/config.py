"""
Application configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import logging
import os

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Portfolio owner
    github_username: str = "ThiagoPereiraUFV"
    profile_name: str = "Thiago Pereira"

    # Contact channels
    contact_email: str = "thiago.marinho.pereira.98@gmail.com"
    contact_linkedin: str = "thiagopereira98"

    # Upstream endpoints
    github_api_url: str = "https://api.github.com"
    github_raw_url: str = "https://raw.githubusercontent.com"
    low_code_webhook_url: str = (
        "https://n8n-jtjw.onrender.com/webhook/8319d94b-07a7-4a24-8e35-d9696c68c1d9/workflows"
    )

    # README shown in the about section
    readme_branch: str = "main"
    readme_filepath: str = "README.md"

    # Per-request timeout in seconds, None waits forever
    http_timeout: float | None = 10.0

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080

    log_level: str = "INFO"

    @field_validator("github_api_url", "github_raw_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return str(value).rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    model_config = {
        "env_file": os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton settings instance
settings = Settings()
