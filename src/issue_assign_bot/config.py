"""
Configuration helpers and defaults.

The approval label is a fixed literal in ``commands``, not a setting.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    return v if v is not None else default


@dataclass(frozen=True)
class Settings:
    github_api_url: str
    github_repository: str | None
    event_path: str | None
    event_name: str | None
    token_secret_name: str | None
    http_timeout_seconds: int
    log_level: str


def load_settings() -> Settings:
    """Load settings from environment with safe defaults for local tests."""

    return Settings(
        github_api_url=_env("GITHUB_API_URL", "https://api.github.com")
        or "https://api.github.com",
        github_repository=_env("GITHUB_REPOSITORY"),
        event_path=_env("GITHUB_EVENT_PATH"),
        event_name=_env("GITHUB_EVENT_NAME"),
        token_secret_name=_env("GITHUB_TOKEN_SECRET_NAME"),
        http_timeout_seconds=int(_env("GITHUB_TIMEOUT_SECONDS", "8") or 8),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
