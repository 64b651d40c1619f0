"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (STOMP/HTTP) read timeouts and probe constants consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "islandora-settings"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "islandora-settings"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "islandora-settings"
    return Path.home() / ".config" / "islandora-settings"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Runtime configuration of the validator.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars), the Core stays free of parsing.
    - One configuration contract shared by the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ISLANDORA_SETTINGS_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    broker_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for the broker probe connection (seconds).",
    )
    lookup_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for the lookup-service probe request (seconds).",
    )
    user_agent: str = Field(
        default="islandora-settings/0.1",
        min_length=1,
        description="User-Agent sent to the lookup service.",
    )

    probe_queue: str = Field(
        default="dummy-queue-for-validation",
        min_length=1,
        description="Destination subscribed to while probing the broker.",
    )
    probe_uri: str = Field(
        default="http://example.org",
        min_length=1,
        description="Arbitrary resource URI looked up while probing the lookup service.",
    )

    date_languages: list[str] = Field(
        default_factory=lambda: ["en"],
        min_length=1,
        description="Languages the natural-language date parser is allowed to use.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )
