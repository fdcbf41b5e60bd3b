"""Settings for the gmrc command-line tool itself.

These control how the tool behaves (logging, debug output) and are unrelated
to the ``.gmrc`` payload returned by :mod:`gmrc.resolution`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """gmrc tool settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. Explicit keyword arguments (used by CLI flags such as --debug)
    2. Environment variables (prefixed with GMRC_)
       Example: export GMRC_LOG_LEVEL=DEBUG
    3. .env file in the current directory
    4. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="GMRC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and ~ in the log file path."""
        if v is None or v == "":
            return None
        if isinstance(v, Path):
            return v.expanduser().resolve()
        if isinstance(v, str):
            return Path(os.path.expandvars(v)).expanduser().resolve()
        raise ValueError(
            f"log_file must be a string or Path, got {type(v).__name__}: {v!r}"
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @classmethod
    def from_env(cls) -> AppSettings:
        """Create settings from environment variables."""
        return cls()


# Global settings instance
_settings: AppSettings | None = None


def get_app_settings() -> AppSettings:
    """Get the global tool settings instance.

    Returns:
        Global AppSettings instance, created from the environment on first use.
    """
    global _settings
    if _settings is None:
        _settings = AppSettings.from_env()
    return _settings


def set_app_settings(settings: AppSettings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def clear_app_settings_cache() -> None:
    """Clear the global settings cache.

    Forces get_app_settings() to re-read environment variables on the next
    call. Useful for tests that change the environment via monkeypatch.
    """
    global _settings
    _settings = None
