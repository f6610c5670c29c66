# src/appsettings/config/settings.py
"""
Loader Settings - Pydantic-based Configuration of the Settings Loader

Controls where the settings file is looked up and how the library logs.
Values come from ``APPSETTINGS_*`` environment variables or a ``.env`` file;
every field has a default, so an unconfigured host gets the standard
``<program>.dll.config`` lookup.

Files that USE this module:
- appsettings.application.store (build_static_settings reads the lookup fields)
- appsettings.shared.logging_conf (configure_logging reads the log fields)

Files that this module USES:
- None (pure configuration module)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for log_level validation
from functools import lru_cache  # Cache the environment-derived instance
from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic


class LoaderSettings(BaseSettings):
    """Settings loader configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="APPSETTINGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Lookup ---
    program_path: Optional[Path] = Field(default=None)  # Overrides the detected host program
    config_file: Optional[Path] = Field(default=None)  # Overrides the derived settings file
    config_extension: str = Field(default=".dll.config")
    root_selector: str = Field(default="configuration/appSettings")
    include_selector: str = Field(default="appSettings")

    # --- Logging ---
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)
    log_dir: Optional[str] = Field(default=None)
    log_stdout: bool = Field(default=True)
    log_max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)  # 10MB
    log_backup_count: int = Field(default=5, ge=0)

    @field_validator("config_extension")
    @classmethod
    def validate_config_extension(cls, v: str) -> str:
        """Extension replaces the program suffix, so it must look like one."""
        if not v.startswith(".") or len(v) < 2 or "/" in v or "\\" in v:
            raise ValueError("config_extension must start with '.' and contain no separators")
        return v

    @field_validator("root_selector", "include_selector")
    @classmethod
    def validate_selector(cls, v: str) -> str:
        """Normalize selectors to 'a/b' form."""
        v = v.strip().strip("/")
        if not v or any(not part for part in v.split("/")):
            raise ValueError("selector must be a non-empty element path like 'configuration/appSettings'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_loader_settings() -> LoaderSettings:
    """
    Get the loader configuration derived from the environment.

    Returns:
        Cached LoaderSettings instance
    """
    return LoaderSettings()
