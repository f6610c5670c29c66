# src/appsettings/config/__init__.py
"""
Configuration Module

Configuration of the settings loader itself, using Pydantic Settings.
Supports ``APPSETTINGS_*`` environment variables and a ``.env`` file.
"""

from appsettings.config.settings import LoaderSettings, get_loader_settings

__all__ = ["LoaderSettings", "get_loader_settings"]
