# src/appsettings/application/__init__.py
"""
Application Layer - Loading, Expansion and Access

This package contains the settings loader, the ``${name}`` expansion and the
lazily initialized settings store.
"""

from appsettings.application.expansion import expand_value
from appsettings.application.loader import SettingsLoader
from appsettings.application.store import (
    SettingsStore,
    app_settings,
    build_static_settings,
)

__all__ = [
    "expand_value",
    "SettingsLoader",
    "SettingsStore",
    "app_settings",
    "build_static_settings",
]
