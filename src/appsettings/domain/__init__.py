# src/appsettings/domain/__init__.py
"""
Domain Layer - Settings Snapshots and Errors

This package contains the immutable settings models and the error taxonomy.
No dependencies on the filesystem or the XML parser.
"""

from appsettings.domain.models import LoadedSettings, StaticSettings
from appsettings.domain.errors import (
    AppSettingError,
    ExpansionError,
    LoadError,
    MissingSettingError,
    PathResolutionError,
    ProcessPathUnavailableError,
)

__all__ = [
    "LoadedSettings",
    "StaticSettings",
    "AppSettingError",
    "ProcessPathUnavailableError",
    "PathResolutionError",
    "LoadError",
    "MissingSettingError",
    "ExpansionError",
]
