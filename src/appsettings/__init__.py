# src/appsettings/__init__.py
"""
AppSettings - Process-wide XML Application Settings

Loads the ``appSettings`` section of the settings file next to the host
program (``<program>.dll.config``), follows an optional included file, and
serves string settings with ``${name}`` expansion.

    from appsettings import get_setting

    url = get_setting("ServiceUrl")
    timeout = get_setting("Timeout", "30")
"""

__version__ = "1.0.0"

from appsettings.application.store import (
    SettingsStore,
    app_settings,
    config_filenames,
    get_expand_setting,
    get_setting,
    program_directory,
    program_exe,
)
from appsettings.domain.errors import (
    AppSettingError,
    ExpansionError,
    LoadError,
    MissingSettingError,
    PathResolutionError,
    ProcessPathUnavailableError,
)

__all__ = [
    "SettingsStore",
    "app_settings",
    "program_exe",
    "program_directory",
    "config_filenames",
    "get_setting",
    "get_expand_setting",
    "AppSettingError",
    "ProcessPathUnavailableError",
    "PathResolutionError",
    "LoadError",
    "MissingSettingError",
    "ExpansionError",
]
