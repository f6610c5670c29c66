# src/appsettings/domain/errors.py
"""
Domain Errors - Settings Access Exceptions

This module defines the exceptions raised while locating, loading and
expanding application settings. Every error carries a message naming the
file or setting involved; underlying causes are chained with ``raise ... from``.
"""
from typing import Optional


class AppSettingError(Exception):
    """Base exception for settings errors."""
    pass


class ProcessPathUnavailableError(AppSettingError):
    """Raised when the host program path cannot be determined."""
    pass


class PathResolutionError(AppSettingError):
    """Raised when a directory cannot be derived from a file path."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class LoadError(AppSettingError):
    """Raised when a settings file cannot be read, parsed or processed."""

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename


class MissingSettingError(AppSettingError):
    """Raised when a required setting is absent."""

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class ExpansionError(AppSettingError):
    """Raised when a ``${name}`` token in a setting cannot be expanded."""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(message)
        self.setting = setting
