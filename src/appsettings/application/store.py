# src/appsettings/application/store.py
"""
Settings Store - Lazy Process-wide Settings Access

This module provides the settings store used by host programs. The store
loads the settings file on first access, caches an immutable snapshot for the
rest of the process, and expands ``${name}`` tokens on every read.

Initialization is double-checked under a lock, so concurrent first readers
wait for one load. A failed load is not cached: the error reaches the caller
and the next access tries again from scratch.

Files that USE this module:
- appsettings (package-level get_setting / get_expand_setting and friends)
- Host programs (SettingsStore for explicitly wired settings)

Files that this module USES:
- appsettings.application.loader (SettingsLoader)
- appsettings.application.expansion (expand_value)
- appsettings.config (LoaderSettings for file lookup)
- appsettings.shared.process (program path helpers)
- appsettings.domain (StaticSettings, errors)
"""
from __future__ import annotations

import logging
import os
import threading
from typing import Callable, Dict, Optional, Tuple

from pydantic import ValidationError  # Raised for invalid APPSETTINGS_* values

from appsettings.application.expansion import expand_value
from appsettings.application.loader import SettingsLoader
from appsettings.config.settings import LoaderSettings, get_loader_settings
from appsettings.domain.errors import ExpansionError, LoadError, MissingSettingError
from appsettings.domain.models import StaticSettings
from appsettings.shared.process import config_path, directory_of, program_path

logger = logging.getLogger(__name__)

# Marks get_setting calls without a default
_REQUIRED = object()

# Names resolvable during expansion when neither a setting nor an environment variable matches
COMPUTED_NAMES: Dict[str, Callable[[StaticSettings], str]] = {
    "ProgramDirectory": lambda s: s.program_directory,
}


def build_static_settings(config: Optional[LoaderSettings] = None) -> StaticSettings:
    """
    Locate, load and freeze the settings of the host program.

    Args:
        config: Loader configuration (default: the environment-derived one)

    Returns:
        StaticSettings snapshot

    Raises:
        ProcessPathUnavailableError: If the host program path is unknown
        PathResolutionError: If the program directory cannot be derived
        LoadError: If a settings file cannot be loaded, or the
            APPSETTINGS_* configuration is invalid
    """
    if config is None:
        try:
            config = get_loader_settings()
        except ValidationError as e:
            raise LoadError("Invalid settings loader configuration.") from e

    exe = program_path(config.program_path)
    directory = directory_of(exe)
    if config.config_file:
        filename = os.path.abspath(str(config.config_file))
    else:
        filename = config_path(exe, config.config_extension)

    loader = SettingsLoader(include_selector=config.include_selector)
    loaded = loader.load(filename, config.root_selector)
    return StaticSettings.create(exe, directory, loaded)


class SettingsStore:
    """Lazily initialized, thread-safe access to one StaticSettings snapshot."""

    def __init__(self, factory: Callable[[], StaticSettings] = build_static_settings):
        """
        Args:
            factory: Builds the snapshot on first access
        """
        self._factory = factory
        self._lock = threading.Lock()
        self._static: Optional[StaticSettings] = None

    @property
    def settings(self) -> StaticSettings:
        """The cached snapshot, built on first access."""
        static = self._static
        if static is None:
            with self._lock:
                if self._static is None:
                    try:
                        self._static = self._factory()
                    except Exception as e:
                        logger.error("Settings initialization failed: %s", e)
                        raise
                    logger.info(
                        "Settings initialized from %s",
                        ", ".join(self._static.config_filenames),
                    )
                static = self._static
        return static

    @property
    def initialized(self) -> bool:
        return self._static is not None

    @property
    def program_exe(self) -> str:
        return self.settings.program_exe

    @property
    def program_directory(self) -> str:
        return self.settings.program_directory

    @property
    def config_filenames(self) -> Tuple[str, ...]:
        return self.settings.config_filenames

    def get_setting(self, name: str, default=_REQUIRED) -> Optional[str]:
        """
        Get an expanded setting value.

        Args:
            name: Setting name (case-sensitive)
            default: Returned verbatim, without expansion, if the setting is
                absent; omit it to make the setting required

        Returns:
            Expanded value, or the default

        Raises:
            MissingSettingError: If the setting is absent and no default was given
            ExpansionError: If the value contains a token that cannot be expanded
        """
        value = self._get_setting(name, None, ())
        if value is not None:
            return value
        if default is _REQUIRED:
            raise MissingSettingError(f"Missing appSetting '{name}'.", name=name)
        return default

    def get_expand_setting(self, name: str) -> Optional[str]:
        """
        Resolve an expansion name.

        Looks in the settings (expanded), then the environment, then the
        computed names (ProgramDirectory).

        Args:
            name: Name inside a ``${...}`` token

        Returns:
            Resolved value, or None if nothing matches
        """
        return self._get_expand_setting(name, ())

    def _get_setting(self, name: str, default: Optional[str], chain: Tuple[str, ...]) -> Optional[str]:
        value = self.settings.values.get(name)
        if value is None:
            return default

        if name in chain:
            raise ExpansionError(
                f"Recursive expansion of '{name}' ({' -> '.join(chain + (name,))}).",
                setting=name,
            )

        chain = chain + (name,)
        return expand_value(name, value, lambda token: self._get_expand_setting(token, chain))

    def _get_expand_setting(self, name: str, chain: Tuple[str, ...]) -> Optional[str]:
        value = self._get_setting(name, None, chain)
        if value is not None:
            return value

        value = os.environ.get(name)
        if value is not None:
            return value

        computed = COMPUTED_NAMES.get(name)
        if computed is not None:
            return computed(self.settings)

        return None


# Process-wide store
app_settings = SettingsStore()


def program_exe() -> str:
    """Absolute path of the host program."""
    return app_settings.program_exe


def program_directory() -> str:
    """Directory of the host program, without trailing separator."""
    return app_settings.program_directory


def config_filenames() -> Tuple[str, ...]:
    """Settings files loaded, in load order."""
    return app_settings.config_filenames


def get_setting(name: str, default=_REQUIRED) -> Optional[str]:
    """Get an expanded setting from the process-wide store (see SettingsStore.get_setting)."""
    return app_settings.get_setting(name, default)


def get_expand_setting(name: str) -> Optional[str]:
    """Resolve an expansion name against the process-wide store."""
    return app_settings.get_expand_setting(name)
