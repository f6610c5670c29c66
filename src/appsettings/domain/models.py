# src/appsettings/domain/models.py
"""
Domain Models - Immutable Settings Snapshots

This module defines the value objects produced by the settings loader and
held by the settings store for the lifetime of the process.

Files that USE this module:
- appsettings.application.loader (returns LoadedSettings)
- appsettings.application.store (caches StaticSettings)

Files that this module USES:
- None (pure domain objects)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class LoadedSettings:
    """Flattened result of loading a settings file and its includes."""
    filenames: Tuple[str, ...]
    values: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class StaticSettings:
    """
    Process-wide settings snapshot.

    Built once by the store and never mutated afterwards, so reads need no
    locking. ``values`` is exposed as a read-only mapping.
    """
    program_exe: str
    program_directory: str
    config_filenames: Tuple[str, ...]
    values: Mapping[str, str]

    @classmethod
    def create(
        cls,
        program_exe: str,
        program_directory: str,
        loaded: LoadedSettings,
    ) -> StaticSettings:
        """
        Freeze a loader result into a snapshot.

        Args:
            program_exe: Absolute path of the host program
            program_directory: Directory of the host program, no trailing separator
            loaded: Result of SettingsLoader.load

        Returns:
            StaticSettings with a read-only copy of the loaded values
        """
        return cls(
            program_exe=program_exe,
            program_directory=program_directory,
            config_filenames=tuple(loaded.filenames),
            values=MappingProxyType(dict(loaded.values)),
        )
