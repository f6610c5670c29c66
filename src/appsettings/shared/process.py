# src/appsettings/shared/process.py
"""
Process Paths - Host Program Location

Derives the host program path and its directory, and the settings file
path that sits next to it (``<program>.dll.config`` by default).

Files that USE this module:
- appsettings.application.store (build_static_settings)

Files that this module USES:
- appsettings.domain.errors (ProcessPathUnavailableError, PathResolutionError)
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

from appsettings.domain.errors import PathResolutionError, ProcessPathUnavailableError

# argv[0] values that do not name a script file
_NON_SCRIPT_ARGV = ("", "-c", "-m", "-")


def program_path(override: Optional[Union[str, Path]] = None) -> str:
    """
    Get the absolute path of the host program.

    Uses the override if given, else the main script from ``sys.argv[0]``,
    else the interpreter executable.

    Args:
        override: Explicit program path

    Returns:
        Absolute program path

    Raises:
        ProcessPathUnavailableError: If no path can be determined
    """
    if override:
        return os.path.abspath(str(override))

    main = sys.argv[0] if sys.argv else ""
    if main not in _NON_SCRIPT_ARGV:
        return os.path.abspath(main)

    if sys.executable:
        return os.path.abspath(sys.executable)

    raise ProcessPathUnavailableError("Host program path is unavailable.")


def directory_of(path: str) -> str:
    """
    Get the directory of a file path without a trailing separator.

    Args:
        path: File path

    Returns:
        Directory component (a filesystem root keeps its separator)

    Raises:
        PathResolutionError: If the path has no directory component
    """
    directory = os.path.dirname(path)
    if not directory:
        raise PathResolutionError(f"Can't get directory name of '{path}'.", path=path)

    trimmed = directory.rstrip(os.sep + (os.altsep or ""))
    # "/" or "C:\" stay as they are
    if not trimmed or trimmed.endswith(":"):
        return directory
    return trimmed


def config_path(program: str, extension: str = ".dll.config") -> str:
    """
    Get the settings file path for a program by replacing its extension.

    Args:
        program: Absolute program path
        extension: Replacement extension, including the leading dot

    Returns:
        Settings file path (``/opt/app/tool.py`` -> ``/opt/app/tool.dll.config``)
    """
    return str(Path(program).with_suffix(extension))
