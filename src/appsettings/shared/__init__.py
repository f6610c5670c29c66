# src/appsettings/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Host program path derivation
- Logging configuration
"""

from appsettings.shared.process import config_path, directory_of, program_path
from appsettings.shared.logging_conf import configure_logging, setup_logging

__all__ = [
    "program_path",
    "directory_of",
    "config_path",
    "setup_logging",
    "configure_logging",
]
