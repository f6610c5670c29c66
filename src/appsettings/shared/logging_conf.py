# src/appsettings/shared/logging_conf.py
"""
Logging Configuration - Logging Setup for Host Programs

The library emits records through module loggers under ``appsettings``. Host
programs can call ``setup_logging`` or ``configure_logging`` to give that
logger consistent formatting on stdout and an optional
rotating log file.

Files that USE this module:
- Host programs (setup_logging / configure_logging at startup)

Files that this module USES:
- appsettings.config (LoaderSettings for the log_* fields)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from appsettings.config.settings import LoaderSettings, get_loader_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOGGER_NAME = "appsettings"
LOG_FILE_NAME = "appsettings.log"


def _log_file_path(
    log_file: Optional[Union[str, Path]],
    log_dir: Optional[Union[str, Path]],
) -> Optional[Path]:
    """Pick the log file: log_dir/appsettings.log wins over log_file."""
    if log_dir:
        return Path(log_dir) / LOG_FILE_NAME
    if log_file:
        return Path(log_file)
    return None


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    stdout: bool = True,
) -> logging.Logger:
    """
    Attach handlers to the ``appsettings`` logger.

    Only the library's own logger is touched; the root logger and the
    host's handlers are left alone. Calling it again replaces the handlers
    installed by the previous call.

    Args:
        level: Logging level for the library logger
        log_file: Optional path of a rotating log file
        log_dir: Optional directory holding appsettings.log (overrides log_file)
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of rotated files to keep
        stdout: Also log to stdout

    Returns:
        The configured ``appsettings`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_appsettings_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []
    if stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    path = _log_file_path(log_file, log_dir)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8",
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._appsettings_handler = True
        logger.addHandler(handler)
    logger.setLevel(level)

    logger.debug("Logging configured: file=%s, stdout=%s, level=%s", path, stdout, level)
    return logger


def configure_logging(config: Optional[LoaderSettings] = None) -> logging.Logger:
    """
    Configure the library logger from the ``APPSETTINGS_LOG_*`` settings.

    Args:
        config: Loader configuration (default: the environment-derived one)

    Returns:
        The configured ``appsettings`` logger
    """
    config = config or get_loader_settings()
    return setup_logging(
        level=config.log_level_value,
        log_file=config.log_file,
        log_dir=config.log_dir,
        max_bytes=config.log_max_bytes,
        backup_count=config.log_backup_count,
        stdout=config.log_stdout,
    )
