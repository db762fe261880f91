"""
Logging Configuration Module.

This module provides centralized logging configuration for Wallpaper Hub.
It sets up console and optional file logging with per-module levels so that
the download broker and admin services stay verbose while database drivers,
HTTP clients and the S3 SDK are kept quiet.

Features:
- Configurable log levels per module
- Console and file logging
- Simple, detailed and JSON line formats
"""

import logging
import os
from pathlib import Path
from typing import Optional

TRUTHY = ("true", "1", "yes")


def _get_logging_config() -> dict:
    """Get logging configuration from the settings model.

    The settings import is deferred so this module can be imported first by
    anything that wants a logger.
    """
    try:
        from wallpaper_hub.server.core.config import settings
    except Exception:  # settings failed validation; fall back to raw environment
        return {
            "log_level": os.getenv("WALLPAPER_HUB_LOG_LEVEL", "INFO").upper(),
            "log_format": os.getenv("WALLPAPER_HUB_LOG_FORMAT", "detailed"),
            "log_file_dir": os.getenv("WALLPAPER_HUB_LOG_FILE_DIR", "logs"),
            "enable_file_logging": os.getenv("WALLPAPER_HUB_ENABLE_FILE_LOGGING", "true").lower() in TRUTHY,
        }

    return {
        "log_level": settings.log_level.upper(),
        "log_format": settings.log_format,
        "log_file_dir": settings.log_file_dir,
        "enable_file_logging": settings.enable_file_logging,
    }


_config = _get_logging_config()
LOG_LEVEL = _config["log_level"]
LOG_FORMAT = _config["log_format"]
LOG_FILE_DIR = _config["log_file_dir"]
ENABLE_FILE_LOGGING = _config["enable_file_logging"]
LOG_FILE_NAME = "wallpaper_hub.log"


SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}


MODULE_LOG_LEVELS = {
    # Core modules
    "wallpaper_hub.core": "INFO",
    "wallpaper_hub.core.database": "INFO",
    "wallpaper_hub.core.storage": "INFO",
    "wallpaper_hub.core.auth_client": "INFO",
    # Server modules
    "wallpaper_hub.server": "INFO",
    "wallpaper_hub.server.api": "DEBUG",
    "wallpaper_hub.server.services": "DEBUG",
    "wallpaper_hub.server.core": "INFO",
    # Third-party libraries (reduce noise)
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "botocore": "WARNING",
    "boto3": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        enable_file: Whether to enable file logging
    """
    level = (log_level or LOG_LEVEL).upper()
    fmt = log_format or LOG_FORMAT
    formatter = logging.Formatter(FORMATS.get(fmt, DETAILED_FORMAT), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # filter at handler level

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_logging = enable_file and ENABLE_FILE_LOGGING
    if file_logging:
        log_dir = Path(LOG_FILE_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={file_logging}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)


# Configure logging on module import
setup_logging()
