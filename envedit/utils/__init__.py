"""App constants and utilities."""

from .constants import (
    APP_DIR,
    APP_NAME,
    CONFIG_FILE,
    DEFAULT_ENV_FILE,
    DEFAULT_LOG_LEVEL,
    DIST_NAME,
    LOG_FORMAT,
)
from .log import configure_logging

__all__ = [
    "APP_NAME",
    "APP_DIR",
    "DIST_NAME",
    "CONFIG_FILE",
    "DEFAULT_ENV_FILE",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "configure_logging",
]
