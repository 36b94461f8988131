"""
hexlog package.

A console logger with hex-color themes and text templates per level.
"""

from loguru import logger as _logger

from .core import (
    ColorSpec,
    ConfigurationError,
    Formatting,
    HexlogError,
    LoggerConfig,
    LogLevel,
    Theme,
    UnknownLevelError,
    build_config,
    init_logger,
    resolve_template,
)
from .logger import Logger, stdout_sink

_logger.disable("hexlog")

__all__ = [
    "Logger",
    "stdout_sink",
    "LogLevel",
    "ColorSpec",
    "Theme",
    "Formatting",
    "LoggerConfig",
    "build_config",
    "resolve_template",
    "init_logger",
    "HexlogError",
    "ConfigurationError",
    "UnknownLevelError",
]
