"""
Core primitives shared by the hexlog logger.
"""

from .clock import current_timestamp
from .config import DEFAULT_DATE_FORMAT, Formatting, LoggerConfig, build_config
from .exceptions import ConfigurationError, HexlogError, UnknownLevelError
from .levels import LogLevel, list_level_keys, resolve_level
from .logging import init_logger
from .styling import AnsiStyler, normalize_color
from .templates import DEFAULT_TEMPLATE, resolve_template
from .theme import DEFAULT_GLOBAL_THEME, DEFAULT_LEVEL_THEMES, ColorSpec, Theme

__all__ = [
    "current_timestamp",
    "DEFAULT_DATE_FORMAT",
    "Formatting",
    "LoggerConfig",
    "build_config",
    "ConfigurationError",
    "HexlogError",
    "UnknownLevelError",
    "LogLevel",
    "list_level_keys",
    "resolve_level",
    "init_logger",
    "AnsiStyler",
    "normalize_color",
    "DEFAULT_TEMPLATE",
    "resolve_template",
    "DEFAULT_GLOBAL_THEME",
    "DEFAULT_LEVEL_THEMES",
    "ColorSpec",
    "Theme",
]
