from __future__ import annotations

"""
Closed set of log levels and name resolution.
"""

import enum
from typing import Union

from loguru import logger

from .exceptions import UnknownLevelError


class LogLevel(enum.Enum):
    """
    Log level, valued by its lowercase configuration key.
    """

    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    SUCCESS = "success"
    DEBUG = "debug"

    @property
    def display(self) -> str:
        """Canonical uppercase tag shown in the level region."""
        return self.value.upper()


LEVEL_ALIASES = {
    "warning": "warn",
}


def resolve_level(name: Union[str, LogLevel]) -> LogLevel:
    """
    Resolve aliases and validate a level key.

    Parameters
    ----------
    name : str or LogLevel
        Level key (case-insensitive), alias, or an existing ``LogLevel``.

    Returns
    -------
    LogLevel
        Canonical level.

    Raises
    ------
    UnknownLevelError
        If the name is not a known level or alias.
    """
    if isinstance(name, LogLevel):
        return name
    key = str(name).strip().lower()
    if key in LEVEL_ALIASES:
        logger.trace('Level alias "{}" resolved to "{}"', key, LEVEL_ALIASES[key])
        key = LEVEL_ALIASES[key]
    try:
        return LogLevel(key)
    except ValueError:
        available = ", ".join(level.value for level in LogLevel)
        raise UnknownLevelError(f'Unknown log level "{name}". Available: {available}') from None


def list_level_keys() -> tuple[str, ...]:
    """
    Return all canonical level keys in declaration order.
    """
    return tuple(level.value for level in LogLevel)
