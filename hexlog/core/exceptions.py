"""
Exception types raised while building a logger configuration.

Emitting a log line never raises one of these; they only surface from
``build_config`` and ``Logger.log``.
"""


class HexlogError(Exception):
    pass


class ConfigurationError(HexlogError):
    pass


class UnknownLevelError(ConfigurationError, LookupError):
    pass


__all__ = [
    "HexlogError",
    "ConfigurationError",
    "UnknownLevelError",
]
