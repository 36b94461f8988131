"""
Diagnostic logging for hexlog itself.

hexlog disables its loguru namespace on import; ``init_logger`` turns it on
and routes it to stderr so configuration resolution can be inspected.
"""

import sys

from loguru import logger

_PACKAGE = "hexlog"
_STDERR_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
    "{name}:{function}:{line} - <level>{message}</level>"
)


def init_logger(log_level: str = "DEBUG") -> int:
    """
    Enable hexlog diagnostics on stderr.

    Existing loguru handlers, including the default stderr one, are removed
    first so each diagnostic line is written once.

    Parameters
    ----------
    log_level : str, optional
        Loguru log level string, by default ``"DEBUG"``.

    Returns
    -------
    int
        Loguru handler id, usable with ``logger.remove``.
    """
    logger.remove()
    logger.enable(_PACKAGE)
    handler_id = logger.add(
        sys.stderr,
        colorize=True,
        format=_STDERR_FORMAT,
        level=log_level,
        filter=_PACKAGE,
        diagnose=False,
    )
    logger.success(f'hexlog diagnostics enabled with LOG_LEVEL = "{log_level}".')
    return handler_id
