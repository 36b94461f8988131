from __future__ import annotations

"""
Themed console logger.

Each call styles the level tag, the timestamp and the message separately,
wraps the template's literal text in the base color, substitutes the three
styled parts into the template and writes one line to stdout.
"""

import sys
from typing import Any, Callable, Mapping, Optional, Union

from loguru import logger

from .core.clock import current_timestamp
from .core.config import LoggerConfig, build_config
from .core.levels import LogLevel, resolve_level
from .core.styling import AnsiStyler
from .core.templates import resolve_template


def stdout_sink(line: str) -> None:
    """Write ``line`` and a newline to the current ``sys.stdout``."""
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


class Logger:
    """
    Console logger with per-level themes and templates.

    Parameters
    ----------
    options : Mapping or LoggerConfig, optional
        User options merged over the defaults by ``build_config``. Recognized
        keys are ``global``, ``theme``, ``formatting``, ``templates`` and
        ``logNames``.
    sink : Callable[[str], None], optional
        Receives each finished line, by default ``stdout_sink``.
    styler : AnsiStyler, optional
        ANSI styler, by default one built from ``formatting.color_system``.
    clock : Callable[[str], str], optional
        Returns the timestamp text for a date pattern, by default
        ``current_timestamp``.

    Examples
    --------
    >>> log = Logger({"logNames": {"info": "NOTICE"}})
    >>> log.info("connected to", "db", 3)
    """

    def __init__(
        self,
        options: Union[LoggerConfig, Mapping[str, Any], None] = None,
        *,
        sink: Optional[Callable[[str], None]] = None,
        styler: Optional[AnsiStyler] = None,
        clock: Optional[Callable[[str], str]] = None,
    ) -> None:
        self._config = build_config(options)
        self._sink = sink or stdout_sink
        self._styler = styler or AnsiStyler(self._config.formatting.color_system)
        self._clock = clock or current_timestamp
        logger.debug("Logger ready, color system = {}", self._styler.color_system)

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def format(self, level: Union[LogLevel, str], *content: Any) -> str:
        """
        Render one log line for ``level`` without writing it.

        Parameters
        ----------
        level : LogLevel or str
            Target level or level name.
        *content : Any
            Parts joined with single spaces after ``str()`` conversion.

        Returns
        -------
        str
            The finished line, including ANSI codes when colors are enabled.
        """
        level = resolve_level(level)
        config = self._config
        styler = self._styler

        message = " ".join(str(part) for part in content)
        display = f" {config.display_name(level)} "

        styled_level = styler.apply(display, config.effective_color(level, "level"))
        styled_date = styler.apply(
            self._clock(config.formatting.date_format),
            config.effective_color(level, "date"),
        )
        styled_message = styler.apply(message, config.effective_color(level, "message"))

        template = styler.foreground(config.template_for(level), config.formatting.base_color)
        return resolve_template(
            template,
            {"level": styled_level, "date": styled_date, "message": styled_message},
        )

    def log(self, level: Union[LogLevel, str], *content: Any) -> None:
        """
        Emit ``content`` at ``level``.

        Raises
        ------
        UnknownLevelError
            If ``level`` is not a known level name.
        """
        self._sink(self.format(level, *content))

    def info(self, *content: Any) -> None:
        self.log(LogLevel.INFO, *content)

    def warn(self, *content: Any) -> None:
        self.log(LogLevel.WARN, *content)

    warning = warn

    def error(self, *content: Any) -> None:
        self.log(LogLevel.ERROR, *content)

    def success(self, *content: Any) -> None:
        self.log(LogLevel.SUCCESS, *content)

    def debug(self, *content: Any) -> None:
        self.log(LogLevel.DEBUG, *content)
