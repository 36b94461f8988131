from __future__ import annotations

"""
ANSI styling on top of ``rich``.

Background and foreground are applied by two independent calls, each taking
a string and a color and returning the wrapped string.
"""

import re
import sys
from typing import Optional

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from .exceptions import ConfigurationError
from .theme import ColorSpec

_HEX_DIGITS = re.compile(r"#?([0-9A-F]{3}|[0-9A-F]{6})")

_COLOR_SYSTEMS = {
    "truecolor": ColorSystem.TRUECOLOR,
    "256": ColorSystem.EIGHT_BIT,
    "standard": ColorSystem.STANDARD,
    "windows": ColorSystem.WINDOWS,
}


def normalize_color(color: str) -> str:
    """
    Upper-case a color value and give bare hex digits a leading ``#``.

    Three-digit shorthand is expanded (``"#abc"`` becomes ``"#AABBCC"``).
    Values that are not hex, such as color names, are only upper-cased.
    """
    value = str(color).strip().upper()
    match = _HEX_DIGITS.fullmatch(value)
    if match is None:
        return value
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def detect_color_system(file=None) -> Optional[ColorSystem]:
    """
    Color system supported by ``file`` (stdout by default), ``None`` if plain.
    """
    detected = Console(file=file or sys.stdout).color_system
    if detected is None:
        return None
    return _COLOR_SYSTEMS[detected]


class AnsiStyler:
    """
    Wraps strings in ANSI color codes.

    Parameters
    ----------
    color_system : str, optional
        ``"auto"`` to detect from stdout at construction, one of
        ``"truecolor"``, ``"256"``, ``"standard"``, ``"windows"``, or ``None``
        to return text unchanged.
    """

    def __init__(self, color_system: Optional[str] = "auto") -> None:
        if color_system is None:
            self._system = None
            return
        name = str(color_system).strip().lower()
        if name == "auto":
            self._system = detect_color_system()
        elif name in _COLOR_SYSTEMS:
            self._system = _COLOR_SYSTEMS[name]
        else:
            raise ConfigurationError(f'Unknown color system "{color_system}"')

    @property
    def color_system(self) -> Optional[ColorSystem]:
        return self._system

    def _render(self, text: str, style: Style) -> str:
        if self._system is None:
            return text
        return style.render(text, color_system=self._system)

    def foreground(self, text: str, color: str) -> str:
        return self._render(text, Style(color=normalize_color(color)))

    def background(self, text: str, color: str) -> str:
        return self._render(text, Style(bgcolor=normalize_color(color)))

    def apply(self, text: str, spec: ColorSpec) -> str:
        """
        Style ``text`` with ``spec``: background first, then text color.
        """
        if spec.background:
            text = self.background(text, spec.background)
        if spec.text:
            text = self.foreground(text, spec.text)
        return text
