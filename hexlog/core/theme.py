from __future__ import annotations

"""
Color specs, themes and the built-in default palette.

Themes are layered: a per-level theme is merged over the global theme one
field at a time, so a per-level background never discards an inherited
text color.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from .exceptions import ConfigurationError
from .levels import LogLevel

REGIONS = ("level", "date", "message")
COLOR_FIELDS = ("text", "background")

TEXT_COLOR = "#e9eef7"
MESSAGE_COLOR = "#83ff75"
DATE_COLOR = "#ff9d5c"

LEVEL_BACKGROUNDS = {
    LogLevel.INFO: "#72a1f7",
    LogLevel.WARN: "#ffeb8a",
    LogLevel.ERROR: "#ff2e3f",
    LogLevel.SUCCESS: "#68fc68",
    LogLevel.DEBUG: "#ff8cf2",
}


@dataclass(frozen=True)
class ColorSpec:
    """
    Text and background color for one region.

    Parameters
    ----------
    text : str, optional
        Foreground color, ``None`` to inherit.
    background : str, optional
        Background color, ``None`` to inherit.
    """

    text: Optional[str] = None
    background: Optional[str] = None

    def merged_over(self, base: ColorSpec) -> ColorSpec:
        """
        Return this spec with unset fields taken from ``base``.
        """
        return ColorSpec(
            text=self.text if self.text is not None else base.text,
            background=self.background if self.background is not None else base.background,
        )

    @classmethod
    def coerce(cls, value: Union[ColorSpec, Mapping[str, Any], None]) -> ColorSpec:
        """
        Build a ``ColorSpec`` from a mapping such as ``{"text": "#fff"}``.

        Raises
        ------
        ConfigurationError
            If ``value`` is not a mapping or names an unknown field.
        """
        if value is None:
            return cls()
        if isinstance(value, ColorSpec):
            return value
        if not isinstance(value, Mapping):
            raise ConfigurationError(f"Color spec must be a mapping, got {type(value).__name__}")
        unknown = set(value) - set(COLOR_FIELDS)
        if unknown:
            raise ConfigurationError(
                f"Unknown color field(s) {sorted(unknown)}. Available: {', '.join(COLOR_FIELDS)}"
            )
        return cls(text=value.get("text"), background=value.get("background"))


@dataclass(frozen=True)
class Theme:
    """
    Color specs for the three regions of a log line.
    """

    level: ColorSpec = field(default_factory=ColorSpec)
    date: ColorSpec = field(default_factory=ColorSpec)
    message: ColorSpec = field(default_factory=ColorSpec)

    def region(self, name: str) -> ColorSpec:
        if name not in REGIONS:
            raise ConfigurationError(f'Unknown theme region "{name}". Available: {", ".join(REGIONS)}')
        return getattr(self, name)

    def merged_over(self, base: Theme) -> Theme:
        """
        Merge region by region, field by field, with ``self`` winning.
        """
        return Theme(**{name: self.region(name).merged_over(base.region(name)) for name in REGIONS})

    @classmethod
    def coerce(cls, value: Union[Theme, Mapping[str, Any], None]) -> Theme:
        """
        Build a ``Theme`` from a mapping of region name to color spec.

        Raises
        ------
        ConfigurationError
            If ``value`` is not a mapping or names an unknown region.
        """
        if value is None:
            return cls()
        if isinstance(value, Theme):
            return value
        if not isinstance(value, Mapping):
            raise ConfigurationError(f"Theme must be a mapping, got {type(value).__name__}")
        unknown = set(value) - set(REGIONS)
        if unknown:
            raise ConfigurationError(
                f"Unknown theme region(s) {sorted(unknown)}. Available: {', '.join(REGIONS)}"
            )
        return cls(**{name: ColorSpec.coerce(value.get(name)) for name in REGIONS})


DEFAULT_GLOBAL_THEME = Theme(
    level=ColorSpec(text=TEXT_COLOR),
    date=ColorSpec(text=DATE_COLOR),
    message=ColorSpec(text=MESSAGE_COLOR),
)

DEFAULT_LEVEL_THEMES = {
    level: Theme(level=ColorSpec(background=background))
    for level, background in LEVEL_BACKGROUNDS.items()
}
