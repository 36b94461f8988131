from __future__ import annotations

"""
Logger configuration and the merge of user options over built-in defaults.

Options follow the layout ``{"global", "theme", "formatting", "templates",
"logNames"}``. Every nesting level is merged field by field: supplying only
``theme.info.level.background`` keeps ``theme.info.message`` and every
other default untouched.
"""

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union

from loguru import logger

from .exceptions import ConfigurationError
from .levels import LogLevel, resolve_level
from .templates import DEFAULT_TEMPLATE
from .theme import DEFAULT_GLOBAL_THEME, DEFAULT_LEVEL_THEMES, TEXT_COLOR, ColorSpec, Theme

DEFAULT_DATE_FORMAT = "D MMM YYYY HH:mm:ss"

TemplateSource = Union[str, Callable[[], str]]

OPTION_KEYS = ("global", "theme", "formatting", "templates", "logNames")
OPTION_ALIASES = {
    "global_theme": "global",
    "themes": "theme",
    "log_names": "logNames",
}
FORMATTING_ALIASES = {
    "dateFormat": "date_format",
    "baseColor": "base_color",
    "colorSystem": "color_system",
}
COLOR_SYSTEMS = ("auto", "truecolor", "256", "standard", "windows")


@dataclass(frozen=True)
class Formatting:
    """
    Line-wide formatting settings.

    Parameters
    ----------
    date_format : str
        Moment-style timestamp pattern, by default ``"D MMM YYYY HH:mm:ss"``.
    base_color : str
        Foreground color wrapped around the template's literal text.
    color_system : str, optional
        ``"auto"``, ``"truecolor"``, ``"256"``, ``"standard"``, ``"windows"``,
        or ``None`` for uncolored output.
    """

    date_format: str = DEFAULT_DATE_FORMAT
    base_color: str = TEXT_COLOR
    color_system: Optional[str] = "auto"

    def merged(self, overrides: Union[Formatting, Mapping[str, Any], None]) -> Formatting:
        """
        Return a copy with the non-empty fields of ``overrides`` applied.

        An empty ``date_format`` or ``base_color`` keeps the current value.
        ``color_system`` may be set to ``None`` explicitly to disable colors.
        """
        if overrides is None:
            return self
        if isinstance(overrides, Formatting):
            overrides = {f.name: getattr(overrides, f.name) for f in fields(Formatting)}
        if not isinstance(overrides, Mapping):
            raise ConfigurationError(f"Formatting must be a mapping, got {type(overrides).__name__}")

        changes: dict[str, Any] = {}
        known = {f.name for f in fields(Formatting)}
        for key, value in overrides.items():
            name = FORMATTING_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(
                    f'Unknown formatting option "{key}". Available: {", ".join(FORMATTING_ALIASES)}'
                )
            if name == "color_system":
                changes[name] = _color_system(value)
            elif value:
                changes[name] = value
        return replace(self, **changes)


@dataclass(frozen=True)
class LoggerConfig:
    """
    Fully merged, immutable logger configuration.

    Parameters
    ----------
    global_theme : Theme
        Theme applied to every level.
    themes : Mapping[LogLevel, Theme]
        Per-level themes, one for every level.
    templates : Mapping[LogLevel, TemplateSource]
        Per-level templates. Levels without an entry use the default template.
    formatting : Formatting
        Date pattern, base color and color system.
    log_names : Mapping[LogLevel, str]
        Display-name overrides for the level region.
    """

    global_theme: Theme = DEFAULT_GLOBAL_THEME
    themes: Mapping[LogLevel, Theme] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_LEVEL_THEMES))
    )
    templates: Mapping[LogLevel, TemplateSource] = field(
        default_factory=lambda: MappingProxyType({})
    )
    formatting: Formatting = field(default_factory=Formatting)
    log_names: Mapping[LogLevel, str] = field(default_factory=lambda: MappingProxyType({}))

    def effective_color(self, level: LogLevel, region: str) -> ColorSpec:
        """
        Per-level color spec for ``region`` merged over the global one.

        Returns
        -------
        ColorSpec
            ``text`` and ``background`` each taken from the per-level theme
            when set, else from the global theme, else ``None``.
        """
        local = self.themes.get(level, Theme()).region(region)
        return local.merged_over(self.global_theme.region(region))

    def template_for(self, level: LogLevel) -> str:
        """
        Template text for ``level``; callables are evaluated on each call.
        """
        source = self.templates.get(level)
        if source is None:
            return DEFAULT_TEMPLATE
        return source() if callable(source) else source

    def display_name(self, level: LogLevel) -> str:
        return self.log_names.get(level) or level.display


def _color_system(value: Any) -> Optional[str]:
    if value is None:
        return None
    name = str(value).strip().lower()
    if name not in COLOR_SYSTEMS:
        raise ConfigurationError(
            f'Unknown color system "{value}". Available: {", ".join(COLOR_SYSTEMS)} or None'
        )
    return name


def _normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
    if not isinstance(options, Mapping):
        raise ConfigurationError(f"Logger options must be a mapping, got {type(options).__name__}")
    normalized: dict[str, Any] = {}
    for key, value in options.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in OPTION_KEYS:
            raise ConfigurationError(
                f'Unknown logger option "{key}". Available: {", ".join(OPTION_KEYS)}'
            )
        if name != key:
            logger.trace('Option alias "{}" resolved to "{}"', key, name)
        normalized[name] = value
    return normalized


def _per_level(value: Any, option: str) -> dict[LogLevel, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f'Option "{option}" must be a mapping of level to value')
    return {resolve_level(key): item for key, item in value.items()}


def build_config(options: Union[LoggerConfig, Mapping[str, Any], None] = None) -> LoggerConfig:
    """
    Merge user options over the built-in defaults.

    Parameters
    ----------
    options : Mapping or LoggerConfig, optional
        User options. A ``LoggerConfig`` is returned unchanged.

    Returns
    -------
    LoggerConfig
        The merged configuration.

    Raises
    ------
    ConfigurationError
        On unknown option keys, regions or color fields.
    UnknownLevelError
        On unknown level keys in ``theme``, ``templates`` or ``logNames``.

    Notes
    -----
    Unknown keys are rejected here rather than ignored, so a misspelled
    option fails at construction instead of silently falling back to the
    default. Log emission itself performs no validation.
    """
    if isinstance(options, LoggerConfig):
        return options
    opts = _normalize_options(options or {})

    global_theme = Theme.coerce(opts.get("global")).merged_over(DEFAULT_GLOBAL_THEME)

    user_themes = _per_level(opts.get("theme"), "theme")
    themes = {
        level: Theme.coerce(user_themes.get(level)).merged_over(DEFAULT_LEVEL_THEMES[level])
        for level in LogLevel
    }

    templates = {
        level: source
        for level, source in _per_level(opts.get("templates"), "templates").items()
        if source is not None
    }
    log_names = {
        level: name
        for level, name in _per_level(opts.get("logNames"), "logNames").items()
        if name
    }

    formatting = Formatting().merged(opts.get("formatting"))

    config = LoggerConfig(
        global_theme=global_theme,
        themes=MappingProxyType(themes),
        templates=MappingProxyType(templates),
        formatting=formatting,
        log_names=MappingProxyType(log_names),
    )
    logger.debug(
        "Logger configuration resolved: date_format={!r}, base_color={!r}, color_system={!r}, "
        "custom templates={}, custom names={}",
        formatting.date_format,
        formatting.base_color,
        formatting.color_system,
        sorted(level.value for level in templates),
        sorted(level.value for level in log_names),
    )
    return config
