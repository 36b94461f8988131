import pytest

from hexlog.core.exceptions import ConfigurationError
from hexlog.core.theme import DEFAULT_GLOBAL_THEME, DEFAULT_LEVEL_THEMES, ColorSpec, Theme
from hexlog.core.levels import LogLevel


def test_color_spec_merge_is_field_by_field() -> None:
    local = ColorSpec(background="#111111")
    base = ColorSpec(text="#ffffff", background="#000000")
    assert local.merged_over(base) == ColorSpec(text="#ffffff", background="#111111")


def test_color_spec_merge_with_empty_local_inherits_everything() -> None:
    base = ColorSpec(text="#ffffff", background="#000000")
    assert ColorSpec().merged_over(base) == base


def test_theme_merge_keeps_untouched_regions() -> None:
    local = Theme(level=ColorSpec(text="#123456"))
    merged = local.merged_over(DEFAULT_LEVEL_THEMES[LogLevel.INFO])
    assert merged.level == ColorSpec(text="#123456", background="#72a1f7")
    assert merged.date == ColorSpec()
    assert merged.message == ColorSpec()


def test_coerce_from_mapping() -> None:
    theme = Theme.coerce({"message": {"text": "#abcdef"}})
    assert theme.message == ColorSpec(text="#abcdef")
    assert theme.level == ColorSpec()


def test_coerce_passes_instances_through() -> None:
    theme = Theme(date=ColorSpec(background="#000000"))
    assert Theme.coerce(theme) is theme
    assert Theme.coerce(None) == Theme()


def test_coerce_rejects_unknown_region() -> None:
    with pytest.raises(ConfigurationError, match="body"):
        Theme.coerce({"body": {"text": "#ffffff"}})


def test_coerce_rejects_unknown_color_field() -> None:
    with pytest.raises(ConfigurationError, match="foreground"):
        ColorSpec.coerce({"foreground": "#ffffff"})


def test_coerce_rejects_non_mapping() -> None:
    with pytest.raises(ConfigurationError):
        Theme.coerce("#ffffff")


def test_region_lookup() -> None:
    assert DEFAULT_GLOBAL_THEME.region("date") == ColorSpec(text="#ff9d5c")
    with pytest.raises(ConfigurationError):
        DEFAULT_GLOBAL_THEME.region("footer")


def test_every_level_has_a_default_background() -> None:
    assert set(DEFAULT_LEVEL_THEMES) == set(LogLevel)
    assert all(theme.level.background for theme in DEFAULT_LEVEL_THEMES.values())
