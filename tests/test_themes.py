"""Tests for the theme base class, built-in themes, registry, and discovery."""

from __future__ import annotations

import pytest

from vega_themes.names import ColorSetName, ThemeName
from vega_themes.themes import ThemeRegistry, get_theme, list_themes, theme_config
from vega_themes.themes.base import CATEGORY_SIZE, FONT_STACK, Theme
from vega_themes.themes.brutalist import BRUTALIST_THEME
from vega_themes.themes.dark import DARK_THEME
from vega_themes.themes.light import LIGHT_THEME
from vega_themes.themes.neon import NEON_THEME


def _color_sets(color: str = "#123456") -> dict:
    return {c.value: (color,) for c in ColorSetName}


def _theme(name: str = "light", **kwargs) -> Theme:
    kwargs.setdefault("category", ("#000000",) * CATEGORY_SIZE)
    kwargs.setdefault("color_sets", _color_sets())
    return Theme(name=name, **kwargs)


# ---------------------------------------------------------------------------
# Unit: Theme dataclass
# ---------------------------------------------------------------------------


class TestThemeDataclass:
    """Theme dataclass creation, defaults and validation."""

    def test_create_theme_with_defaults(self) -> None:
        theme = Theme(name="minimal")
        assert theme.description == ""
        assert theme.category == ()
        assert theme.label_color == "#666666"
        assert theme.title_color == "#333333"
        assert theme.grid_color == "#e0e0e0"
        assert theme.grid_opacity == 0.3
        assert theme.dark is False
        assert theme.transparent is False
        assert dict(theme.container_style) == {}

    def test_theme_is_frozen(self) -> None:
        theme = Theme(name="frozen")
        with pytest.raises(AttributeError):
            theme.name = "mutated"  # type: ignore[misc]

    def test_type_validation_rejects_bad_name(self) -> None:
        with pytest.raises(TypeError, match="name"):
            Theme(name=123)  # type: ignore[arg-type]

    def test_type_validation_rejects_list_category(self) -> None:
        with pytest.raises(TypeError, match="category"):
            Theme(name="bad", category=["#000000"])  # type: ignore[arg-type]

    def test_type_validation_rejects_bad_opacity(self) -> None:
        with pytest.raises(TypeError, match="grid_opacity"):
            Theme(name="bad", grid_opacity="high")  # type: ignore[arg-type]

    def test_rejects_non_hex_category_color(self) -> None:
        with pytest.raises(ValueError, match="category"):
            Theme(name="bad", category=("red",))

    def test_rejects_non_hex_color_set_color(self) -> None:
        with pytest.raises(ValueError, match="financial"):
            Theme(name="bad", color_sets={"financial": ("#12345",)})

    def test_primary_is_first_category_color(self) -> None:
        assert LIGHT_THEME.primary == "#1976d2"


# ---------------------------------------------------------------------------
# Unit: build_config
# ---------------------------------------------------------------------------


class TestBuildConfig:
    """Theme.build_config produces complete, independent configs."""

    def test_has_all_sub_records(self) -> None:
        config = LIGHT_THEME.build_config()
        for key in ("axis", "legend", "title", "view", "mark", "range"):
            assert isinstance(config[key], dict), key

    def test_top_level_settings(self) -> None:
        config = LIGHT_THEME.build_config()
        assert config["background"] == "transparent"
        assert config["padding"] == 20
        assert config["autosize"] == {"type": "fit", "contains": "padding"}

    def test_light_axis_colors(self) -> None:
        axis = LIGHT_THEME.build_config()["axis"]
        assert axis["labelColor"] == "#666666"
        assert axis["titleColor"] == "#333333"
        assert axis["gridColor"] == "#e0e0e0"
        assert axis["gridOpacity"] == 0.3
        assert axis["labelFont"] == FONT_STACK

    def test_legend_uses_axis_text_colors(self) -> None:
        config = DARK_THEME.build_config()
        assert config["legend"]["labelColor"] == "#b0bec5"
        assert config["legend"]["titleColor"] == "#ffffff"

    def test_title_color_follows_title_color_field(self) -> None:
        assert DARK_THEME.build_config()["title"]["color"] == "#ffffff"

    def test_derived_ranges(self) -> None:
        c = list(LIGHT_THEME.category)
        ranges = LIGHT_THEME.build_config()["range"]
        assert ranges["category"] == c
        assert ranges["diverging"] == [c[4], "#ffffff", c[0]]
        assert ranges["heatmap"] == ["#ffffff", c[1], c[0]]
        assert ranges["ordinal"] == [c[0], c[1], c[2], c[3]]

    def test_mark_color_is_primary(self) -> None:
        mark = NEON_THEME.build_config()["mark"]
        assert mark["color"] == NEON_THEME.category[0]
        assert mark["stroke"] == NEON_THEME.category[0]

    def test_style_overrides_applied(self) -> None:
        config = BRUTALIST_THEME.build_config()
        assert config["axis"]["titleFontWeight"] == 700
        assert config["axis"]["labelFontWeight"] == 600
        assert config["legend"]["titleFontWeight"] == 700
        assert config["title"]["fontWeight"] == 700
        assert config["title"]["fontSize"] == 16
        assert config["mark"]["strokeWidth"] == 3
        assert config["mark"]["cornerRadius"] == 0

    def test_each_call_returns_new_objects(self) -> None:
        first = LIGHT_THEME.build_config()
        second = LIGHT_THEME.build_config()
        assert first == second
        assert first is not second
        first["range"]["category"].append("#ffffff")
        first["axis"]["labelColor"] = "#000000"
        assert LIGHT_THEME.build_config() == second

    def test_mutating_config_does_not_touch_theme_overrides(self) -> None:
        config = NEON_THEME.build_config()
        config["mark"]["strokeOpacity"] = 0.1
        assert NEON_THEME.mark_style["strokeOpacity"] == 0.8


# ---------------------------------------------------------------------------
# Unit: built-in catalog
# ---------------------------------------------------------------------------


class TestBuiltinThemes:
    """Every theme name has a complete, valid definition."""

    @pytest.mark.parametrize("name", [t.value for t in ThemeName])
    def test_every_theme_name_is_registered(self, name: str) -> None:
        theme = get_theme(name)
        assert theme.name == name
        assert len(theme.category) == CATEGORY_SIZE

    @pytest.mark.parametrize("name", [t.value for t in ThemeName])
    def test_every_theme_has_every_color_set(self, name: str) -> None:
        theme = get_theme(name)
        for color_set in ColorSetName:
            assert theme.color_sets[color_set.value], color_set

    def test_exactly_eight_themes(self) -> None:
        assert len(list_themes()) == 8

    def test_dark_flags(self) -> None:
        dark = {name for name in list_themes() if get_theme(name).dark}
        assert dark == {"dark", "neon"}

    def test_transparent_flags(self) -> None:
        transparent = {n for n in list_themes() if get_theme(n).transparent}
        assert transparent == {"fluent"}

    def test_light_and_dark_have_no_container_style(self) -> None:
        assert dict(LIGHT_THEME.container_style) == {}
        assert dict(DARK_THEME.container_style) == {}

    def test_neon_grid_uses_rgba(self) -> None:
        assert theme_config("neon")["axis"]["gridColor"] == "rgba(0, 245, 255, 0.3)"

    def test_themes_are_visually_distinct(self) -> None:
        primaries = {get_theme(n).category[0] for n in list_themes()}
        assert len(primaries) == 8


# ---------------------------------------------------------------------------
# Unit: get_theme / theme_config lookup
# ---------------------------------------------------------------------------


class TestGetTheme:
    """Module-level lookup functions."""

    def test_get_theme_by_string(self) -> None:
        assert get_theme("light") is LIGHT_THEME

    def test_get_theme_by_enum(self) -> None:
        assert get_theme(ThemeName.DARK) is DARK_THEME

    def test_get_theme_returns_same_instance(self) -> None:
        assert get_theme("dark") is get_theme("dark")

    def test_unknown_theme_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="Unknown theme 'sepia'"):
            get_theme("sepia")

    def test_error_message_lists_available_themes(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            get_theme("sepia")
        msg = str(exc_info.value)
        assert "Available themes:" in msg
        assert "material3" in msg

    def test_theme_config_matches_build_config(self) -> None:
        assert theme_config("retro") == get_theme("retro").build_config()

    def test_list_themes_sorted(self) -> None:
        result = list_themes()
        assert result == sorted(result)


# ---------------------------------------------------------------------------
# Unit: ThemeRegistry
# ---------------------------------------------------------------------------


class TestThemeRegistry:
    """ThemeRegistry creation, discovery, and lookup."""

    def test_registry_discovers_builtin_themes(self) -> None:
        registry = ThemeRegistry()
        assert registry.list_themes() == sorted(t.value for t in ThemeName)

    def test_registry_no_auto_discover(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        assert len(registry) == 0

    def test_registry_manual_register(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        theme = _theme("retro", description="Custom retro")
        registry.register(theme)
        assert registry.get("retro") is theme

    def test_registry_register_rejects_non_theme(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        with pytest.raises(TypeError, match="Expected a Theme instance"):
            registry.register({"name": "light"})  # type: ignore[arg-type]

    def test_registry_duplicate_name_last_wins(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        first = _theme("dark", description="first")
        second = _theme("dark", description="second")
        registry.register(first)
        registry.register(second)
        assert registry.get("dark") is second

    def test_registry_contains_accepts_enum(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        registry.register(_theme("neon"))
        assert ThemeName.NEON in registry
        assert "neon" in registry
        assert "light" not in registry

    def test_registry_iter(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        registry.register(_theme("retro"))
        registry.register(_theme("dark"))
        assert list(registry) == ["dark", "retro"]


# ---------------------------------------------------------------------------
# Unit: validation rejects incomplete theme definitions
# ---------------------------------------------------------------------------


class TestThemeValidation:
    """ThemeRegistry._validate enforces catalog completeness."""

    def test_rejects_unknown_theme_name(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        with pytest.raises(ValueError, match="sepia"):
            registry.register(_theme("sepia"))

    def test_rejects_short_category(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        with pytest.raises(ValueError, match="category"):
            registry.register(_theme(category=("#000000",) * 3))

    def test_rejects_missing_color_set(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        sets = _color_sets()
        del sets["priority"]
        with pytest.raises(ValueError, match="priority"):
            registry.register(_theme(color_sets=sets))

    def test_rejects_empty_color_set(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        sets = _color_sets()
        sets["status"] = ()
        with pytest.raises(ValueError, match="status"):
            registry.register(_theme(color_sets=sets))

    def test_accepts_valid_theme(self) -> None:
        registry = ThemeRegistry(auto_discover=False)
        registry.register(_theme("fluent"))
        assert "fluent" in registry
