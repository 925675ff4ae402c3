"""Tests for color-set lookup and name coercion."""

from __future__ import annotations

import pytest

from vega_themes.colors import (
    COLOR_SET_INFO,
    color_catalog,
    color_set,
    format_color_set,
)
from vega_themes.names import ColorSetName, ThemeName, color_set_name, theme_name


# ---------------------------------------------------------------------------
# Unit: name coercion
# ---------------------------------------------------------------------------


class TestNames:
    """theme_name and color_set_name coerce strings and enums."""

    def test_theme_name_from_string(self) -> None:
        assert theme_name("material3") is ThemeName.MATERIAL3

    def test_theme_name_passthrough(self) -> None:
        assert theme_name(ThemeName.RETRO) is ThemeName.RETRO

    def test_theme_name_unknown(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            theme_name("Dark")
        msg = str(exc_info.value)
        assert "Unknown theme 'Dark'" in msg
        assert "light, dark, fluent" in msg

    def test_color_set_name_from_string(self) -> None:
        assert color_set_name("diverging") is ColorSetName.DIVERGING

    def test_color_set_name_unknown(self) -> None:
        with pytest.raises(KeyError, match="Available color sets: financial"):
            color_set_name("rainbow")

    def test_theme_order_is_cycling_order(self) -> None:
        assert [t.value for t in ThemeName] == [
            "light", "dark", "fluent", "neon",
            "material3", "neumorphism", "brutalist", "retro",
        ]


# ---------------------------------------------------------------------------
# Unit: color_set / color_catalog
# ---------------------------------------------------------------------------


class TestColorSet:
    """Color sequences per (theme, color set)."""

    def test_light_financial(self) -> None:
        assert color_set("light", "financial") == [
            "#2e7d32", "#66bb6a", "#4caf50", "#81c784", "#a5d6a7",
        ]

    def test_accepts_enums(self) -> None:
        assert color_set(ThemeName.DARK, ColorSetName.SENTIMENT) == [
            "#ef5350", "#ffb74d", "#66bb6a",
        ]

    def test_returns_new_list(self) -> None:
        colors = color_set("light", "status")
        colors.append("#000000")
        assert "#000000" not in color_set("light", "status")

    def test_same_set_differs_between_themes(self) -> None:
        assert color_set("light", "status") != color_set("brutalist", "status")

    def test_unknown_color_set(self) -> None:
        with pytest.raises(KeyError, match="Unknown color set"):
            color_set("light", "rainbow")

    def test_unknown_theme(self) -> None:
        with pytest.raises(KeyError, match="Unknown theme"):
            color_set("sepia", "status")

    def test_catalog_has_every_set_in_order(self) -> None:
        catalog = color_catalog("neon")
        assert list(catalog) == [c.value for c in ColorSetName]
        assert catalog["status"] == color_set("neon", "status")

    def test_catalog_is_a_copy(self) -> None:
        catalog = color_catalog("retro")
        catalog["status"].clear()
        assert color_set("retro", "status")


# ---------------------------------------------------------------------------
# Unit: metadata and formatting
# ---------------------------------------------------------------------------


class TestColorSetInfo:
    def test_every_set_described(self) -> None:
        assert set(COLOR_SET_INFO) == set(ColorSetName)
        for info in COLOR_SET_INFO.values():
            assert info.title
            assert info.description

    def test_format_color_set(self) -> None:
        assert format_color_set(["#000000", "#ffffff"]) == "#000000, #ffffff"

    def test_format_empty(self) -> None:
        assert format_color_set([]) == ""
