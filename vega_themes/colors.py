"""Semantic color catalogs.

Every theme carries eight purpose-built color sequences (financial,
sentiment, status, ...).  Selecting one replaces the theme's default
category colors without touching any other styling.  The sequences live
next to the rest of each theme's data in ``vega_themes.themes``; this
module is the lookup side of that table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from vega_themes.names import (
    ColorSetLike,
    ColorSetName,
    ThemeLike,
    color_set_name,
)
from vega_themes.themes import get_theme


@dataclass(frozen=True)
class ColorSetInfo:
    """Display metadata for a color set."""

    title: str
    description: str


COLOR_SET_INFO: Dict[ColorSetName, ColorSetInfo] = {
    ColorSetName.FINANCIAL: ColorSetInfo(
        "Financial", "Perfect for revenue, profit, growth charts"),
    ColorSetName.SENTIMENT: ColorSetInfo(
        "Sentiment", "Negative, neutral, positive indicators"),
    ColorSetName.STATUS: ColorSetInfo(
        "Status", "Success, warning, error, info states"),
    ColorSetName.PERFORMANCE: ColorSetInfo(
        "Performance", "Bad to good performance gradients"),
    ColorSetName.TEMPERATURE: ColorSetInfo(
        "Temperature", "Cool to warm color transitions"),
    ColorSetName.PRIORITY: ColorSetInfo(
        "Priority", "Low, medium, high, critical levels"),
    ColorSetName.CATEGORIES: ColorSetInfo(
        "Categories", "General purpose categorical data"),
    ColorSetName.DIVERGING: ColorSetInfo(
        "Diverging", "Show deviation from center point"),
}


def color_set(theme: ThemeLike, name: ColorSetLike) -> List[str]:
    """Return the *name* color sequence as defined by *theme*.

    The result is a new list; index 0 is the primary color.

    Raises
    ------
    KeyError
        If either name is unknown.
    """
    key = color_set_name(name)
    return list(get_theme(theme).color_sets[key.value])


def color_catalog(theme: ThemeLike) -> Dict[str, List[str]]:
    """Return all color sequences for *theme*, keyed by color-set name."""
    t = get_theme(theme)
    return {c.value: list(t.color_sets[c.value]) for c in ColorSetName}


def format_color_set(colors: Sequence[str]) -> str:
    """Join *colors* into the comma-separated form shown to users."""
    return ", ".join(colors)
