"""Closed enumerations of theme and color-set names.

Both sets are fixed: the theme catalog, the color catalog, and the
resolver are all keyed by these members, so adding or removing a
variant is a change to every one of them.
"""

from __future__ import annotations

import enum
from typing import Union


class ThemeName(enum.Enum):
    """Visual theme variants, in cycling order."""

    LIGHT = "light"
    DARK = "dark"
    FLUENT = "fluent"
    NEON = "neon"
    MATERIAL3 = "material3"
    NEUMORPHISM = "neumorphism"
    BRUTALIST = "brutalist"
    RETRO = "retro"


class ColorSetName(enum.Enum):
    """Semantic color catalogs available in every theme."""

    FINANCIAL = "financial"
    SENTIMENT = "sentiment"
    STATUS = "status"
    PERFORMANCE = "performance"
    TEMPERATURE = "temperature"
    PRIORITY = "priority"
    CATEGORIES = "categories"
    DIVERGING = "diverging"


ThemeLike = Union[ThemeName, str]
ColorSetLike = Union[ColorSetName, str]


def theme_name(value: ThemeLike) -> ThemeName:
    """Coerce *value* to a :class:`ThemeName`.

    Raises
    ------
    KeyError
        If *value* is not one of the theme names.  The message lists
        all available names.
    """
    if isinstance(value, ThemeName):
        return value
    try:
        return ThemeName(value)
    except ValueError:
        available = ", ".join(t.value for t in ThemeName)
        raise KeyError(
            f"Unknown theme '{value}'. Available themes: {available}"
        ) from None


def color_set_name(value: ColorSetLike) -> ColorSetName:
    """Coerce *value* to a :class:`ColorSetName`.

    Raises
    ------
    KeyError
        If *value* is not one of the color-set names.
    """
    if isinstance(value, ColorSetName):
        return value
    try:
        return ColorSetName(value)
    except ValueError:
        available = ", ".join(c.value for c in ColorSetName)
        raise KeyError(
            f"Unknown color set '{value}'. Available color sets: {available}"
        ) from None
