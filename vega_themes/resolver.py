"""Config resolution: theme plus optional color-set override.

:func:`resolve` is the first step of the resolution pipeline.  It picks
the theme's config and, when a color set is active, swaps the set's
colors into the category and ordinal ranges and the default mark color.
Axis, legend, title and view styling always stay theme-native.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from vega_themes.colors import color_set
from vega_themes.names import ColorSetLike, ThemeLike
from vega_themes.themes import get_theme, theme_config
from vega_themes.themes.base import ThemeConfig

logger = logging.getLogger(__name__)

# Fallbacks used when a config lacks a category range.
DEFAULT_PRIMARY = "#1976d2"
DEFAULT_SECONDARY = "#757575"
DEFAULT_TERTIARY = "#2e7d32"


def resolve(
    theme: ThemeLike,
    color_set_name: Optional[ColorSetLike] = None,
) -> ThemeConfig:
    """Return the config for *theme*, overridden by *color_set_name*.

    The returned dict is always newly built; mutating it does not affect
    later calls.

    Raises
    ------
    KeyError
        If the theme or color-set name is unknown.
    """
    config = theme_config(theme)
    if color_set_name is None:
        logger.debug("Resolved theme %s", get_theme(theme).name)
        return config

    colors = color_set(theme, color_set_name)
    config["range"] = {
        **config["range"],
        "category": colors,
        "ordinal": list(colors),
    }
    config["mark"] = {**config["mark"], "color": colors[0]}
    logger.debug(
        "Resolved theme %s with color set override %s",
        get_theme(theme).name,
        colors,
    )
    return config


def theme_colors(config: ThemeConfig) -> Dict[str, Any]:
    """Summarise the default encoding colors of a resolved config.

    Returns primary/secondary/tertiary colors taken from the category
    range, plus the category, diverging and ordinal schemes.
    """
    ranges = config.get("range") or {}
    category = list(ranges.get("category") or [])

    def pick(index: int, fallback: str) -> str:
        return category[index] if len(category) > index else fallback

    return {
        "primary": pick(0, DEFAULT_PRIMARY),
        "secondary": pick(1, DEFAULT_SECONDARY),
        "tertiary": pick(2, DEFAULT_TERTIARY),
        "category_scheme": category,
        "diverging_scheme": list(ranges.get("diverging") or []),
        "ordinal_scheme": list(ranges.get("ordinal") or []),
    }


def is_dark_theme(theme: ThemeLike) -> bool:
    """Return whether *theme* renders on a dark background."""
    return get_theme(theme).dark


def is_transparent_theme(theme: ThemeLike) -> bool:
    """Return whether *theme* uses translucent chart containers."""
    return get_theme(theme).transparent


def container_style(theme: ThemeLike) -> Dict[str, str]:
    """Return the chart container styling for *theme* (may be empty)."""
    return dict(get_theme(theme).container_style)
