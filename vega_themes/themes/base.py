"""Theme base class / dataclass definition.

Defines the Theme dataclass that serves as a declarative format for all
chart themes.  Each theme specifies text, grid and palette colors plus
a handful of style overrides, and builds the Vega-Lite ``config`` object
that the resolver hands to the annotator.
"""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

#: A Vega-Lite ``config`` object: ``axis``, ``legend``, ``title``,
#: ``view``, ``mark`` and ``range`` sub-records plus top-level settings.
ThemeConfig = Dict[str, Any]

HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

FONT_STACK = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", "Roboto", '
    '"Helvetica Neue", Arial, sans-serif'
)

# Number of entries in every theme's default category range.
CATEGORY_SIZE = 8


@dataclass(frozen=True)
class Theme:
    """Declarative theme definition for chart styling.

    Themes are immutable (frozen); :meth:`build_config` produces a new
    config dict on every call so callers may modify the result freely.

    Attributes:
        name: Theme identifier, one of the ``ThemeName`` values.
        description: Human-readable description of the theme.
        category: Default category color sequence (8 hex colors).  The
            first entry is the primary color.
        label_color: Axis and legend label color.
        title_color: Axis title, legend title and chart title color.
        grid_color: Axis grid line color.
        grid_opacity: Axis grid line opacity.
        axis_style: Extra ``config.axis`` properties.
        legend_style: Extra ``config.legend`` properties.
        title_style: Extra ``config.title`` properties.
        mark_style: Extra ``config.mark`` properties.
        color_sets: Semantic color sequences keyed by color-set name.
        dark: Whether the theme renders on a dark background.
        transparent: Whether chart containers are translucent.
        container_style: CSS-like styling for the chart container.
    """

    # Identity
    name: str
    description: str = ""

    # Palette
    category: Tuple[str, ...] = ()

    # Text and grid
    label_color: str = "#666666"
    title_color: str = "#333333"
    grid_color: str = "#e0e0e0"
    grid_opacity: float = 0.3

    # Per-record overrides
    axis_style: Mapping[str, Any] = field(default_factory=dict)
    legend_style: Mapping[str, Any] = field(default_factory=dict)
    title_style: Mapping[str, Any] = field(default_factory=dict)
    mark_style: Mapping[str, Any] = field(default_factory=dict)

    # Semantic catalogs
    color_sets: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    # Container presentation
    dark: bool = False
    transparent: bool = False
    container_style: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate field types and palette colors after initialization."""
        for field_name in ("name", "description", "label_color",
                           "title_color", "grid_color"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise TypeError(
                    f"Theme field '{field_name}' expects str, "
                    f"got {type(value).__name__}"
                )
        if not isinstance(self.grid_opacity, (int, float)):
            raise TypeError(
                "Theme field 'grid_opacity' expects float, "
                f"got {type(self.grid_opacity).__name__}"
            )
        if not isinstance(self.category, tuple):
            raise TypeError(
                "Theme field 'category' expects tuple, "
                f"got {type(self.category).__name__}"
            )
        _check_hex("category", self.category)
        for set_name, colors in self.color_sets.items():
            _check_hex(f"color_sets[{set_name!r}]", colors)

    @property
    def primary(self) -> str:
        """First category color, used as the default mark color."""
        return self.category[0]

    def build_config(self) -> ThemeConfig:
        """Return a new Vega-Lite config object for this theme."""
        c = list(self.category)
        primary = c[0]
        return {
            "background": "transparent",
            "padding": 20,
            "autosize": {"type": "fit", "contains": "padding"},
            "axis": {
                "labelFontSize": 11,
                "titleFontSize": 12,
                "grid": True,
                "gridOpacity": self.grid_opacity,
                "domain": False,
                "ticks": False,
                "labelPadding": 4,
                "titlePadding": 8,
                "labelColor": self.label_color,
                "titleColor": self.title_color,
                "gridColor": self.grid_color,
                "labelFont": FONT_STACK,
                "titleFont": FONT_STACK,
                **copy.deepcopy(dict(self.axis_style)),
            },
            "legend": {
                "labelFontSize": 11,
                "titleFontSize": 12,
                "padding": 10,
                "symbolSize": 100,
                "symbolStrokeWidth": 2,
                "labelColor": self.label_color,
                "titleColor": self.title_color,
                "labelFont": FONT_STACK,
                "titleFont": FONT_STACK,
                **copy.deepcopy(dict(self.legend_style)),
            },
            "title": {
                "fontSize": 14,
                "fontWeight": 400,
                "anchor": "start",
                "offset": 20,
                "color": self.title_color,
                "font": FONT_STACK,
                **copy.deepcopy(dict(self.title_style)),
            },
            "view": {"stroke": "transparent"},
            "range": {
                "category": c,
                "diverging": [c[4], "#ffffff", primary],
                "heatmap": ["#ffffff", c[1], primary],
                "ordinal": [primary, c[1], c[2], c[3]],
            },
            "mark": {
                "color": primary,
                "stroke": primary,
                "strokeWidth": 1.5,
                **copy.deepcopy(dict(self.mark_style)),
            },
        }


def _check_hex(field_name: str, colors: Any) -> None:
    for color in colors:
        if not isinstance(color, str) or not HEX_RE.match(color):
            raise ValueError(
                f"Theme field '{field_name}' expects #rrggbb colors, "
                f"got {color!r}"
            )
