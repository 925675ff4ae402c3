"""Built-in retro theme.

Warm, nostalgic browns and golds on a parchment gradient container.
"""

from __future__ import annotations

from vega_themes.themes.base import Theme

RETRO_THEME = Theme(
    name="retro",
    description="Warm vintage browns and golds",
    category=(
        "#d2691e", "#8b4513", "#228b22", "#ffa500",
        "#dc143c", "#4682b4", "#9932cc", "#ff6347",
    ),
    label_color="#5d4e37",
    title_color="#2f1b14",
    grid_color="#d2b48c",
    grid_opacity=0.5,
    axis_style={"titleFontStyle": "normal"},
    title_style={"fontStyle": "normal"},
    mark_style={"cornerRadius": 4},
    color_sets={
        "financial": ("#228b22", "#daa520", "#cd853f", "#f4a460", "#deb887"),
        "sentiment": ("#dc143c", "#daa520", "#228b22"),
        "status": ("#228b22", "#daa520", "#dc143c", "#4682b4"),
        "performance": (
            "#dc143c", "#cd5c5c", "#daa520", "#bdb76b", "#9acd32", "#228b22",
        ),
        "temperature": (
            "#4682b4", "#5f9ea0", "#48d1cc", "#20b2aa", "#3cb371",
            "#9acd32", "#bdb76b", "#daa520", "#cd853f", "#d2691e",
        ),
        "priority": ("#f5deb3", "#deb887", "#daa520", "#b22222"),
        "categories": (
            "#d2691e", "#8b4513", "#228b22", "#daa520",
            "#dc143c", "#4682b4", "#9932cc", "#ff6347",
        ),
        "diverging": (
            "#dc143c", "#daa520", "#bdb76b", "#f5deb3",
            "#9acd32", "#228b22", "#006400",
        ),
    },
    container_style={
        "background": "linear-gradient(135deg, #faebd7, #f5deb3)",
        "border": "2px solid #d2b48c",
        "borderRadius": "10px",
        "boxShadow": "4px 4px 8px rgba(139, 69, 19, 0.3)",
    },
)
