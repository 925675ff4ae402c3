"""Built-in brutalist theme.

Raw and high contrast: black text and grid at full opacity, bold
titles, pure web colors and square, heavy-stroked marks.
"""

from __future__ import annotations

from vega_themes.themes.base import Theme

BRUTALIST_THEME = Theme(
    name="brutalist",
    description="Raw black-on-white with pure web colors",
    category=(
        "#000000", "#ff0000", "#00ff00", "#ffff00",
        "#ff0000", "#0000ff", "#ff00ff", "#00ffff",
    ),
    label_color="#000000",
    title_color="#000000",
    grid_color="#000000",
    grid_opacity=1,
    axis_style={"titleFontWeight": 700, "labelFontWeight": 600},
    legend_style={"titleFontWeight": 700},
    title_style={"fontWeight": 700, "fontSize": 16},
    mark_style={"strokeWidth": 3, "cornerRadius": 0},
    color_sets={
        "financial": ("#00ff00", "#008000", "#228b22", "#32cd32", "#90ee90"),
        "sentiment": ("#ff0000", "#ffff00", "#00ff00"),
        "status": ("#00ff00", "#ffff00", "#ff0000", "#0000ff"),
        "performance": (
            "#ff0000", "#ff4500", "#ffff00", "#adff2f", "#32cd32", "#00ff00",
        ),
        "temperature": (
            "#0000ff", "#0080ff", "#00ffff", "#40e0d0", "#00ff7f",
            "#adff2f", "#ffff00", "#ffa500", "#ff4500", "#ff0000",
        ),
        "priority": ("#c0c0c0", "#808080", "#ffff00", "#ff0000"),
        "categories": (
            "#000000", "#ff0000", "#00ff00", "#ffff00",
            "#0000ff", "#ff00ff", "#00ffff", "#ffffff",
        ),
        "diverging": (
            "#ff0000", "#ffff00", "#adff2f", "#ffffff",
            "#00ff7f", "#00ff00", "#008000",
        ),
    },
    container_style={
        "background": "#ffffff",
        "border": "3px solid #000000",
        "boxShadow": "5px 5px 0px #000000",
        "borderRadius": "0px",
    },
)
