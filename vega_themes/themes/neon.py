"""Built-in neon theme.

Cyberpunk look: cyan labels, glowing grid lines and saturated neon
palettes on a near-black container.
"""

from __future__ import annotations

from vega_themes.themes.base import Theme

NEON_THEME = Theme(
    name="neon",
    description="Futuristic neon colors with glowing accents",
    category=(
        "#00f5ff", "#ff006e", "#39ff14", "#ffff00",
        "#ff073a", "#00f5ff", "#ff1493", "#00ff7f",
    ),
    label_color="#00f5ff",
    title_color="#ffffff",
    grid_color="rgba(0, 245, 255, 0.3)",
    grid_opacity=0.6,
    axis_style={"titleFontWeight": 400, "labelFontWeight": 400},
    mark_style={"strokeWidth": 2, "strokeOpacity": 0.8},
    color_sets={
        "financial": ("#39ff14", "#00ff7f", "#00ffff", "#7fff00", "#adff2f"),
        "sentiment": ("#ff073a", "#ff006e", "#39ff14"),
        "status": ("#39ff14", "#ffff00", "#ff073a", "#00f5ff"),
        "performance": (
            "#ff073a", "#ff1744", "#ff006e", "#ffff00", "#7fff00", "#39ff14",
        ),
        "temperature": (
            "#00f5ff", "#00ffff", "#7fffd4", "#00ff7f", "#39ff14",
            "#7fff00", "#ffff00", "#ffa500", "#ff4500", "#ff073a",
        ),
        "priority": ("#1a1a1a", "#333333", "#ffff00", "#ff073a"),
        "categories": (
            "#00f5ff", "#ff006e", "#39ff14", "#ffff00",
            "#ff073a", "#00ff7f", "#ff1493", "#00ffff",
        ),
        # Diverging through black
        "diverging": (
            "#ff073a", "#ff006e", "#ffff00", "#000000",
            "#00ff7f", "#39ff14", "#00f5ff",
        ),
    },
    dark=True,
    container_style={
        "background": "rgba(5, 5, 5, 0.9)",
        "border": "1px solid rgba(0, 245, 255, 0.3)",
        "boxShadow": (
            "0 0 20px rgba(0, 245, 255, 0.2), "
            "inset 0 0 20px rgba(0, 245, 255, 0.1)"
        ),
        "borderRadius": "4px",
    },
)
