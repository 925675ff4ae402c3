"""Built-in dark theme.

Light-on-dark with high-contrast titles.  Palettes use the lighter
Material tones so marks stay visible on a dark background.
"""

from __future__ import annotations

from vega_themes.themes.base import Theme

DARK_THEME = Theme(
    name="dark",
    description="Easy on the eyes, high contrast on a dark background",
    category=(
        "#90caf9", "#b0bec5", "#66bb6a", "#ffb74d",
        "#f44336", "#4fc3f7", "#ba68c8", "#81c784",
    ),
    label_color="#b0bec5",
    title_color="#ffffff",
    grid_color="#424242",
    color_sets={
        "financial": ("#66bb6a", "#81c784", "#a5d6a7", "#c8e6c9", "#e8f5e8"),
        "sentiment": ("#ef5350", "#ffb74d", "#66bb6a"),
        "status": ("#66bb6a", "#ffb74d", "#ef5350", "#42a5f5"),
        "performance": (
            "#ef5350", "#ff7043", "#ffb74d", "#fff176", "#aed581", "#66bb6a",
        ),
        "temperature": (
            "#42a5f5", "#26c6da", "#26a69a", "#66bb6a", "#9ccc65",
            "#d4e157", "#ffee58", "#ffca28", "#ffb74d", "#ff8a65",
        ),
        "priority": ("#424242", "#757575", "#ffca28", "#ff6b35"),
        "categories": (
            "#90caf9", "#81c784", "#ffb74d", "#ce93d8",
            "#f48fb1", "#4dd0e1", "#b39ddb", "#ef5350",
        ),
        "diverging": (
            "#ef5350", "#ffb74d", "#fff176", "#37474f",
            "#81c784", "#66bb6a", "#4caf50",
        ),
    },
    dark=True,
)
