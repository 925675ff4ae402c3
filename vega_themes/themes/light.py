"""Built-in light theme.

Clean and professional: grey text on a white page with Material blue as
the primary color.  This is the default theme.
"""

from __future__ import annotations

from vega_themes.themes.base import Theme

#: The built-in light theme.
#:
#: Text and grid colors are the fallbacks of the page's
#: ``--vega-text-color``, ``--vega-title-color`` and ``--vega-grid-color``
#: custom properties, so charts match the surrounding UI.
LIGHT_THEME = Theme(
    name="light",
    description="Clean and professional, grey text on white",
    category=(
        "#1976d2", "#757575", "#2e7d32", "#ed6c02",
        "#d32f2f", "#0288d1", "#7b1fa2", "#388e3c",
    ),
    label_color="#666666",
    title_color="#333333",
    grid_color="#e0e0e0",
    color_sets={
        # Greens for money/growth
        "financial": ("#2e7d32", "#66bb6a", "#4caf50", "#81c784", "#a5d6a7"),
        # Negative, neutral, positive
        "sentiment": ("#f44336", "#ff9800", "#4caf50"),
        # Success, warning, error, info
        "status": ("#4caf50", "#ff9800", "#f44336", "#2196f3"),
        "performance": (
            "#d32f2f", "#ff5722", "#ff9800", "#fbc02d", "#689f38", "#4caf50",
        ),
        "temperature": (
            "#2196f3", "#03a9f4", "#00bcd4", "#009688", "#4caf50", "#8bc34a",
            "#cddc39", "#ffeb3b", "#ffc107", "#ff9800", "#ff5722",
        ),
        # Low, medium, high, critical
        "priority": ("#e8f5e8", "#c8e6c9", "#ffcc02", "#ff6b35"),
        "categories": (
            "#1976d2", "#388e3c", "#f57c00", "#7b1fa2",
            "#c2185b", "#0097a7", "#512da8", "#d32f2f",
        ),
        # Red to green through white
        "diverging": (
            "#d32f2f", "#f57c00", "#fdd835", "#ffffff",
            "#81c784", "#4caf50", "#2e7d32",
        ),
    },
)
