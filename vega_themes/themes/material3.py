"""Built-in Material Design 3 theme."""

from __future__ import annotations

from vega_themes.themes.base import Theme

MATERIAL3_THEME = Theme(
    name="material3",
    description="Google Material You tonal palette with rounded marks",
    category=(
        "#6750a4", "#625b71", "#006e1c", "#7d5260",
        "#ba1a1a", "#0061a4", "#8e4ec6", "#1e6091",
    ),
    label_color="#49454f",
    title_color="#1c1b1f",
    grid_color="#79747e",
    mark_style={"cornerRadius": 8},
    color_sets={
        "financial": ("#006e1c", "#0f5132", "#1e6091", "#0277bd", "#00838f"),
        "sentiment": ("#ba1a1a", "#7d5260", "#006e1c"),
        "status": ("#006e1c", "#7d5260", "#ba1a1a", "#0061a4"),
        "performance": (
            "#ba1a1a", "#c4454d", "#7d5260", "#947051", "#3e6837", "#006e1c",
        ),
        "temperature": (
            "#0061a4", "#0277bd", "#00838f", "#00695c", "#2e7d32",
            "#558b2f", "#9e9d24", "#f9a825", "#ff8f00", "#f57c00",
        ),
        "priority": ("#f7f2fa", "#ede7f6", "#ff8f00", "#d84315"),
        "categories": (
            "#6750a4", "#625b71", "#006e1c", "#7d5260",
            "#ba1a1a", "#0061a4", "#8e4ec6", "#1e6091",
        ),
        "diverging": (
            "#ba1a1a", "#7d5260", "#947051", "#f7f2fa",
            "#3e6837", "#006e1c", "#0f5132",
        ),
    },
    container_style={
        "background": "#fffbfe",
        "border": "1px solid #79747e",
        "borderRadius": "16px",
        "boxShadow": (
            "0 1px 2px rgba(0, 0, 0, 0.3), "
            "0 1px 3px 1px rgba(0, 0, 0, 0.15)"
        ),
    },
)
