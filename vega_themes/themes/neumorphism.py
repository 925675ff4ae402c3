"""Built-in neumorphism theme.

Soft, tactile design: muted slate text, pastel palettes and extruded
chart containers.
"""

from __future__ import annotations

from vega_themes.themes.base import Theme

NEUMORPHISM_THEME = Theme(
    name="neumorphism",
    description="Soft tactile surfaces with muted pastel palettes",
    category=(
        "#667eea", "#9ca3af", "#10b981", "#f59e0b",
        "#ef4444", "#3b82f6", "#8b5cf6", "#06b6d4",
    ),
    label_color="#4a5568",
    title_color="#2d3748",
    grid_color="#c8ced8",
    grid_opacity=0.4,
    mark_style={"cornerRadius": 12},
    color_sets={
        "financial": ("#10b981", "#34d399", "#6ee7b7", "#86efac", "#a7f3d0"),
        "sentiment": ("#ef4444", "#f59e0b", "#10b981"),
        "status": ("#10b981", "#f59e0b", "#ef4444", "#3b82f6"),
        "performance": (
            "#ef4444", "#f87171", "#f59e0b", "#fbbf24", "#65a30d", "#10b981",
        ),
        "temperature": (
            "#3b82f6", "#06b6d4", "#14b8a6", "#059669", "#16a34a",
            "#65a30d", "#a3a702", "#eab308", "#f59e0b", "#ea580c",
        ),
        "priority": ("#f8fafc", "#e2e8f0", "#f59e0b", "#dc2626"),
        "categories": (
            "#667eea", "#9ca3af", "#10b981", "#f59e0b",
            "#ef4444", "#3b82f6", "#8b5cf6", "#06b6d4",
        ),
        "diverging": (
            "#ef4444", "#f59e0b", "#fbbf24", "#f8fafc",
            "#86efac", "#10b981", "#059669",
        ),
    },
    container_style={
        "background": "#e0e5ec",
        "boxShadow": "8px 8px 16px #d1d1d1, -8px -8px 16px #ffffff",
        "borderRadius": "20px",
        "border": "none",
    },
)
