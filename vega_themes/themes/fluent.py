"""Built-in fluent theme.

Microsoft Fluent colors on translucent, blurred chart containers.
"""

from __future__ import annotations

from vega_themes.themes.base import Theme

FLUENT_THEME = Theme(
    name="fluent",
    description="Microsoft Fluent palette with glassmorphism containers",
    category=(
        "#0078d4", "#605e5c", "#107c10", "#ff8c00",
        "#d13438", "#0078d4", "#5c2d91", "#00bcf2",
    ),
    label_color="#605e5c",
    title_color="#323130",
    grid_opacity=0.5,
    mark_style={"opacity": 0.9},
    color_sets={
        "financial": ("#107c10", "#13a10e", "#16c60c", "#54b399", "#86d7d1"),
        "sentiment": ("#d13438", "#ff8c00", "#107c10"),
        "status": ("#107c10", "#ff8c00", "#d13438", "#0078d4"),
        "performance": (
            "#d13438", "#e74856", "#ff8c00", "#fce100", "#486600", "#107c10",
        ),
        "temperature": (
            "#0078d4", "#40e0d0", "#00bcf2", "#00b7c3", "#038387",
            "#486600", "#107c10", "#dfb900", "#ff8c00", "#d83b01",
        ),
        "priority": ("#f3f2f1", "#edebe9", "#ff8c00", "#d83b01"),
        "categories": (
            "#0078d4", "#107c10", "#ff8c00", "#5c2d91",
            "#e3008c", "#00bcf2", "#8764b8", "#d13438",
        ),
        "diverging": (
            "#d13438", "#ff8c00", "#fce100", "#f3f2f1",
            "#54b399", "#107c10", "#038387",
        ),
    },
    transparent=True,
    container_style={
        "backdropFilter": "blur(45px) saturate(1.8) brightness(1.15)",
        "background": "rgba(255, 255, 255, 0.08)",
        "border": "1px solid rgba(255, 255, 255, 0.25)",
        "boxShadow": (
            "0 12px 40px rgba(31, 38, 135, 0.15), "
            "0 6px 20px rgba(31, 38, 135, 0.1), "
            "inset 0 1px 0 rgba(255, 255, 255, 0.4), "
            "inset 0 -1px 0 rgba(255, 255, 255, 0.1)"
        ),
        "borderRadius": "16px",
        "position": "relative",
        "overflow": "hidden",
    },
)
