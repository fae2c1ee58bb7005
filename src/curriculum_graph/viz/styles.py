"""Scene styling for the SVG and HTML renderers.

Colors are the Tailwind palette values the diagram was designed with,
resolved to hex so the output has no CSS framework dependency.

Tailwind color reference: https://tailwindcss.com/docs/customizing-colors
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SceneStyle:
    """Colors and dimensions for one theme."""

    background: str
    border: str

    # Node circles
    node_fill: str
    node_fill_selected: str
    node_stroke: str
    node_stroke_dimmed: str
    label_color: str

    # Connection curves
    edge_cross_tier: str
    edge_same_tier: str

    # Dimensions
    node_radius: float = 15.0
    node_stroke_width: float = 2.0
    label_offset: float = 30.0
    label_font_size: int = 14
    edge_width: float = 2.0
    edge_width_hovered: float = 3.0
    edge_hit_width: float = 10.0
    edge_dash: str = "4"
    edge_opacity: float = 0.6
    dimmed_opacity: float = 0.3


# ============================================================
# THEMES
# ============================================================

LIGHT = SceneStyle(
    background="#ffffff",       # white
    border="#e5e7eb",           # gray-200
    node_fill="#e5e7eb",        # gray-200
    node_fill_selected="#3b82f6",  # blue-500
    node_stroke="#3b82f6",      # blue-500
    node_stroke_dimmed="#9ca3af",  # gray-400
    label_color="#374151",      # gray-700
    edge_cross_tier="#60a5fa",  # blue-400
    edge_same_tier="#c084fc",   # purple-400
)

DARK = SceneStyle(
    background="#0f172a",       # slate-900
    border="#334155",           # slate-700
    node_fill="#334155",        # slate-700
    node_fill_selected="#3b82f6",  # blue-500
    node_stroke="#60a5fa",      # blue-400
    node_stroke_dimmed="#64748b",  # slate-500
    label_color="#e2e8f0",      # slate-200
    edge_cross_tier="#60a5fa",  # blue-400
    edge_same_tier="#c084fc",   # purple-400
)

# Registry for lookup
THEMES: dict[str, SceneStyle] = {
    "light": LIGHT,
    "dark": DARK,
}


def get_style(theme: str) -> SceneStyle:
    """Get the style for a theme name.

    Raises:
        ValueError: If the theme is unknown
    """
    try:
        return THEMES[theme]
    except KeyError:
        valid = ", ".join(sorted(THEMES))
        raise ValueError(f"Invalid theme '{theme}'. Choose one of: {valid}") from None
