"""Standalone SVG rendering of a Scene."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from curriculum_graph.viz.geometry import format_number
from curriculum_graph.viz.styles import get_style

if TYPE_CHECKING:
    from curriculum_graph.viz.scene import EdgeCurve, NodeMarker, Scene
    from curriculum_graph.viz.styles import SceneStyle

SVG_NS = "http://www.w3.org/2000/svg"


def render_svg(scene: Scene, *, theme: str = "light") -> str:
    """Render *scene* as a complete SVG document.

    Curves are drawn first so node markers sit on top of them. Every node
    group carries ``data-node-id`` and every curve group ``data-edge-id`` so
    a host page can wire click and hover handlers.

    Args:
        scene: Scene from ``build_scene``
        theme: "light" or "dark"

    Returns:
        SVG markup as a string
    """
    style = get_style(theme)
    width = format_number(scene.width)
    height = format_number(scene.height)

    selected_attr = f' data-selected="{escape(scene.selected)}"' if scene.selected else ""
    parts = [
        f'<svg xmlns="{SVG_NS}" width="100%" height="100%" '
        f'viewBox="0 0 {width} {height}"{selected_attr}>',
        f'  <rect class="canvas" x="0" y="0" width="{width}" height="{height}" rx="8" '
        f'fill="{style.background}" stroke="{style.border}"/>',
        '  <g class="connections">',
    ]
    parts.extend(_edge_markup(edge, style) for edge in scene.edges)
    parts.append("  </g>")
    parts.append('  <g class="nodes">')
    parts.extend(_node_markup(node, style) for node in scene.nodes)
    parts.append("  </g>")
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def _edge_markup(edge: EdgeCurve, style: SceneStyle) -> str:
    color = style.edge_same_tier if edge.same_tier else style.edge_cross_tier
    kind = "edge-same-tier" if edge.same_tier else "edge-cross-tier"
    stroke_width = style.edge_width_hovered if edge.hovered else style.edge_width
    opacity = 1.0 if edge.hovered else style.edge_opacity
    d = escape(edge.curve.path_data)
    hovered = " hovered" if edge.hovered else ""
    return (
        f'    <g class="connection{hovered}" data-edge-id="{escape(edge.id)}" '
        f'data-source="{escape(edge.source)}" data-target="{escape(edge.target)}">\n'
        f'      <path class="edge {kind}" d="{d}" fill="none" stroke="{color}" '
        f'stroke-width="{format_number(stroke_width)}" stroke-dasharray="{style.edge_dash}" '
        f'stroke-opacity="{format_number(opacity)}"/>\n'
        f'      <path class="edge-hit" d="{d}" fill="none" stroke="transparent" '
        f'stroke-width="{format_number(style.edge_hit_width)}"/>\n'
        f"    </g>"
    )


def _node_markup(node: NodeMarker, style: SceneStyle) -> str:
    fill = style.node_fill_selected if node.selected else style.node_fill
    stroke = style.node_stroke if node.visible else style.node_stroke_dimmed
    opacity = 1.0 if node.visible else style.dimmed_opacity
    classes = ["node", f"tier-{node.tier.value}"]
    if node.selected:
        classes.append("selected")
    if not node.visible:
        classes.append("dimmed")
    return (
        f'    <g class="{" ".join(classes)}" data-node-id="{escape(node.id)}" '
        f'transform="translate({format_number(node.center.x)},{format_number(node.center.y)})" '
        f'opacity="{format_number(opacity)}">\n'
        f'      <circle r="{format_number(style.node_radius)}" fill="{fill}" stroke="{stroke}" '
        f'stroke-width="{format_number(style.node_stroke_width)}"/>\n'
        f'      <text dy="{format_number(style.label_offset)}" text-anchor="middle" '
        f'font-size="{style.label_font_size}" fill="{style.label_color}">{escape(node.label)}</text>\n'
        f"    </g>"
    )
