"""Visualization module for curriculum graphs.

Usage:
    graph = generate(seed=7).with_layout(1200, 900)
    scene = build_scene(graph, ViewState(selected="class-2"))
    svg = render_svg(scene, theme="dark")

Interactive:
    session = VizSession(graph)
    session.click_node("objective-4")  # toggles selection
    session.resize(1400, 900)          # relayout + events
"""

from curriculum_graph.coordinates import Margins, Point, Viewport
from curriculum_graph.viz.geometry import CurveGeometry, EdgeConnectionValidator, curve_for
from curriculum_graph.viz.html_generator import generate_html, precompute_connections
from curriculum_graph.viz.layout import assign_positions, compute_positions, layout_extent
from curriculum_graph.viz.mermaid import MermaidDiagram, to_mermaid
from curriculum_graph.viz.scene import EdgeCurve, NodeMarker, Scene, build_scene
from curriculum_graph.viz.session import VizSession
from curriculum_graph.viz.styles import SceneStyle, get_style
from curriculum_graph.viz.svg import render_svg
from curriculum_graph.viz.view_state import ViewState

__all__ = [
    "CurveGeometry",
    "EdgeConnectionValidator",
    "EdgeCurve",
    "Margins",
    "MermaidDiagram",
    "NodeMarker",
    "Point",
    "Scene",
    "SceneStyle",
    "ViewState",
    "Viewport",
    "VizSession",
    "assign_positions",
    "build_scene",
    "compute_positions",
    "curve_for",
    "generate_html",
    "get_style",
    "layout_extent",
    "precompute_connections",
    "render_svg",
    "to_mermaid",
]
