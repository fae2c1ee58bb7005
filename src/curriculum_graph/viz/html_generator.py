"""Self-contained interactive HTML page.

The page embeds the SVG for the initial view plus the connection set of
every node, precomputed in Python. The inline script only swaps
precomputed curves and opacities on click, so no layout or tracing runs in
the browser and the page works offline.
"""

from __future__ import annotations

import json
from dataclasses import replace
from html import escape
from typing import TYPE_CHECKING, Any

from curriculum_graph.graph.connections import resolve_connections, visible_nodes
from curriculum_graph.viz.geometry import curve_for
from curriculum_graph.viz.scene import build_scene
from curriculum_graph.viz.styles import get_style
from curriculum_graph.viz.svg import render_svg
from curriculum_graph.viz.view_state import ViewState

if TYPE_CHECKING:
    from curriculum_graph.graph.core import CurriculumGraph


def precompute_connections(graph: CurriculumGraph) -> dict[str, dict[str, Any]]:
    """Resolve connections and visibility for every possible selection.

    Returns:
        Map of node id -> {"edges": [...], "visible": [...]}, where each edge
        carries its id, endpoints, same-tier flag and SVG path data
    """
    result: dict[str, dict[str, Any]] = {}
    for node in graph.iter_nodes():
        edges = resolve_connections(graph, node.id)
        shown = visible_nodes(graph, node.id)
        result[str(node.id)] = {
            "edges": [
                {
                    "id": edge.id,
                    "source": str(edge.source),
                    "target": str(edge.target),
                    "sameTier": edge.same_tier,
                    "d": curve_for(edge).path_data,
                }
                for edge in edges
            ],
            "visible": sorted(str(nid) for nid in shown),
        }
    return result


def generate_html(
    graph: CurriculumGraph,
    view: ViewState | None = None,
    *,
    theme: str = "light",
    title: str = "Curriculum Map",
) -> str:
    """Generate an HTML document with click-to-highlight interaction.

    Args:
        graph: Graph already laid out for ``view.viewport``
        view: Initial view (defaults to no selection)
        theme: "light" or "dark"
        title: Document title

    Returns:
        Complete HTML document as a string
    """
    view = view or ViewState()
    style = get_style(theme)
    svg = render_svg(build_scene(graph, replace(view, hovered_edge=None)), theme=theme)

    payload = {
        "selected": str(view.selected) if view.selected is not None else None,
        "connections": precompute_connections(graph),
        "style": {
            "nodeFill": style.node_fill,
            "nodeFillSelected": style.node_fill_selected,
            "nodeStroke": style.node_stroke,
            "nodeStrokeDimmed": style.node_stroke_dimmed,
            "edgeSameTier": style.edge_same_tier,
            "edgeCrossTier": style.edge_cross_tier,
            "edgeWidth": style.edge_width,
            "edgeWidthHovered": style.edge_width_hovered,
            "edgeHitWidth": style.edge_hit_width,
            "edgeDash": style.edge_dash,
            "edgeOpacity": style.edge_opacity,
            "dimmedOpacity": style.dimmed_opacity,
        },
    }
    # Keep "</script>" sequences out of the inline JSON
    data_json = json.dumps(payload).replace("</", "<\\/")

    return _PAGE_TEMPLATE.format(
        title=escape(title),
        background=style.background,
        label_color=style.label_color,
        svg=svg,
        data_json=data_json,
        script=_SCRIPT,
    )


_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
        body {{ margin: 0; background: {background}; color: {label_color}; font-family: system-ui, -apple-system, sans-serif; }}
        #network-container {{ width: 100vw; height: 100vh; padding: 16px; box-sizing: border-box; }}
        #network-container svg {{ display: block; }}
        .node {{ cursor: pointer; transition: opacity 200ms; }}
        .node circle {{ transition: fill 200ms, stroke 200ms; }}
        .edge-hit {{ cursor: pointer; }}
    </style>
</head>
<body>
<div id="network-container">
{svg}</div>
<script type="application/json" id="graph-data">{data_json}</script>
<script>
{script}
</script>
</body>
</html>
"""

_SCRIPT = """
(function () {
  var data = JSON.parse(document.getElementById('graph-data').textContent);
  var svg = document.querySelector('#network-container svg');
  var layer = svg.querySelector('g.connections');
  var style = data.style;
  var selected = data.selected;
  var NS = 'http://www.w3.org/2000/svg';

  function makePath(edge, cls, stroke, width) {
    var path = document.createElementNS(NS, 'path');
    path.setAttribute('class', cls);
    path.setAttribute('d', edge.d);
    path.setAttribute('fill', 'none');
    path.setAttribute('stroke', stroke);
    path.setAttribute('stroke-width', width);
    return path;
  }

  function drawEdges(edges) {
    while (layer.firstChild) layer.removeChild(layer.firstChild);
    edges.forEach(function (edge) {
      var group = document.createElementNS(NS, 'g');
      group.setAttribute('class', 'connection');
      group.setAttribute('data-edge-id', edge.id);
      var color = edge.sameTier ? style.edgeSameTier : style.edgeCrossTier;
      var visible = makePath(edge, 'edge', color, style.edgeWidth);
      visible.setAttribute('stroke-dasharray', style.edgeDash);
      visible.setAttribute('stroke-opacity', style.edgeOpacity);
      var hit = makePath(edge, 'edge-hit', 'transparent', style.edgeHitWidth);
      group.appendChild(visible);
      group.appendChild(hit);
      group.addEventListener('mouseenter', function () {
        visible.setAttribute('stroke-width', style.edgeWidthHovered);
        visible.setAttribute('stroke-opacity', 1);
      });
      group.addEventListener('mouseleave', function () {
        visible.setAttribute('stroke-width', style.edgeWidth);
        visible.setAttribute('stroke-opacity', style.edgeOpacity);
      });
      layer.appendChild(group);
    });
  }

  function apply() {
    var entry = selected ? data.connections[selected] : null;
    var visible = entry ? new Set(entry.visible) : null;
    svg.setAttribute('data-selected', selected || '');
    svg.querySelectorAll('g.node').forEach(function (node) {
      var id = node.getAttribute('data-node-id');
      var shown = !visible || visible.has(id);
      var circle = node.querySelector('circle');
      node.setAttribute('opacity', shown ? 1 : style.dimmedOpacity);
      circle.setAttribute('fill', id === selected ? style.nodeFillSelected : style.nodeFill);
      circle.setAttribute('stroke', shown ? style.nodeStroke : style.nodeStrokeDimmed);
    });
    drawEdges(entry ? entry.edges : []);
  }

  svg.querySelectorAll('g.node').forEach(function (node) {
    node.addEventListener('click', function (event) {
      event.stopPropagation();
      var id = node.getAttribute('data-node-id');
      selected = selected === id ? null : id;
      apply();
    });
  });
  svg.addEventListener('click', function () {
    selected = null;
    apply();
  });
  apply();
})();
"""
