"""Graph CLI commands: inspect, trace, render."""

from __future__ import annotations

import random
from typing import Annotated

import typer

from curriculum_graph.cli._config import load_config
from curriculum_graph.cli._format import print_json, print_lines, print_table, write_text
from curriculum_graph.coordinates import Viewport
from curriculum_graph.exceptions import InvalidNodeIdError, NodeNotFoundError, TopologyError
from curriculum_graph.generate import generate
from curriculum_graph.graph.connections import resolve_connections, visible_nodes
from curriculum_graph.graph.core import CurriculumGraph
from curriculum_graph.tiers import TIER_ORDER, NodeId
from curriculum_graph.viz.html_generator import generate_html
from curriculum_graph.viz.mermaid import to_mermaid
from curriculum_graph.viz.scene import build_scene
from curriculum_graph.viz.svg import render_svg
from curriculum_graph.viz.view_state import ViewState

_FORMATS = ("svg", "html", "mermaid")

SeedOption = Annotated[
    int | None, typer.Option("--seed", help="Random seed (default: [tool.curriculum_graph] seed)")
]


def _fail(message: str) -> typer.Exit:
    print(f"Error: {message}")
    return typer.Exit(1)


def load_graph(seed: int | None) -> tuple[CurriculumGraph, int]:
    """Generate the graph from CLI options, falling back to project config.

    With no seed from either source a fresh one is drawn, so every run
    reports a seed that reproduces it.

    Returns the graph and the seed that was actually used.
    """
    config = load_config()
    if seed is None:
        seed = config.seed
    if seed is None:
        seed = random.randrange(2**32)
    try:
        graph = generate(seed=seed, sizes=config.sizes)
    except TopologyError as e:
        print(f"Error: {e.message}")
        print("Hint: check [tool.curriculum_graph.sizes] in pyproject.toml")
        raise typer.Exit(1) from e
    except ValueError as e:
        raise _fail(str(e)) from e
    return graph, seed


def _parse_selection(graph: CurriculumGraph, raw: str) -> NodeId:
    try:
        return graph.get_node(raw).id
    except (InvalidNodeIdError, NodeNotFoundError) as e:
        raise _fail(e.message) from e


def register_commands(app: typer.Typer) -> None:
    """Register `inspect`, `trace` and `render` as top-level commands on the app."""

    @app.command("inspect")
    def inspect_cmd(
        seed: SeedOption = None,
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
        output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
    ):
        """Show tier sizes and reference counts."""
        graph, seed = load_graph(seed)

        if as_json:
            data = {
                "seed": seed,
                "sizes": {tier.prefix: len(graph.tier(tier)) for tier in TIER_ORDER},
                "nodes": [
                    {
                        "id": str(node.id),
                        "name": node.name,
                        "tier": node.tier.value,
                        "parents": [str(pid) for pid in node.parent_ids],
                        "peers": [str(pid) for pid in node.peer_ids],
                    }
                    for node in graph.iter_nodes()
                ],
                "edge_count": graph.nx_graph.number_of_edges(),
            }
            print_json("inspect", data, output)
            return

        edge_count = graph.nx_graph.number_of_edges()
        print(f"\nCurriculum graph | seed {seed} | {len(graph)} nodes | {edge_count} references\n")

        headers = ["Tier", "Prefix", "Nodes", "Parents", "Peers"]
        rows = []
        for tier in TIER_ORDER:
            nodes = graph.tier(tier)
            rows.append(
                [
                    tier.label,
                    tier.prefix,
                    str(len(nodes)),
                    str(sum(len(n.parents) for n in nodes)),
                    str(sum(len(n.peers) for n in nodes)) if tier.has_peers else "—",
                ]
            )
        print_lines(print_table(headers, rows))
        print("\n  For JSON: curriculum-graph inspect --json")

    @app.command("trace")
    def trace_cmd(
        node_id: Annotated[str, typer.Argument(help="Node id, e.g. 'objective-4'")],
        seed: SeedOption = None,
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
        output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
    ):
        """List the connections highlighted when a node is selected."""
        config = load_config()
        graph, seed = load_graph(seed)
        viewport = Viewport(config.width, config.height).clamped()
        graph = graph.with_layout(viewport.width, viewport.height)
        selected = _parse_selection(graph, node_id)
        edges = resolve_connections(graph, selected)

        if as_json:
            data = {
                "seed": seed,
                "selected": str(selected),
                "edges": [edge.to_dict() for edge in edges],
                "visible": [
                    str(nid) for nid in sorted(visible_nodes(graph, selected), key=lambda n: n.sort_key)
                ],
            }
            print_json("trace", data, output)
            return

        node = graph.get_node(selected)
        print(f"\n{node.name} ({selected}) | {len(edges)} connections\n")
        headers = ["Edge", "Direction", "From", "To"]
        rows = [
            [
                edge.id,
                edge.direction.value,
                graph.get_node(edge.source).name,
                graph.get_node(edge.target).name,
            ]
            for edge in edges
        ]
        if rows:
            print_lines(print_table(headers, rows))
        else:
            print("  No connections.")

    @app.command("render")
    def render_cmd(
        seed: SeedOption = None,
        width: Annotated[float | None, typer.Option("--width", help="Viewport width")] = None,
        height: Annotated[float | None, typer.Option("--height", help="Viewport height")] = None,
        select: Annotated[str | None, typer.Option("--select", help="Node id to select")] = None,
        fmt: Annotated[str, typer.Option("--format", help="'svg', 'html' or 'mermaid'")] = "svg",
        theme: Annotated[str, typer.Option("--theme", help="'light' or 'dark'")] = "light",
        output: Annotated[str | None, typer.Option("--output", help="Write to file")] = None,
    ):
        """Render the diagram for an optional selection."""
        if fmt not in _FORMATS:
            raise _fail(f"Unknown format '{fmt}'. Use one of: {', '.join(_FORMATS)}")

        config = load_config()
        graph, _ = load_graph(seed)
        view = ViewState().with_viewport(
            config.width if width is None else width,
            config.height if height is None else height,
        )
        graph = graph.with_layout(view.viewport.width, view.viewport.height)
        if select is not None:
            view = view.toggle_selection(_parse_selection(graph, select))

        try:
            if fmt == "svg":
                text = render_svg(build_scene(graph, view), theme=theme)
            elif fmt == "html":
                text = generate_html(graph, view, theme=theme)
            else:
                text = str(to_mermaid(graph, view.selected))
        except ValueError as e:
            raise _fail(str(e)) from e

        write_text(text, output, fmt)
