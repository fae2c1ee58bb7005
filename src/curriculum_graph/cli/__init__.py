"""Curriculum graph CLI: inspect, trace and render generated curricula.

Entry point for the `curriculum-graph` command. Requires
``pip install curriculum-graph[cli]``.

Commands:
    inspect     Show tier sizes and reference counts
    trace       List the connections highlighted for a node
    render      Write the diagram as SVG, HTML or Mermaid
"""

from __future__ import annotations


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print(
            "Error: typer is required for the CLI. Install with: pip install curriculum-graph[cli]",
            file=sys.stderr,
        )
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all commands."""
    _require_typer()

    import typer

    from curriculum_graph.cli.graph_cmd import register_commands

    app = typer.Typer(
        name="curriculum-graph",
        help="Generate, trace and render five-tier curriculum graphs.",
        no_args_is_help=True,
    )
    register_commands(app)

    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
