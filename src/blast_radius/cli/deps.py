"""``blast-radius deps``: inferred neighbours of one file."""

import json
from typing import Optional

import typer

from ..analyzer import BlastRadiusAnalyzer
from ..api import handle_dependencies
from ..exceptions import BlastRadiusError
from ..graph import StaticDependencyGraph
from . import app
from ._common import fail, resolve_config
from ._display import render_dependencies


@app.command()
def deps(
    ctx: typer.Context,
    file: str = typer.Argument(..., help="File to inspect"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Expansion depth", min=0),
    graph_file: Optional[typer.FileText] = typer.Option(
        None,
        "--graph",
        help="JSON adjacency {file: [dependencies]} to use instead of naming conventions",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
):
    """Show what FILE depends on and what depends on it."""
    config = resolve_config(ctx)
    graph = None
    if graph_file is not None:
        try:
            graph = StaticDependencyGraph(json.load(graph_file))
        except (ValueError, AttributeError, TypeError) as e:
            typer.echo(f"Invalid graph file: {e}", err=True)
            raise typer.Exit(2)

    analyzer = BlastRadiusAnalyzer(config, graph=graph)
    try:
        body = handle_dependencies({"file": file, "depth": depth}, analyzer)
    except BlastRadiusError as e:
        fail(e)

    if json_output:
        print(json.dumps(body, indent=2))
        return
    render_dependencies(analyzer.dependencies(file, body["depth"]))
