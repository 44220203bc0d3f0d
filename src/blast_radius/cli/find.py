"""``blast-radius find``: fuzzy-resolve paths against a file corpus."""

import json
from pathlib import Path
from typing import List, Optional

import typer

from ..analyzer import BlastRadiusAnalyzer
from ..exceptions import BlastRadiusError
from . import app
from ._common import fail, load_corpus, resolve_config
from ._display import render_resolved


@app.command()
def find(
    ctx: typer.Context,
    queries: List[str] = typer.Argument(..., help="Paths to resolve"),
    root: Optional[Path] = typer.Option(
        None, "--root", help="Checkout to scan for available files", file_okay=False
    ),
    files_from: Optional[Path] = typer.Option(
        None, "--files-from", help="Newline-separated list of available files", dir_okay=False
    ),
    json_output: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
):
    """
    Resolve paths with exact, case-insensitive, filename, partial-path and
    edit-distance matching; unresolved paths get suggestions.
    """
    config = resolve_config(ctx)
    corpus = load_corpus(config, root, files_from)
    if corpus is None:
        typer.echo("Provide --root or --files-from to search against", err=True)
        raise typer.Exit(2)

    analyzer = BlastRadiusAnalyzer(config)
    try:
        resolved = [analyzer.find_files(q, corpus) for q in queries]
    except BlastRadiusError as e:
        fail(e)

    if json_output:
        print(json.dumps([r.to_dict() for r in resolved], indent=2))
        return
    render_resolved(resolved)
