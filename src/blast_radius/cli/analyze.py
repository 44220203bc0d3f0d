"""``blast-radius analyze``: full impact analysis of a change."""

import json
from pathlib import Path
from typing import List, Optional

import typer

from ..analyzer import BlastRadiusAnalyzer
from ..api import run_analyze
from ..changes import get_changed_files
from ..exceptions import BlastRadiusError
from . import app
from ._common import console, fail, load_corpus, resolve_config
from ._display import render_result


@app.command()
def analyze(
    ctx: typer.Context,
    app_name: str = typer.Argument(..., metavar="APP", help="Application being changed"),
    files: Optional[List[str]] = typer.Argument(None, help="Changed file paths"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Expansion depth", min=0),
    root: Optional[Path] = typer.Option(
        None, "--root", help="Checkout to scan for available files", file_okay=False
    ),
    files_from: Optional[Path] = typer.Option(
        None, "--files-from", help="Newline-separated list of available files", dir_okay=False
    ),
    since: Optional[str] = typer.Option(
        None, "--since", help="Take changed files from git diff REF..HEAD (needs --root)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output machine-readable JSON"),
):
    """
    Estimate the blast radius of a set of changed files.

    [bold cyan]Examples:[/bold cyan]

      blast-radius analyze billing Services/PaymentService.cs

      blast-radius analyze billing --root ./src --since origin/main

      blast-radius analyze billing PaymentControler.cs --files-from files.txt --json
    """
    config = resolve_config(ctx)
    changed = list(files or [])
    if since is not None:
        if root is None:
            console.print("[red]--since needs --root to locate the repository[/red]")
            raise typer.Exit(2)
        changed.extend(get_changed_files(str(root), since))

    payload = {
        "app": app_name,
        "changedFiles": changed or None,
        "depth": depth,
        "availableFiles": load_corpus(config, root, files_from),
    }

    try:
        result = run_analyze(payload, BlastRadiusAnalyzer(config))
    except BlastRadiusError as e:
        fail(e)

    if json_output:
        print(json.dumps(result.to_dict(), indent=2))
        return
    render_result(result)
