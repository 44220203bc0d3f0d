"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import AnalyzerConfig, load_config
from ..exceptions import BlastRadiusError, RequestValidationError
from ..matching import scan_available_files

console = Console()
err_console = Console(stderr=True)

LEVEL_COLORS = {
    "critical": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "green",
}


def resolve_config(ctx: typer.Context, **overrides) -> AnalyzerConfig:
    """Build config from the global --config option plus command overrides."""
    config_file: Optional[Path] = (ctx.obj or {}).get("config_file")
    try:
        return load_config(config_file=config_file, **overrides)
    except BlastRadiusError as e:
        fail(e)


def load_corpus(
    config: AnalyzerConfig, root: Optional[Path], files_from: Optional[Path]
) -> Optional[list[str]]:
    """Available files from a checkout scan and/or a newline-separated list."""
    if root is None and files_from is None:
        return None
    corpus: list[str] = []
    try:
        if root is not None:
            corpus.extend(scan_available_files(root, config.extensions, config.exclude_dirs))
        if files_from is not None:
            lines = files_from.read_text(encoding="utf-8").splitlines()
            corpus.extend(line.strip() for line in lines if line.strip())
    except OSError as e:
        err_console.print(f"[red]Cannot read file list:[/red] {e}")
        raise typer.Exit(1)
    except BlastRadiusError as e:
        fail(e)
    return corpus


def fail(error: BlastRadiusError) -> None:
    """Print ``error`` and exit: 2 for bad input, 1 otherwise."""
    err_console.print(f"[red]Error:[/red] {error.message}")
    raise typer.Exit(2 if isinstance(error, RequestValidationError) else 1)
