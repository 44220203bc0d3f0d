"""``blast-radius serve``: run the analyzer as an HTTP service."""

import logging

import typer

from . import app
from ._common import console, resolve_config

logger = logging.getLogger(__name__)


@app.command()
def serve(
    ctx: typer.Context,
    port: int = typer.Option(3000, help="Port to listen on"),
    host: str = typer.Option("127.0.0.1", help="Host to bind to"),
) -> None:
    """Serve /analyze, /dependencies and /find-files over HTTP."""
    try:
        from ..server import _check_deps

        _check_deps()
    except ImportError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    import uvicorn

    from ..analyzer import BlastRadiusAnalyzer
    from ..server.app import create_app

    config = resolve_config(ctx)
    verbose = (ctx.obj or {}).get("verbose", False)

    url = f"http://{host}:{port}"
    console.print(f"[bold]Blast radius service[/bold] → [link={url}]{url}[/link]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    try:
        uvicorn.run(
            create_app(BlastRadiusAnalyzer(config)),
            host=host,
            port=port,
            log_level="info" if verbose else "warning",
        )
    except KeyboardInterrupt:
        pass
    finally:
        console.print("\n[dim]Stopped.[/dim]")
