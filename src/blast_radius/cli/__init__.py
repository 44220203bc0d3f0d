"""CLI entry point; registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..logging_config import setup_logging
from ._common import console

app = typer.Typer(
    name="blast-radius",
    help="Blast Radius Analyzer - estimate the impact of a code change",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"blast-radius {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="TOML config file", exists=True, dir_okay=False
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging on stderr"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also append logs to a file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Blast Radius Analyzer."""
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config
    ctx.obj["verbose"] = verbose


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .deps import deps as _deps  # noqa: F401, E402
from .find import find as _find  # noqa: F401, E402
from .serve import serve as _serve  # noqa: F401, E402
