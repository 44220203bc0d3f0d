"""Logging setup for the blast-radius CLI and server.

Log records always go to stderr. ``--json`` output is written to stdout and
must stay parseable, so nothing here ever touches stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "blast_radius"

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _level(verbose: bool, quiet: bool) -> int:
    # --quiet wins when both flags are given
    if quiet:
        return logging.ERROR
    return logging.DEBUG if verbose else logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Route ``blast_radius.*`` loggers to a rich stderr handler.

    Resolution strategy choices are logged at DEBUG, per-analysis summaries
    at INFO, git and corpus problems at WARNING.

    Args:
        verbose: Show DEBUG records, with source paths and traceback locals
        quiet: Only show errors
        log_file: Also append plain-text records to this file

    Returns:
        The ``blast_radius`` package logger
    """
    level = _level(verbose, quiet)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger
