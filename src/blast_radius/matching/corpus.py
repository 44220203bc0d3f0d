"""Build the available-files corpus by walking a checkout on disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from ..config import DEFAULT_CONFIG
from ..exceptions import InvalidPathError

logger = logging.getLogger(__name__)


def scan_available_files(
    root: Path,
    extensions: Optional[Iterable[str]] = None,
    exclude_dirs: Optional[Iterable[str]] = None,
) -> list[str]:
    """Collect source files under ``root`` as sorted POSIX relative paths.

    Args:
        root: Directory to walk
        extensions: Suffixes to keep (case-insensitive); defaults from config
        exclude_dirs: Directory names never descended into

    Raises:
        InvalidPathError: If ``root`` is not a directory
    """
    root = Path(root)
    if not root.is_dir():
        raise InvalidPathError(root, "not a directory")

    wanted = {e.lower() for e in (extensions or DEFAULT_CONFIG.extensions)}
    skipped = set(exclude_dirs or DEFAULT_CONFIG.exclude_dirs)

    files: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk never enters excluded directories
        dirnames[:] = [d for d in dirnames if d not in skipped]
        for name in filenames:
            if Path(name).suffix.lower() in wanted:
                files.append((Path(dirpath) / name).relative_to(root).as_posix())

    files.sort()
    logger.info("Scanned %d candidate files under %s", len(files), root)
    return files
