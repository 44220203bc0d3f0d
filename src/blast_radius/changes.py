"""Changed-file discovery from git, for CLI runs without an explicit list."""

import logging
import subprocess

logger = logging.getLogger(__name__)


def get_changed_files(repo_path: str, ref: str = "HEAD~1") -> list[str]:
    """Get files changed between *ref* and HEAD using ``git diff --name-only``.

    Parameters
    ----------
    repo_path:
        Path to the git repository.
    ref:
        The git ref to diff against HEAD (e.g. ``"HEAD~1"``, a commit SHA).

    Returns
    -------
    List[str]
        Paths of changed files relative to the repository root. Empty if git
        is unavailable or the command fails.
    """
    try:
        result = subprocess.run(
            ["git", "-C", repo_path, "diff", "--name-only", ref, "HEAD"],
            capture_output=True,
            text=True,
            timeout=10,
        )
    except FileNotFoundError:
        logger.warning("git executable not found; no changed files detected")
        return []
    except subprocess.TimeoutExpired:
        logger.warning("git diff timed out in %s", repo_path)
        return []

    if result.returncode != 0:
        logger.warning(
            "git diff --name-only failed (rc=%d): %s",
            result.returncode,
            result.stderr.strip(),
        )
        return []

    files = [f for f in result.stdout.strip().split("\n") if f]
    logger.info("Detected %d changed file(s) since %s", len(files), ref)
    return files
