"""
Blast Radius Analyzer - change-impact triage for service codebases

Given the files touched by a change, estimates what else is affected:
fuzzy-resolves the paths, infers Controller/Service/Repository layering from
naming conventions, expands it to a bounded depth, tags integration points,
and reduces it all to a 0-100 risk score with test recommendations.
"""

__version__ = "1.0.0"

from typing import Optional, Sequence

from .analyzer import BlastRadiusAnalyzer
from .models import BlastRadiusResult, DependencyReport, ResolvedFile


def analyze(
    app: str,
    changed_files: Sequence[str],
    depth: Optional[int] = None,
    available_files: Optional[Sequence[str]] = None,
) -> BlastRadiusResult:
    """Analyze a change with the default configuration."""
    return BlastRadiusAnalyzer().analyze(
        app, changed_files, depth=depth, available_files=available_files
    )


def dependencies(file: str, depth: Optional[int] = None) -> DependencyReport:
    """Inferred neighbours of one file with the default configuration."""
    return BlastRadiusAnalyzer().dependencies(file, depth)


def find_files(query: str, available_files: Optional[Sequence[str]]) -> ResolvedFile:
    """Resolve one path against a corpus with the default configuration."""
    return BlastRadiusAnalyzer().find_files(query, available_files)


__all__ = [
    "analyze",  # Main entry point
    "dependencies",
    "find_files",
    "BlastRadiusAnalyzer",  # Advanced usage (custom config, static graph)
    "BlastRadiusResult",
    "DependencyReport",
    "ResolvedFile",
]
