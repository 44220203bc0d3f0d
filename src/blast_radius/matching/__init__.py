"""Fuzzy resolution of changed file paths against a file corpus."""

from .corpus import scan_available_files
from .distance import levenshtein
from .resolver import FileResolver, find_by_levenshtein, get_suggestions

__all__ = [
    "FileResolver",
    "find_by_levenshtein",
    "get_suggestions",
    "levenshtein",
    "scan_available_files",
]
