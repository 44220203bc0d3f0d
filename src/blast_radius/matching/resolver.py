"""Multi-strategy resolution of requested paths against a file corpus.

Strategies, first success wins:

    1. exact             requested == candidate
    2. case-insensitive  casefold(requested) == casefold(candidate)
    3. filename          same final segment, exactly one candidate
    4. partial-path      candidate ends with all of the requested segments
    5. levenshtein       closest basename within max distance
    6. unresolved        not found; suggestions attached
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath
from typing import Iterable, Optional, Sequence

from ..config import ResolverConfig
from ..models import MatchType, ResolvedFile
from .distance import levenshtein

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[/\\]")


def split_segments(path: str) -> list[str]:
    """Split on either separator, dropping empty segments."""
    return [s for s in _SEPARATORS.split(path) if s]


def basename(path: str) -> str:
    segments = split_segments(path)
    return segments[-1] if segments else ""


def stem(path: str) -> str:
    """Final segment without its last suffix (``PaymentService.cs`` -> ``PaymentService``)."""
    return PurePosixPath(basename(path)).stem if basename(path) else ""


def find_by_levenshtein(
    target: str, candidates: Iterable[str], max_distance: int
) -> list[tuple[str, int]]:
    """Candidates whose basename is within ``max_distance`` edits of ``target``'s.

    Basenames are compared case-folded. Results are sorted ascending by
    distance; ``sorted`` is stable, so ties keep corpus order.
    """
    wanted = basename(target).casefold()
    matches = []
    for candidate in candidates:
        distance = levenshtein(wanted, basename(candidate).casefold())
        if distance <= max_distance:
            matches.append((candidate, distance))
    return sorted(matches, key=lambda m: m[1])


def get_suggestions(partial: str, available_files: Iterable[str], limit: int = 5) -> list[str]:
    """Files whose name contains ``partial`` (case-insensitive), in corpus order."""
    if limit <= 0:
        return []
    needle = partial.casefold()
    suggestions = []
    for candidate in available_files:
        if needle in basename(candidate).casefold():
            suggestions.append(candidate)
            if len(suggestions) >= limit:
                break
    return suggestions


class FileResolver:
    """Resolve requested paths against a fixed corpus of known files.

    Built once per analysis; case-folded and basename indexes are computed at
    construction so each lookup is a dictionary hit for strategies 1-3.
    """

    def __init__(
        self,
        available_files: Optional[Sequence[str]],
        config: Optional[ResolverConfig] = None,
    ):
        self.config = config or ResolverConfig()
        # None means "no corpus": paths are trusted as given
        self.available_files = None if available_files is None else list(available_files)

        self._exact: set[str] = set()
        self._folded: dict[str, str] = {}
        self._by_name: dict[str, list[str]] = {}
        for candidate in self.available_files or []:
            self._exact.add(candidate)
            self._folded.setdefault(candidate.casefold(), candidate)
            self._by_name.setdefault(basename(candidate), []).append(candidate)

    def resolve(self, requested_path: str) -> ResolvedFile:
        if self.available_files is None:
            return ResolvedFile(
                requested_path=requested_path,
                exists=True,
                match_type=MatchType.EXACT,
                resolved_path=requested_path,
            )

        result = (
            self._match_exact(requested_path)
            or self._match_case_insensitive(requested_path)
            or self._match_filename(requested_path)
            or self._match_partial_path(requested_path)
            or self._match_levenshtein(requested_path)
        )
        if result is not None:
            logger.debug(
                "Resolved %s -> %s (%s)",
                requested_path,
                result.resolved_path,
                result.match_type.value,
            )
            return result

        probe = stem(requested_path)[: self.config.suggestion_prefix_length]
        suggestions = (
            get_suggestions(probe, self.available_files, self.config.suggestion_limit)
            if probe
            else []
        )
        logger.debug("Unresolved %s (%d suggestions)", requested_path, len(suggestions))
        return ResolvedFile(
            requested_path=requested_path,
            exists=False,
            match_type=MatchType.UNRESOLVED,
            suggestions=suggestions,
        )

    def resolve_all(self, requested_paths: Iterable[str]) -> list[ResolvedFile]:
        return [self.resolve(p) for p in requested_paths]

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _found(self, requested: str, match: str, match_type: MatchType, **extra) -> ResolvedFile:
        return ResolvedFile(
            requested_path=requested,
            exists=True,
            match_type=match_type,
            resolved_path=match,
            **extra,
        )

    def _match_exact(self, requested: str) -> Optional[ResolvedFile]:
        if requested in self._exact:
            return self._found(requested, requested, MatchType.EXACT)
        return None

    def _match_case_insensitive(self, requested: str) -> Optional[ResolvedFile]:
        match = self._folded.get(requested.casefold())
        if match is not None:
            return self._found(requested, match, MatchType.CASE_INSENSITIVE)
        return None

    def _match_filename(self, requested: str) -> Optional[ResolvedFile]:
        matches = self._by_name.get(basename(requested), [])
        # An ambiguous basename is left to the partial-path strategy
        if len(matches) == 1:
            return self._found(requested, matches[0], MatchType.FILENAME)
        return None

    def _match_partial_path(self, requested: str) -> Optional[ResolvedFile]:
        wanted = split_segments(requested)
        if not wanted:
            return None
        n = len(wanted)
        for candidate in self.available_files or []:
            segments = split_segments(candidate)
            if len(segments) >= n and segments[-n:] == wanted:
                return self._found(requested, candidate, MatchType.PARTIAL_PATH)
        return None

    def _match_levenshtein(self, requested: str) -> Optional[ResolvedFile]:
        if not basename(requested):
            return None
        matches = find_by_levenshtein(
            requested, self.available_files or [], self.config.max_levenshtein_distance
        )
        if not matches:
            return None
        path, distance = matches[0]
        return self._found(requested, path, MatchType.LEVENSHTEIN, distance=distance)
