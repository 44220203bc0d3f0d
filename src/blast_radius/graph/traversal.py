"""Bounded breadth-first expansion over a DependencySource."""

from __future__ import annotations

from collections import deque
from typing import Callable

from ..exceptions import InvalidConfigError
from ..models import TransitiveNode
from .inference import DependencySource


def _bfs(origin: str, neighbours: Callable[[str], list[str]], max_depth: int) -> list[TransitiveNode]:
    """Nodes reachable from ``origin`` within ``max_depth`` hops.

    BFS visits each node first along a shortest path, so the recorded depth
    is minimal. The origin is marked visited up front and never reported.
    """
    if max_depth < 0:
        raise InvalidConfigError("max_depth", max_depth, "must be non-negative")
    if max_depth == 0:
        return []

    visited = {origin}
    result: list[TransitiveNode] = []
    queue = deque([(origin, 0)])

    while queue:
        current, depth = queue.popleft()
        if depth >= max_depth:
            continue
        for nxt in neighbours(current):
            if nxt in visited:
                continue
            visited.add(nxt)
            result.append(TransitiveNode(file=nxt, depth=depth + 1))
            queue.append((nxt, depth + 1))

    return result


def transitive_dependencies(
    source: DependencySource, file: str, max_depth: int
) -> list[TransitiveNode]:
    """Files ``file`` depends on, directly or through up to ``max_depth`` hops."""
    return _bfs(file, source.dependencies, max_depth)


def transitive_dependents(
    source: DependencySource, file: str, max_depth: int
) -> list[TransitiveNode]:
    """Files depending on ``file``, directly or through up to ``max_depth`` hops."""
    return _bfs(file, source.dependents, max_depth)
