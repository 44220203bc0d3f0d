"""DependencySource backed by an explicit adjacency mapping.

Use this when a structural analyzer has produced a real import graph; it
plugs into the analyzer in place of naming-convention inference.
"""

from __future__ import annotations

from typing import Mapping, Sequence


class StaticDependencyGraph:
    """Edges are directed: ``adjacency[A]`` containing B means A depends on B."""

    def __init__(self, adjacency: Mapping[str, Sequence[str]]):
        self.adjacency: dict[str, list[str]] = {}
        self.reverse: dict[str, list[str]] = {}

        for src, targets in adjacency.items():
            forward = self.adjacency.setdefault(src, [])
            for tgt in targets:
                if tgt == src or tgt in forward:
                    continue
                forward.append(tgt)
                self.reverse.setdefault(tgt, []).append(src)

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.adjacency.values())

    def dependencies(self, file: str) -> list[str]:
        return list(self.adjacency.get(file, []))

    def dependents(self, file: str) -> list[str]:
        return list(self.reverse.get(file, []))
