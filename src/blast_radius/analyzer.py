"""Blast radius coordinator.

Single pass, no retries:

    resolve -> expand -> classify -> score -> recommend -> assemble

Each ``analyze`` call builds its own resolver and component map; the analyzer
instance holds only frozen configuration and the dependency source, so one
instance can serve concurrent requests.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from . import __version__
from .classify import IntegrationClassifier, build_component
from .config import DEFAULT_CONFIG, AnalyzerConfig
from .exceptions import AnalysisFailedError, BlastRadiusError, InvalidConfigError
from .graph import (
    DependencySource,
    NamingConventionGraph,
    transitive_dependencies,
    transitive_dependents,
)
from .matching import FileResolver
from .models import (
    BlastRadiusResult,
    Component,
    ComponentType,
    DependencyReport,
    ImpactSummary,
    ResolvedFile,
)
from .scoring import RecommendationEngine, RiskScorer

logger = logging.getLogger(__name__)


class BlastRadiusAnalyzer:
    """Estimate the impact of a set of changed files.

    Args:
        config: Analyzer configuration (frozen, shareable)
        graph: Dependency source; naming-convention inference when omitted.
            Pass a ``StaticDependencyGraph`` to use a precise import graph.
        classifier: Integration classifier with its rule table
        recommender: Recommendation rule engine
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        graph: Optional[DependencySource] = None,
        classifier: Optional[IntegrationClassifier] = None,
        recommender: Optional[RecommendationEngine] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.graph: DependencySource = graph if graph is not None else NamingConventionGraph()
        self.classifier = classifier or IntegrationClassifier()
        self.scorer = RiskScorer(self.config.risk)
        self.recommender = recommender or RecommendationEngine()

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def analyze(
        self,
        app: str,
        changed_files: Sequence[str],
        depth: Optional[int] = None,
        available_files: Optional[Sequence[str]] = None,
    ) -> BlastRadiusResult:
        """Run the full pipeline.

        Raises:
            InvalidConfigError: If ``depth`` is outside ``0..max_depth``
            AnalysisFailedError: On any unexpected failure; nothing partial
                is returned
        """
        depth = self._check_depth(depth)
        try:
            return self._analyze(app, changed_files, depth, available_files)
        except BlastRadiusError:
            raise
        except Exception as e:
            logger.error("Analysis of %s failed: %s", app, e)
            raise AnalysisFailedError(str(e)) from e

    def dependencies(self, file: str, depth: Optional[int] = None) -> DependencyReport:
        """Direct and transitive neighbours of ``file`` in both directions."""
        depth = self._check_depth(depth)
        _require_strings([file], "file")
        return DependencyReport(
            file=file,
            depth=depth,
            dependencies=self.graph.dependencies(file),
            dependents=self.graph.dependents(file),
            transitive_dependencies=transitive_dependencies(self.graph, file, depth),
            transitive_dependents=transitive_dependents(self.graph, file, depth),
        )

    def find_files(self, query: str, available_files: Optional[Sequence[str]]) -> ResolvedFile:
        """Resolve a single path against ``available_files``."""
        _require_strings([query], "query")
        if available_files is not None:
            _require_strings(available_files, "availableFiles")
        return FileResolver(available_files, self.config.resolver).resolve(query)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _analyze(
        self,
        app: str,
        changed_files: Sequence[str],
        depth: int,
        available_files: Optional[Sequence[str]],
    ) -> BlastRadiusResult:
        _require_strings(changed_files, "changedFiles")
        if available_files is not None:
            _require_strings(available_files, "availableFiles")

        # 1. Resolve
        resolver = FileResolver(available_files, self.config.resolver)
        resolved = resolver.resolve_all(changed_files)
        found = [r.resolved_path for r in resolved if r.exists and r.resolved_path]
        logger.info(
            "[%s] Resolved %d of %d changed files", app, len(found), len(changed_files)
        )

        # 2-3. Expand
        components = self._affected_components(found, depth)

        # 4. Classify
        integrations = self.classifier.classify(components)

        # 5. Tests touched by the change itself or one hop away
        tests = [c for c in components if c.type is ComponentType.TEST]
        direct_tests = [c for c in tests if c.depth <= 1]

        # 6-7. Score and recommend
        risk = self.scorer.score(len(components), integrations, len(direct_tests))
        recommendations = self.recommender.generate(risk, components, integrations)
        logger.info(
            "[%s] Risk %s (%d) across %d components, %d integrations",
            app,
            risk.level.value,
            risk.score,
            len(components),
            len(integrations),
        )

        # 8. Assemble
        impact = ImpactSummary(
            affected_components=[c.name for c in components],
            affected_tests=[t.name for t in tests],
            affected_integrations=[i.type.value for i in integrations],
            direct_dependencies=sum(1 for c in components if c.depth == 1),
            transitive_dependencies=sum(1 for c in components if c.depth > 1),
        )
        return BlastRadiusResult(
            risk=risk,
            changed_files=resolved,
            impact=impact,
            recommendations=recommendations,
            components=components,
            integrations=integrations,
            metadata={
                "app": app,
                "depth": depth,
                "filesAnalyzed": len(changed_files),
                "filesResolved": len(found),
                "analyzedAt": datetime.now(timezone.utc).isoformat(),
                "version": __version__,
            },
        )

    def _affected_components(self, files: Sequence[str], depth: int) -> list[Component]:
        """Changed files plus inferred neighbours, deduplicated by path.

        All changed files are placed first at depth 0. A neighbour reached
        again keeps the smaller depth.
        """
        by_name: dict[str, Component] = {}

        for path in files:
            component = build_component(path, depth=0)
            by_name.setdefault(component.name, component)

        for path in files:
            neighbours = transitive_dependencies(self.graph, path, depth) + transitive_dependents(
                self.graph, path, depth
            )
            for node in neighbours:
                component = build_component(node.file, depth=node.depth)
                existing = by_name.get(component.name)
                if existing is None:
                    by_name[component.name] = component
                elif node.depth < existing.depth:
                    existing.depth = node.depth

        return list(by_name.values())

    def _check_depth(self, depth: Optional[int]) -> int:
        if depth is None:
            return self.config.default_depth
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise InvalidConfigError("depth", depth, "must be an integer")
        if not 0 <= depth <= self.config.max_depth:
            raise InvalidConfigError(
                "depth", depth, f"must be between 0 and {self.config.max_depth}"
            )
        return depth


def _require_strings(values: Sequence[object], name: str) -> None:
    for i, value in enumerate(values):
        if not isinstance(value, str):
            raise AnalysisFailedError(
                f"{name}[{i}] must be a string, got {type(value).__name__}"
            )
