"""Data models for blast radius analysis.

Every model is transient: built for one request and discarded. ``to_dict``
produces the camelCase JSON shape returned to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class MatchType(str, Enum):
    """How a requested path was matched against the file corpus."""

    EXACT = "exact"
    CASE_INSENSITIVE = "case-insensitive"
    FILENAME = "filename"
    PARTIAL_PATH = "partial-path"
    LEVENSHTEIN = "levenshtein"
    UNRESOLVED = "unresolved"


class ComponentType(str, Enum):
    """Architectural layer inferred from a file path."""

    CONTROLLER = "Controller"
    SERVICE = "Service"
    REPOSITORY = "Repository"
    MODEL = "Model"
    TEST = "Test"
    COMPONENT = "Component"


class IntegrationType(str, Enum):
    """External or cross-cutting system touched by a change."""

    EPIC = "Epic"
    FINANCIAL = "Financial"
    PAYMENT = "Payment"
    EXTERNAL_API = "ExternalAPI"
    DATABASE = "Database"
    MESSAGING = "Messaging"
    INTERNAL_SERVICE = "InternalService"
    UI = "UI"


class RiskLevel(str, Enum):
    """Four-valued ordinal shared by risk assessments and priorities."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# ── Resolution ─────────────────────────────────────────────────────


@dataclass
class ResolvedFile:
    """Outcome of resolving one requested path. Exactly one match type."""

    requested_path: str
    exists: bool
    match_type: MatchType
    resolved_path: Optional[str] = None
    distance: Optional[int] = None
    suggestions: list[str] = field(default_factory=list)

    @property
    def path(self) -> Optional[str]:
        """Path to analyze, or None when unresolved."""
        return self.resolved_path if self.exists else None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "requestedPath": self.requested_path,
            "exists": self.exists,
            "matchType": self.match_type.value,
        }
        if self.resolved_path is not None:
            data["resolvedPath"] = self.resolved_path
        if self.distance is not None:
            data["distance"] = self.distance
        if self.suggestions:
            data["suggestions"] = list(self.suggestions)
        return data


# ── Graph ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TransitiveNode:
    """A file reached from an origin, tagged with its shortest hop count."""

    file: str
    depth: int

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "depth": self.depth}


@dataclass
class DependencyReport:
    """Direct and transitive neighbours of a single file, both directions."""

    file: str
    depth: int
    dependencies: list[str] = field(default_factory=list)
    dependents: list[str] = field(default_factory=list)
    transitive_dependencies: list[TransitiveNode] = field(default_factory=list)
    transitive_dependents: list[TransitiveNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "depth": self.depth,
            "dependencies": list(self.dependencies),
            "dependents": list(self.dependents),
            "transitiveDependencies": [n.to_dict() for n in self.transitive_dependencies],
            "transitiveDependents": [n.to_dict() for n in self.transitive_dependents],
        }


# ── Classification ─────────────────────────────────────────────────


@dataclass
class Component:
    """An affected file, identified by its path.

    ``depth`` is 0 for a changed file and the shortest discovery depth for
    an inferred neighbour. ``label`` is the file stem, for display only;
    two files may share a label.
    """

    name: str
    file: str
    type: ComponentType
    depth: int = 0
    label: str = ""

    @property
    def changed_directly(self) -> bool:
        return self.depth == 0


@dataclass(frozen=True)
class IntegrationPoint:
    type: IntegrationType
    level: RiskLevel
    weight: int
    file: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type.value,
            "level": self.level.value,
            "weight": self.weight,
        }
        if self.file is not None:
            data["file"] = self.file
        return data


# ── Scoring ────────────────────────────────────────────────────────


@dataclass
class RiskAssessment:
    score: int
    level: RiskLevel
    description: str
    factors: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "level": self.level.value,
            "description": self.description,
            "factors": dict(self.factors),
        }


@dataclass
class Recommendation:
    category: str
    priority: RiskLevel
    recommendation: str
    test_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "priority": self.priority.value,
            "recommendation": self.recommendation,
            "testTypes": list(self.test_types),
        }


# ── Composite result ───────────────────────────────────────────────


@dataclass
class ImpactSummary:
    affected_components: list[str] = field(default_factory=list)
    affected_tests: list[str] = field(default_factory=list)
    affected_integrations: list[str] = field(default_factory=list)
    direct_dependencies: int = 0
    transitive_dependencies: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "affectedComponents": list(self.affected_components),
            "affectedTests": list(self.affected_tests),
            "affectedIntegrations": list(self.affected_integrations),
            "directDependencies": self.direct_dependencies,
            "transitiveDependencies": self.transitive_dependencies,
        }


@dataclass
class BlastRadiusResult:
    """Everything one analysis produces."""

    risk: RiskAssessment
    changed_files: list[ResolvedFile]
    impact: ImpactSummary
    recommendations: list[Recommendation]
    components: list[Component] = field(default_factory=list)
    integrations: list[IntegrationPoint] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "risk": self.risk.to_dict(),
            "changedFiles": [f.to_dict() for f in self.changed_files],
            "impact": self.impact.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "metadata": dict(self.metadata),
        }
