"""Inferred dependency graph and bounded transitive expansion."""

from .inference import (
    DependencySource,
    NamingConventionGraph,
    infer_repository_from_service,
    infer_service_from_controller,
)
from .static import StaticDependencyGraph
from .traversal import transitive_dependencies, transitive_dependents

__all__ = [
    "DependencySource",
    "NamingConventionGraph",
    "StaticDependencyGraph",
    "infer_repository_from_service",
    "infer_service_from_controller",
    "transitive_dependencies",
    "transitive_dependents",
]
