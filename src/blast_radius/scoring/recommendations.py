"""Rule table mapping an assessed change to test recommendations.

Every rule is evaluated independently; several may fire for one change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from ..models import (
    Component,
    ComponentType,
    IntegrationPoint,
    Recommendation,
    RiskAssessment,
    RiskLevel,
)


@dataclass(frozen=True)
class ChangeContext:
    """What a rule gets to look at."""

    risk: RiskAssessment
    components: Sequence[Component]
    integrations: Sequence[IntegrationPoint]

    def has_type(self, component_type: ComponentType) -> bool:
        return any(c.type is component_type for c in self.components)


@dataclass(frozen=True)
class RecommendationRule:
    """Fires ``build`` when ``applies`` holds; ``build`` may return several entries."""

    name: str
    applies: Callable[[ChangeContext], bool]
    build: Callable[[ChangeContext], list[Recommendation]]


def _component_rule(
    name: str,
    component_type: ComponentType,
    category: str,
    priority: RiskLevel,
    text: str,
    test_types: list[str],
) -> RecommendationRule:
    return RecommendationRule(
        name=name,
        applies=lambda ctx: ctx.has_type(component_type),
        build=lambda ctx: [Recommendation(category, priority, text, list(test_types))],
    )


def _integration_recommendations(ctx: ChangeContext) -> list[Recommendation]:
    return [
        Recommendation(
            category="Integration",
            priority=point.level,
            recommendation=(
                f"Test {point.type.value} integration thoroughly - {point.level.value} risk area"
            ),
            test_types=["integration", "e2e"],
        )
        for point in ctx.integrations
    ]


DEFAULT_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(
        name="integrations",
        applies=lambda ctx: bool(ctx.integrations),
        build=_integration_recommendations,
    ),
    _component_rule(
        "controllers",
        ComponentType.CONTROLLER,
        "API",
        RiskLevel.HIGH,
        "Verify all API endpoints in affected controllers",
        ["api", "integration"],
    ),
    _component_rule(
        "repositories",
        ComponentType.REPOSITORY,
        "Data",
        RiskLevel.HIGH,
        "Validate data access layer changes with integration tests",
        ["integration", "unit"],
    ),
    _component_rule(
        "services",
        ComponentType.SERVICE,
        "Business Logic",
        RiskLevel.MEDIUM,
        "Unit test business logic changes in services",
        ["unit"],
    ),
    _component_rule(
        "tests",
        ComponentType.TEST,
        "Test Maintenance",
        RiskLevel.MEDIUM,
        "Review and re-run affected test suites; update fixtures that encode changed behaviour",
        ["unit"],
    ),
    RecommendationRule(
        name="regression",
        applies=lambda ctx: ctx.risk.level is RiskLevel.CRITICAL,
        build=lambda ctx: [
            Recommendation(
                "Regression",
                RiskLevel.CRITICAL,
                "Full regression suite recommended before deployment",
                ["regression", "e2e"],
            )
        ],
    ),
)


class RecommendationEngine:
    def __init__(self, rules: Iterable[RecommendationRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def generate(
        self,
        risk: RiskAssessment,
        components: Sequence[Component],
        integrations: Sequence[IntegrationPoint],
    ) -> list[Recommendation]:
        ctx = ChangeContext(risk=risk, components=components, integrations=integrations)
        recommendations: list[Recommendation] = []
        for rule in self.rules:
            if rule.applies(ctx):
                recommendations.extend(rule.build(ctx))
        return recommendations
