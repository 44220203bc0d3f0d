"""Deterministic risk score.

    component_score   = min(components * 5, 30)
    integration_score = min(sum(weight * 10 for distinct integrations), 50)
    test_score        = min(directly_affected_tests * 5, 20)
    score             = min(component + integration + test, 100)

Levels: >=70 critical, >=50 high, >=30 medium, otherwise low.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import RiskWeights
from ..exceptions import InvalidConfigError
from ..models import IntegrationPoint, RiskAssessment, RiskLevel

_DESCRIPTIONS = {
    RiskLevel.CRITICAL: (
        "Critical risk: {components} components affected with {critical} critical "
        "integrations. Comprehensive testing required."
    ),
    RiskLevel.HIGH: (
        "High risk: {components} components affected ({critical} critical integrations). "
        "Thorough testing recommended for all affected areas."
    ),
    RiskLevel.MEDIUM: (
        "Medium risk: {components} components affected ({critical} critical integrations). "
        "Standard regression testing recommended."
    ),
    RiskLevel.LOW: (
        "Low risk: Limited blast radius with {components} components and {critical} "
        "critical integrations. Basic validation sufficient."
    ),
}


class RiskScorer:
    def __init__(self, weights: Optional[RiskWeights] = None):
        self.weights = weights or RiskWeights()

    def level_for(self, score: int) -> RiskLevel:
        w = self.weights
        if score >= w.critical_threshold:
            return RiskLevel.CRITICAL
        if score >= w.high_threshold:
            return RiskLevel.HIGH
        if score >= w.medium_threshold:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW

    def score(
        self,
        component_count: int,
        integration_points: Iterable[IntegrationPoint],
        directly_affected_tests: int,
    ) -> RiskAssessment:
        if component_count < 0:
            raise InvalidConfigError("component_count", component_count, "must be non-negative")
        if directly_affected_tests < 0:
            raise InvalidConfigError(
                "directly_affected_tests", directly_affected_tests, "must be non-negative"
            )

        w = self.weights

        # Weights count once per integration type
        distinct: dict = {}
        for point in integration_points:
            distinct.setdefault(point.type, point)

        component_score = min(component_count * w.component_points, w.component_cap)
        integration_score = min(
            sum(p.weight * w.integration_multiplier for p in distinct.values()),
            w.integration_cap,
        )
        test_score = min(directly_affected_tests * w.test_points, w.test_cap)
        total = max(0, min(component_score + integration_score + test_score, w.score_cap))

        level = self.level_for(total)
        critical = sum(1 for p in distinct.values() if p.level is RiskLevel.CRITICAL)

        return RiskAssessment(
            score=total,
            level=level,
            description=_DESCRIPTIONS[level].format(components=component_count, critical=critical),
            factors={
                "components": component_score,
                "integrations": integration_score,
                "tests": test_score,
            },
        )
