"""Integration point detection from affected component paths.

Each component contributes at most one category: the first rule, in table
order, whose patterns match its lower-cased path. Categories are then
deduplicated, keeping the first triggering file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..models import Component, IntegrationPoint, IntegrationType, RiskLevel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrationRule:
    """One category of the integration table.

    A path matches when it contains any of ``any_of`` and, if ``all_of`` is
    set, every keyword in ``all_of``.
    """

    type: IntegrationType
    level: RiskLevel
    weight: int
    any_of: tuple[str, ...] = ()
    all_of: tuple[str, ...] = ()

    def matches(self, lower_path: str) -> bool:
        if self.all_of and not all(k in lower_path for k in self.all_of):
            return False
        if self.any_of:
            return any(k in lower_path for k in self.any_of)
        return bool(self.all_of)

    def point(self, file: Optional[str] = None) -> IntegrationPoint:
        return IntegrationPoint(type=self.type, level=self.level, weight=self.weight, file=file)


DEFAULT_INTEGRATION_RULES: tuple[IntegrationRule, ...] = (
    IntegrationRule(
        IntegrationType.EPIC, RiskLevel.CRITICAL, 5,
        any_of=("epic", "ehr"),
    ),
    IntegrationRule(
        IntegrationType.FINANCIAL, RiskLevel.CRITICAL, 5,
        any_of=("financial", "billing", "payment"),
    ),
    IntegrationRule(
        IntegrationType.PAYMENT, RiskLevel.CRITICAL, 5,
        any_of=("stripe", "paypal", "gateway"),
    ),
    IntegrationRule(
        IntegrationType.EXTERNAL_API, RiskLevel.HIGH, 4,
        all_of=("api", "client"),
    ),
    IntegrationRule(
        IntegrationType.DATABASE, RiskLevel.HIGH, 4,
        any_of=("repository", "dbcontext", "database"),
    ),
    IntegrationRule(
        IntegrationType.MESSAGING, RiskLevel.MEDIUM, 3,
        any_of=("message", "queue", "event"),
    ),
    IntegrationRule(
        IntegrationType.INTERNAL_SERVICE, RiskLevel.MEDIUM, 2,
        any_of=("service", "handler", "worker", "client"),
    ),
    IntegrationRule(
        IntegrationType.UI, RiskLevel.LOW, 1,
        any_of=("component", "view", "page", ".vue", ".tsx", ".jsx", ".cshtml", ".razor"),
    ),
)


class IntegrationClassifier:
    def __init__(self, rules: Iterable[IntegrationRule] = DEFAULT_INTEGRATION_RULES):
        self.rules = tuple(rules)

    def match(self, path: str) -> Optional[IntegrationRule]:
        lower = path.lower()
        for rule in self.rules:
            if rule.matches(lower):
                return rule
        return None

    def classify(self, components: Iterable[Component]) -> list[IntegrationPoint]:
        points: dict[IntegrationType, IntegrationPoint] = {}
        for component in components:
            rule = self.match(component.file)
            if rule is None or rule.type in points:
                continue
            points[rule.type] = rule.point(component.file)
            logger.debug("Integration %s via %s", rule.type.value, component.file)
        return list(points.values())
