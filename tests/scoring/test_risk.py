"""Tests for the risk formula and levels."""

import pytest

from blast_radius.classify import DEFAULT_INTEGRATION_RULES
from blast_radius.config import RiskWeights
from blast_radius.exceptions import InvalidConfigError
from blast_radius.models import IntegrationType, RiskLevel
from blast_radius.scoring import RiskScorer

RULES = {rule.type: rule for rule in DEFAULT_INTEGRATION_RULES}


def point(integration_type):
    return RULES[integration_type].point()


@pytest.fixture
def scorer():
    return RiskScorer()


class TestScore:
    def test_combined_factors(self, scorer):
        risk = scorer.score(
            3, [point(IntegrationType.FINANCIAL), point(IntegrationType.PAYMENT)], 2
        )
        assert risk.score == 75
        assert risk.level is RiskLevel.CRITICAL
        assert risk.factors == {"components": 15, "integrations": 50, "tests": 10}
        assert risk.description.startswith("Critical risk: 3 components affected with 2 critical")

    def test_everything_capped(self, scorer):
        points = [point(t) for t in IntegrationType]
        risk = scorer.score(30, points, 10)
        assert risk.factors == {"components": 30, "integrations": 50, "tests": 20}
        assert risk.score == 100

    def test_duplicate_types_count_once(self, scorer):
        fin = point(IntegrationType.FINANCIAL)
        risk = scorer.score(0, [fin, fin], 0)
        assert risk.score == 50
        assert risk.level is RiskLevel.HIGH

    def test_single_critical_integration(self, scorer):
        risk = scorer.score(1, [point(IntegrationType.EPIC)], 0)
        assert risk.score == 55
        assert risk.level is RiskLevel.HIGH
        assert "1 critical" in risk.description

    def test_nothing_affected(self, scorer):
        risk = scorer.score(0, [], 0)
        assert risk.score == 0
        assert risk.level is RiskLevel.LOW
        assert risk.description.startswith("Low risk")

    def test_score_always_in_range(self, scorer):
        for components in (0, 1, 7, 100):
            for tests in (0, 3, 50):
                risk = scorer.score(components, [point(IntegrationType.UI)], tests)
                assert 0 <= risk.score <= 100

    def test_negative_counts_rejected(self, scorer):
        with pytest.raises(InvalidConfigError):
            scorer.score(-1, [], 0)
        with pytest.raises(InvalidConfigError):
            scorer.score(0, [], -1)


class TestLevels:
    @pytest.mark.parametrize(
        "score,level",
        [
            (0, RiskLevel.LOW),
            (29, RiskLevel.LOW),
            (30, RiskLevel.MEDIUM),
            (49, RiskLevel.MEDIUM),
            (50, RiskLevel.HIGH),
            (69, RiskLevel.HIGH),
            (70, RiskLevel.CRITICAL),
            (100, RiskLevel.CRITICAL),
        ],
    )
    def test_boundaries(self, scorer, score, level):
        assert scorer.level_for(score) is level

    def test_custom_thresholds(self):
        scorer = RiskScorer(RiskWeights(critical_threshold=90, high_threshold=60))
        assert scorer.level_for(75) is RiskLevel.HIGH
        assert scorer.level_for(90) is RiskLevel.CRITICAL
