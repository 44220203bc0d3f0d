"""Tests for the recommendation rule table."""

from blast_radius.classify import IntegrationClassifier, build_component
from blast_radius.models import RiskAssessment, RiskLevel
from blast_radius.scoring import RecommendationEngine, RecommendationRule


def assessment(level):
    return RiskAssessment(score=0, level=level, description="")


def generate(level, paths):
    components = [build_component(p) for p in paths]
    integrations = IntegrationClassifier().classify(components)
    return RecommendationEngine().generate(assessment(level), components, integrations)


class TestRecommendationEngine:
    def test_nothing_affected(self):
        assert generate(RiskLevel.LOW, []) == []

    def test_integration_per_point(self):
        recs = generate(RiskLevel.MEDIUM, ["Services/UserService.cs", "UserRepository.cs"])
        integration = [r for r in recs if r.category == "Integration"]
        assert [r.recommendation for r in integration] == [
            "Test InternalService integration thoroughly - medium risk area",
            "Test Database integration thoroughly - high risk area",
        ]
        assert [r.priority for r in integration] == [RiskLevel.MEDIUM, RiskLevel.HIGH]
        assert integration[0].test_types == ["integration", "e2e"]

    def test_controller_rule(self):
        recs = generate(RiskLevel.LOW, ["TestController.cs"])
        api = [r for r in recs if r.category == "API"]
        assert len(api) == 1
        assert api[0].priority is RiskLevel.HIGH
        assert api[0].recommendation == "Verify all API endpoints in affected controllers"
        assert api[0].test_types == ["api", "integration"]

    def test_layer_rules_in_order(self):
        recs = generate(
            RiskLevel.HIGH,
            ["OrderController.cs", "OrderService.cs", "OrderRepository.cs", "tests/OrderSpecTests.cs"],
        )
        categories = [r.category for r in recs if r.category != "Integration"]
        assert categories == ["API", "Data", "Business Logic", "Test Maintenance"]

    def test_regression_only_when_critical(self):
        assert not any(r.category == "Regression" for r in generate(RiskLevel.HIGH, ["A.cs"]))
        recs = generate(RiskLevel.CRITICAL, ["A.cs"])
        assert [r.category for r in recs] == ["Regression"]
        assert recs[0].to_dict() == {
            "category": "Regression",
            "priority": "critical",
            "recommendation": "Full regression suite recommended before deployment",
            "testTypes": ["regression", "e2e"],
        }

    def test_custom_rules(self):
        rule = RecommendationRule(
            name="always",
            applies=lambda ctx: True,
            build=lambda ctx: [],
        )
        engine = RecommendationEngine([rule])
        assert engine.generate(assessment(RiskLevel.CRITICAL), [], []) == []
