"""Tests for integration point detection."""

import pytest

from blast_radius.classify import IntegrationClassifier, IntegrationRule, build_component
from blast_radius.models import IntegrationType, RiskLevel


@pytest.fixture
def classifier():
    return IntegrationClassifier()


class TestMatch:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("Adapters/EpicAdapter.cs", IntegrationType.EPIC),
            ("Services/BillingService.cs", IntegrationType.FINANCIAL),
            ("StripeGateway.cs", IntegrationType.PAYMENT),
            ("Clients/ApiClient.cs", IntegrationType.EXTERNAL_API),
            ("PatientRepository.cs", IntegrationType.DATABASE),
            ("QueueConsumer.cs", IntegrationType.MESSAGING),
            ("Services/UserService.cs", IntegrationType.INTERNAL_SERVICE),
            ("NotificationWorker.cs", IntegrationType.INTERNAL_SERVICE),
            ("Views/Dashboard.vue", IntegrationType.UI),
        ],
    )
    def test_categories(self, classifier, path, expected):
        assert classifier.match(path).type is expected

    def test_no_category(self, classifier):
        assert classifier.match("Program.cs") is None

    def test_first_rule_in_table_order_wins(self, classifier):
        # "payment" (Financial) precedes "gateway" (Payment)
        assert classifier.match("PaymentGateway.cs").type is IntegrationType.FINANCIAL

    def test_external_api_needs_both_keywords(self, classifier):
        assert classifier.match("ApiRoutes.cs") is None
        # "client" alone falls through to InternalService
        assert classifier.match("SmtpClient.cs").type is IntegrationType.INTERNAL_SERVICE

    def test_levels_and_weights(self, classifier):
        rule = classifier.match("EpicAdapter.cs")
        assert rule.level is RiskLevel.CRITICAL
        assert rule.weight == 5
        rule = classifier.match("Views/Dashboard.vue")
        assert rule.level is RiskLevel.LOW
        assert rule.weight == 1


class TestClassify:
    def test_deduplicates_by_type_keeping_first_file(self, classifier):
        components = [
            build_component("Services/PaymentService.cs"),
            build_component("Services/BillingService.cs"),
        ]
        points = classifier.classify(components)
        assert len(points) == 1
        assert points[0].type is IntegrationType.FINANCIAL
        assert points[0].file == "Services/PaymentService.cs"

    def test_one_category_per_component(self, classifier):
        points = classifier.classify([build_component("Services/BillingService.cs")])
        assert [p.type for p in points] == [IntegrationType.FINANCIAL]

    def test_empty(self, classifier):
        assert classifier.classify([]) == []

    def test_custom_rules(self):
        rule = IntegrationRule(IntegrationType.MESSAGING, RiskLevel.HIGH, 4, any_of=("kafka",))
        classifier = IntegrationClassifier([rule])
        points = classifier.classify([build_component("KafkaProducer.cs")])
        assert points[0].to_dict() == {
            "type": "Messaging",
            "level": "high",
            "weight": 4,
            "file": "KafkaProducer.cs",
        }
