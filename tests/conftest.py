"""Shared test fixtures for blast radius tests."""

import pytest

from blast_radius.analyzer import BlastRadiusAnalyzer
from blast_radius.graph import NamingConventionGraph


@pytest.fixture
def corpus():
    """A small .NET-style checkout with one ambiguous basename (Payment.cs)."""
    return [
        "src/Controllers/PaymentController.cs",
        "src/Services/PaymentService.cs",
        "src/Services/BillingService.cs",
        "src/Repositories/PaymentRepository.cs",
        "src/Models/Payment.cs",
        "src/Legacy/Payment.cs",
        "tests/Services/PaymentServiceTests.cs",
    ]


@pytest.fixture
def graph():
    return NamingConventionGraph()


@pytest.fixture
def analyzer():
    return BlastRadiusAnalyzer()
