"""Component typing and integration tagging."""

from .components import build_component, get_component_type
from .integrations import DEFAULT_INTEGRATION_RULES, IntegrationClassifier, IntegrationRule

__all__ = [
    "DEFAULT_INTEGRATION_RULES",
    "IntegrationClassifier",
    "IntegrationRule",
    "build_component",
    "get_component_type",
]
