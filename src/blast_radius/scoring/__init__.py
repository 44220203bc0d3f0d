"""Risk scoring and test recommendations."""

from .recommendations import DEFAULT_RULES, RecommendationEngine, RecommendationRule
from .risk import RiskScorer

__all__ = ["DEFAULT_RULES", "RecommendationEngine", "RecommendationRule", "RiskScorer"]
