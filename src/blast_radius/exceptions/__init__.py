"""Exception hierarchy for the blast radius analyzer."""

from .analysis import AnalysisError, AnalysisFailedError, RequestValidationError
from .base import BlastRadiusError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "BlastRadiusError",
    "AnalysisError",
    "AnalysisFailedError",
    "RequestValidationError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidPathError",
]
