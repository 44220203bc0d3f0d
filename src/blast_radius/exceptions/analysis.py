"""Request and analysis exceptions: validation, pipeline failures."""

from .base import BlastRadiusError


class RequestValidationError(BlastRadiusError):
    """Raised when a request is missing a field or carries a malformed one.

    ``message`` is the client-facing text, e.g. ``"app is required"``.
    """

    def __init__(self, field: str, reason: str = "is required"):
        super().__init__(f"{field} {reason}", details={"field": field})
        self.field = field
        self.reason = reason

    def __str__(self) -> str:
        return self.message


class AnalysisError(BlastRadiusError):
    """Base class for analysis-related errors."""
    pass


class AnalysisFailedError(AnalysisError):
    """Raised when the pipeline fails part-way; no partial result is kept."""

    def __init__(self, reason: str):
        super().__init__(f"Analysis failed: {reason}", details={"reason": reason})
        self.reason = reason

    def __str__(self) -> str:
        return self.message
