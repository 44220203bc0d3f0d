"""Root of the blast radius error hierarchy."""

from typing import Any, Dict, Optional


class BlastRadiusError(Exception):
    """Any failure the analyzer reports to a caller.

    ``message`` is what clients see: the CLI prints it after ``Error:`` and
    the HTTP server returns it as ``{"error": message}``. ``details`` holds
    the offending field, setting or path for logs.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, str]:
        """JSON error body shared by every endpoint."""
        return {"error": self.message}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({extra})"
