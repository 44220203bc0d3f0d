"""Errors raised while building an ``AnalyzerConfig`` or scanning a checkout."""

from pathlib import Path
from typing import Any

from .base import BlastRadiusError


class ConfigurationError(BlastRadiusError):
    """A config file is missing or malformed, or a setting is rejected."""


class InvalidPathError(ConfigurationError):
    """The ``--root`` checkout to scan for available files is unusable."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot scan {path}: {reason}", details={"root": str(path), "reason": reason}
        )
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """A setting or depth fails validation, e.g. ``max_depth`` below zero.

    ``key`` names the setting as written in ``blast-radius.toml`` (or
    ``thresholds`` for the risk level ordering).
    """

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"setting": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
