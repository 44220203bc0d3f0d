"""Configuration loading and management for the blast radius analyzer.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalyzerConfig)
    2. Project config (./blast-radius.toml)
    3. Explicit config file
    4. Environment variables (BLAST_RADIUS_* prefix)
    5. Keyword overrides (typically CLI flags)

All config objects are frozen: a single instance can be shared by concurrent
analyses, and per-request overrides build a new instance instead of mutating.

Example:
    >>> config = load_config(default_depth=3)
    >>> config.default_depth
    3
    >>> config.risk.critical_threshold
    70
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

ENV_PREFIX = "BLAST_RADIUS_"
PROJECT_CONFIG_NAME = "blast-radius.toml"


@dataclass(frozen=True)
class ResolverConfig:
    """Tuning for fuzzy file resolution.

    Attributes:
        max_levenshtein_distance: Largest basename edit distance still accepted
        suggestion_limit: Maximum suggestions attached to an unresolved file
        suggestion_prefix_length: Leading characters of the requested stem
            used as the substring probe when building suggestions
    """

    max_levenshtein_distance: int = 5
    suggestion_limit: int = 5
    suggestion_prefix_length: int = 4

    def __post_init__(self) -> None:
        if self.max_levenshtein_distance < 0:
            raise InvalidConfigError(
                "max_levenshtein_distance", self.max_levenshtein_distance, "must be non-negative"
            )
        if self.suggestion_limit < 0:
            raise InvalidConfigError(
                "suggestion_limit", self.suggestion_limit, "must be non-negative"
            )
        if self.suggestion_prefix_length < 1:
            raise InvalidConfigError(
                "suggestion_prefix_length", self.suggestion_prefix_length, "must be at least 1"
            )


@dataclass(frozen=True)
class RiskWeights:
    """Weights, caps and level thresholds of the risk formula.

    Attributes:
        Components:
            component_points: Points per affected component
            component_cap: Ceiling for the component partial score

        Integrations:
            integration_multiplier: Multiplier applied to each distinct weight
            integration_cap: Ceiling for the integration partial score

        Tests:
            test_points: Points per directly affected test
            test_cap: Ceiling for the test partial score

        Levels (inclusive lower bounds):
            critical_threshold / high_threshold / medium_threshold
    """

    component_points: int = 5
    component_cap: int = 30

    integration_multiplier: int = 10
    integration_cap: int = 50

    test_points: int = 5
    test_cap: int = 20

    score_cap: int = 100

    critical_threshold: int = 70
    high_threshold: int = 50
    medium_threshold: int = 30

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise InvalidConfigError(f.name, value, "must be non-negative")

        if not (
            self.medium_threshold < self.high_threshold < self.critical_threshold <= self.score_cap
        ):
            raise InvalidConfigError(
                "thresholds",
                f"{self.medium_threshold}/{self.high_threshold}/{self.critical_threshold}",
                "must satisfy medium < high < critical <= score_cap",
            )


@dataclass(frozen=True)
class AnalyzerConfig:
    """Configuration for analysis execution.

    Attributes:
        default_depth: Expansion depth used when a request omits one
        max_depth: Largest depth a request may ask for
        extensions: File suffixes collected when scanning a checkout
        exclude_dirs: Directory names skipped when scanning a checkout
        resolver: Fuzzy resolution tuning
        risk: Risk formula weights
    """

    default_depth: int = 2
    max_depth: int = 10

    extensions: tuple[str, ...] = (".cs", ".ts", ".tsx", ".js", ".jsx", ".vue", ".py")
    exclude_dirs: tuple[str, ...] = (
        "node_modules",
        "bin",
        "obj",
        ".git",
        "dist",
        "build",
        "__pycache__",
        ".venv",
        "venv",
    )

    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    risk: RiskWeights = field(default_factory=RiskWeights)

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise InvalidConfigError("max_depth", self.max_depth, "must be non-negative")
        if not 0 <= self.default_depth <= self.max_depth:
            raise InvalidConfigError(
                "default_depth", self.default_depth, f"must be between 0 and {self.max_depth}"
            )


DEFAULT_CONFIG = AnalyzerConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalyzerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit TOML config file
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset options keep lower-priority values

    Returns:
        Validated AnalyzerConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    resolver = _build_section(merged.pop("resolver", None), ResolverConfig, "resolver")
    if resolver is not None:
        merged["resolver"] = resolver
    risk = _build_section(merged.pop("risk", None), RiskWeights, "risk")
    if risk is not None:
        merged["risk"] = risk

    for key in ("extensions", "exclude_dirs"):
        if isinstance(merged.get(key), list):
            merged[key] = tuple(merged[key])

    try:
        return AnalyzerConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _build_section(raw: Any, cls: type, name: str) -> Any:
    """Build a nested config dataclass from a TOML table."""
    if raw is None or isinstance(raw, cls):
        return raw
    if not isinstance(raw, dict):
        raise InvalidConfigError(name, raw, "must be a table")
    try:
        return cls(**raw)
    except TypeError as e:
        raise ConfigurationError(f"Invalid [{name}] config: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load top-level scalar settings from BLAST_RADIUS_* environment variables.

    Supported environment variables:
        BLAST_RADIUS_DEFAULT_DEPTH: int
        BLAST_RADIUS_MAX_DEPTH: int
    """
    type_hints = get_type_hints(AnalyzerConfig)
    result: dict[str, Any] = {}

    for f in fields(AnalyzerConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        # Only int settings are exposed; tuples and nested sections need TOML
        if type_hints.get(f.name) is not int:
            continue
        try:
            result[f.name] = int(env_value)
        except ValueError:
            raise InvalidConfigError(env_key, env_value, "expected an integer")

    return result


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
