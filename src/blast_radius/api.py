"""Transport-agnostic request handling.

Validates JSON-shaped payloads, calls the analyzer, and returns JSON-shaped
results. Both the CLI and the HTTP server go through these functions.

Example:
    >>> from blast_radius.api import handle_analyze
    >>> body = handle_analyze({"app": "billing", "changedFiles": ["PaymentController.cs"]})
    >>> body["risk"]["level"]
    'high'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .analyzer import BlastRadiusAnalyzer
from .exceptions import RequestValidationError
from .models import BlastRadiusResult

_MISSING = object()


@dataclass(frozen=True)
class AnalyzeRequest:
    app: str
    changed_files: list
    depth: Optional[int] = None
    available_files: Optional[list] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "AnalyzeRequest":
        payload = _as_mapping(payload)
        app = _required(payload, "app")
        if not isinstance(app, str):
            raise RequestValidationError("app", "must be a string")
        return cls(
            app=app,
            changed_files=_list_field(payload, "changedFiles", required=True),
            depth=_depth_field(payload),
            available_files=_list_field(payload, "availableFiles"),
        )


@dataclass(frozen=True)
class DependenciesRequest:
    file: str
    depth: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "DependenciesRequest":
        payload = _as_mapping(payload)
        file = _required(payload, "file")
        if not isinstance(file, str):
            raise RequestValidationError("file", "must be a string")
        return cls(file=file, depth=_depth_field(payload))


@dataclass(frozen=True)
class FindFilesRequest:
    search_paths: list
    available_files: Optional[list] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "FindFilesRequest":
        payload = _as_mapping(payload)
        return cls(
            search_paths=_list_field(payload, "searchPaths", required=True),
            available_files=_list_field(payload, "availableFiles"),
        )


# ── Handlers ───────────────────────────────────────────────────────


def run_analyze(
    payload: Any, analyzer: Optional[BlastRadiusAnalyzer] = None
) -> BlastRadiusResult:
    """Validate ``payload`` and run a full analysis.

    Raises:
        RequestValidationError: Before any analysis work is done
        AnalysisFailedError: If the pipeline fails
    """
    request = AnalyzeRequest.from_payload(payload)
    analyzer = analyzer or BlastRadiusAnalyzer()
    _check_depth(analyzer, request.depth)
    return analyzer.analyze(
        request.app,
        request.changed_files,
        depth=request.depth,
        available_files=request.available_files,
    )


def handle_analyze(
    payload: Any, analyzer: Optional[BlastRadiusAnalyzer] = None
) -> dict[str, Any]:
    return run_analyze(payload, analyzer).to_dict()


def handle_dependencies(
    payload: Any, analyzer: Optional[BlastRadiusAnalyzer] = None
) -> dict[str, Any]:
    request = DependenciesRequest.from_payload(payload)
    analyzer = analyzer or BlastRadiusAnalyzer()
    _check_depth(analyzer, request.depth)
    return analyzer.dependencies(request.file, request.depth).to_dict()


def handle_find_files(
    payload: Any, analyzer: Optional[BlastRadiusAnalyzer] = None
) -> list[dict[str, Any]]:
    request = FindFilesRequest.from_payload(payload)
    analyzer = analyzer or BlastRadiusAnalyzer()
    return [
        analyzer.find_files(query, request.available_files).to_dict()
        for query in request.search_paths
    ]


# ── Field helpers ──────────────────────────────────────────────────


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise RequestValidationError("body", "must be a JSON object")
    return payload


def _required(payload: Mapping[str, Any], name: str) -> Any:
    value = payload.get(name, _MISSING)
    if value is _MISSING or value is None or value == "":
        raise RequestValidationError(name)
    return value


def _list_field(payload: Mapping[str, Any], name: str, required: bool = False) -> Optional[list]:
    if required:
        value = _required(payload, name)
    else:
        value = payload.get(name)
        if value is None:
            return None
    if not isinstance(value, list):
        raise RequestValidationError(name, "must be a list of strings")
    # Element types are checked by the analyzer; a bad entry fails the analysis
    return list(value)


def _depth_field(payload: Mapping[str, Any]) -> Optional[int]:
    depth = payload.get("depth")
    if depth is None:
        return None
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise RequestValidationError("depth", "must be an integer")
    return depth


def _check_depth(analyzer: BlastRadiusAnalyzer, depth: Optional[int]) -> None:
    max_depth = analyzer.config.max_depth
    if depth is not None and not 0 <= depth <= max_depth:
        raise RequestValidationError("depth", f"must be an integer between 0 and {max_depth}")
