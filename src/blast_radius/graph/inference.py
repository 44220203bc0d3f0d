"""Dependency edges inferred from naming conventions.

No imports are parsed. Layers, outermost first:

    Controller -> Service -> Repository
    Model/Entity <- Service, Controller

Every inference is a raw first-occurrence substring replacement, so folder
segments are rewritten too: ``src/Controllers/UserController.cs`` infers
``src/Services/UserController.cs``. Candidates may not exist on disk.

Forward inference is case-sensitive. The dependents rules ignore case, so
``app/models/payment.py`` still yields ``app/Services/payment.py`` and
``app/Controllers/payment.py``.
"""

from __future__ import annotations

import re
from typing import Optional, Protocol

_MODEL_OR_ENTITY = re.compile(r"Model|Entity", re.IGNORECASE)
_SERVICE = re.compile(r"Service", re.IGNORECASE)
_REPOSITORY = re.compile(r"Repository", re.IGNORECASE)


class DependencySource(Protocol):
    """Anything that can answer direct-neighbour queries for a file."""

    def dependencies(self, file: str) -> list[str]: ...

    def dependents(self, file: str) -> list[str]: ...


def _replace_first(path: str, old: str, new: str) -> Optional[str]:
    if old not in path:
        return None
    return path.replace(old, new, 1)


def infer_service_from_controller(path: str) -> Optional[str]:
    """``PaymentController.cs`` -> ``PaymentService.cs``; None without "Controller"."""
    return _replace_first(path, "Controller", "Service")


def infer_repository_from_service(path: str) -> Optional[str]:
    """``PaymentService.cs`` -> ``PaymentRepository.cs``; None without "Service"."""
    return _replace_first(path, "Service", "Repository")


def _sub_first(pattern: re.Pattern, path: str, new: str) -> Optional[str]:
    if not pattern.search(path):
        return None
    return pattern.sub(new, path, count=1)


def _unique(candidates: list[Optional[str]], origin: str) -> list[str]:
    seen: list[str] = []
    for c in candidates:
        if c is not None and c != origin and c not in seen:
            seen.append(c)
    return seen


class NamingConventionGraph:
    """DependencySource that infers edges from Controller/Service/Repository names."""

    def dependencies(self, file: str) -> list[str]:
        return _unique(
            [infer_service_from_controller(file), infer_repository_from_service(file)],
            file,
        )

    def dependents(self, file: str) -> list[str]:
        candidates: list[Optional[str]] = []

        if _MODEL_OR_ENTITY.search(file):
            candidates.append(_sub_first(_MODEL_OR_ENTITY, file, "Service"))
            candidates.append(_sub_first(_MODEL_OR_ENTITY, file, "Controller"))

        # No Service -> Controller edge for interface files
        if "interface" not in file.lower():
            candidates.append(_sub_first(_SERVICE, file, "Controller"))

        candidates.append(_sub_first(_REPOSITORY, file, "Service"))

        return _unique(candidates, file)
