"""Component type classification by path keywords.

First matching keyword wins, in this priority order:

    controller -> Controller
    service    -> Service
    repository -> Repository
    model      -> Model
    entity     -> Model
    test       -> Test
    (none)     -> Component

Matching is a case-insensitive substring scan, so ``TestController.cs`` is a
Controller. "entities" does not contain "entity", so a plural ``Entities/``
folder alone does not make a file a Model.
"""

from __future__ import annotations

from ..matching.resolver import stem
from ..models import Component, ComponentType

_TYPE_KEYWORDS: tuple[tuple[str, ComponentType], ...] = (
    ("controller", ComponentType.CONTROLLER),
    ("service", ComponentType.SERVICE),
    ("repository", ComponentType.REPOSITORY),
    ("model", ComponentType.MODEL),
    ("entity", ComponentType.MODEL),
    ("test", ComponentType.TEST),
)


def get_component_type(path: str) -> ComponentType:
    lower = path.lower()
    for keyword, component_type in _TYPE_KEYWORDS:
        if keyword in lower:
            return component_type
    return ComponentType.COMPONENT


def build_component(path: str, depth: int = 0) -> Component:
    """Component keyed by its full path; files sharing a stem stay distinct."""
    return Component(
        name=path,
        file=path,
        type=get_component_type(path),
        depth=depth,
        label=stem(path) or path,
    )
