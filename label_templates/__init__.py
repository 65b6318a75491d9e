"""Label sheet type registry for the layout engine."""

from __future__ import annotations

from typing import Iterable, Optional

from label_types import LabelType

from .catalog import BUILTIN_TYPES
from .registry import TypeRegistry, build_label_type, resolve_paper_size


def default_registry() -> TypeRegistry:
    """Return a fresh registry seeded with the built-in catalog."""

    return TypeRegistry(BUILTIN_TYPES)


def get_type(name: str, registry: Optional[TypeRegistry] = None) -> LabelType:
    """Look up ``name`` in ``registry`` (built-in catalog by default)."""

    return (registry if registry is not None else default_registry())[name]


def list_types(registry: Optional[TypeRegistry] = None) -> Iterable[str]:
    """Return the registered type names."""

    return sorted(registry if registry is not None else default_registry())


__all__ = [
    "BUILTIN_TYPES",
    "TypeRegistry",
    "build_label_type",
    "default_registry",
    "get_type",
    "list_types",
    "resolve_paper_size",
]
