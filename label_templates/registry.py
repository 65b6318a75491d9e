"""Immutable registry of label sheet types."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterator, Union

import yaml
from reportlab.lib import pagesizes

from grid import validate_grid_shape
from label_errors import ConfigurationError
from label_types import DEFAULT_MARGIN, DEFAULT_PAPER_SIZE, LabelType

logger = logging.getLogger(__name__)

_MARGIN_KEYS = ("top_margin", "left_margin", "bottom_margin", "right_margin")
_KNOWN_KEYS = {
    "paper_size",
    *_MARGIN_KEYS,
    "columns",
    "rows",
    "column_gutter",
    "row_gutter",
    "vertical_text",
}


def resolve_paper_size(value: Any) -> tuple[float, float]:
    """Return ``(width, height)`` for a ReportLab size name or a pair."""

    if isinstance(value, str):
        size = getattr(pagesizes, value.strip().upper(), None)
        if not isinstance(size, tuple):
            raise ConfigurationError(f"Unknown paper size '{value}'")
        return (float(size[0]), float(size[1]))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            width, height = float(value[0]), float(value[1])
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid paper size {value!r}") from exc
        if width > 0 and height > 0:
            return (width, height)
    raise ConfigurationError(f"Invalid paper size {value!r}")


def build_label_type(name: str, spec: Mapping[str, Any]) -> LabelType:
    """Apply defaults to a raw type mapping and validate it."""

    unknown = set(spec) - _KNOWN_KEYS
    if unknown:
        raise ConfigurationError(
            f"Label type '{name}' has unknown keys: {', '.join(sorted(unknown))}"
        )

    columns = spec.get("columns")
    rows = spec.get("rows")
    validate_grid_shape(columns, rows)  # type: ignore[arg-type]

    try:
        margins = {
            key: float(spec[key]) if spec.get(key) is not None else DEFAULT_MARGIN
            for key in _MARGIN_KEYS
        }
        column_gutter = float(spec.get("column_gutter") or 0)
        row_gutter = float(spec.get("row_gutter") or 0)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Label type '{name}' has a non-numeric size: {exc}") from exc

    if column_gutter < 0 or row_gutter < 0:
        raise ConfigurationError(f"Label type '{name}' has negative gutters")

    label_type = LabelType(
        name=name,
        page_size=resolve_paper_size(spec.get("paper_size") or DEFAULT_PAPER_SIZE),
        columns=columns,  # type: ignore[arg-type]
        rows=rows,  # type: ignore[arg-type]
        column_gutter=column_gutter,
        row_gutter=row_gutter,
        vertical_text=bool(spec.get("vertical_text", False)),
        **margins,
    )
    if label_type.printable_width <= 0 or label_type.printable_height <= 0:
        raise ConfigurationError(f"Label type '{name}' margins leave no printable area")
    return label_type


class TypeRegistry:
    """Label types keyed by name; merging returns a new registry."""

    def __init__(self, types: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._types: dict[str, dict[str, Any]] = {
            str(name): dict(spec) for name, spec in (types or {}).items()
        }

    def __getitem__(self, name: str) -> LabelType:
        spec = self._types.get(name)
        if spec is None:
            available = ", ".join(sorted(self._types))
            raise ConfigurationError(
                f"Label type unknown '{name}'. Available types: {available}"
            )
        return build_label_type(name, spec)

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def get_type(self, name: str) -> LabelType:
        return self[name]

    def merge(self, custom_types: Mapping[str, Mapping[str, Any]]) -> "TypeRegistry":
        if not isinstance(custom_types, Mapping):
            raise ConfigurationError("Custom label types must be a mapping of name to type")
        for name, spec in custom_types.items():
            if not isinstance(spec, Mapping):
                raise ConfigurationError(f"Label type '{name}' must be a mapping")
        merged = dict(self._types)
        merged.update({str(name): dict(spec) for name, spec in custom_types.items()})
        return TypeRegistry(merged)

    def merge_file(self, path: Union[str, Path]) -> "TypeRegistry":
        """Merge label types from a YAML file of ``name: {...}`` mappings."""

        types_path = Path(path)
        if not types_path.is_file():
            raise ConfigurationError(f"Label types file '{types_path}' does not exist")
        try:
            with types_path.open("r", encoding="utf-8") as handle:
                loaded = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid label types file '{types_path}': {exc}") from exc

        if not isinstance(loaded, Mapping):
            raise ConfigurationError(
                f"Label types file '{types_path}' must contain a mapping of types"
            )
        logger.debug("Loaded %d label types from %s", len(loaded), types_path)
        return self.merge(loaded)
