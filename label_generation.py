"""Lay out records onto label sheets and render them to PDF."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from grid import locate
from label_canvas import LabelCanvas
from label_errors import ConfigurationError
from label_templates import TypeRegistry, default_registry
from label_types import (
    DEFAULT_FONT_SIZE,
    DEFAULT_MIN_FONT_SIZE,
    Cell,
    LabelType,
    LayoutOptions,
    record_text,
    record_vertical_override,
)
from text_fit import fit_text, shrink_to_fit_size
from text_metrics import TextMetrics

logger = logging.getLogger(__name__)

DrawCallback = Callable[[LabelCanvas, Any], None]
CanvasFactory = Callable[[LabelType, Optional[Mapping[str, Any]]], LabelCanvas]

_LAYOUT_KEYS = {
    "font_path",
    "font_size",
    "min_font_size",
    "shrink_to_fit",
    "vertical_text",
    "skip",
    "draw_outline",
}
_OPTION_KEYS = _LAYOUT_KEYS | {"type", "document"}


def _whole_number(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a whole number, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigurationError(f"{name} must be a whole number, got {value!r}")
        return int(value)
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text.lstrip("-").isdigit():
        raise ConfigurationError(f"{name} must be a whole number, got {value!r}")
    return int(text)


def resolve_options(options: Mapping[str, Any], label_type: LabelType) -> LayoutOptions:
    """Merge caller options with the label type."""

    unknown = set(options) - _OPTION_KEYS
    if unknown:
        raise ConfigurationError(f"Unknown layout options: {', '.join(sorted(unknown))}")

    font_size = options.get("font_size")
    min_font_size = options.get("min_font_size")
    try:
        font_size = float(font_size) if font_size is not None else None
        min_font_size = (
            float(min_font_size) if min_font_size is not None else DEFAULT_MIN_FONT_SIZE
        )
        skip = _whole_number(options.get("skip") or 0, "skip")
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid layout option: {exc}") from exc

    if min_font_size <= 0:
        raise ConfigurationError("min_font_size must be positive")
    if font_size is not None and font_size < min_font_size:
        raise ConfigurationError(
            f"font_size {font_size:g} is below min_font_size {min_font_size:g}"
        )
    if not 0 <= skip < label_type.labels_per_page:
        raise ConfigurationError(
            f"skip must be between 0 and {label_type.labels_per_page - 1}, got {skip}"
        )

    return LayoutOptions(
        font_path=options.get("font_path"),
        font_size=font_size,
        min_font_size=min_font_size,
        shrink_to_fit=bool(options.get("shrink_to_fit", False)),
        vertical_text=bool(options.get("vertical_text", False)) or label_type.vertical_text,
        skip=skip,
        draw_outline=bool(options.get("draw_outline", False)),
    )


def draw_record_text(canvas_obj: LabelCanvas, record: Any) -> None:
    """Default callback: write the record text centred in the box."""

    canvas_obj.text(record_text(record), align="center")


class LabelRenderer:
    """Places records one per grid cell, starting pages as they fill."""

    def __init__(
        self,
        label_type: LabelType,
        options: LayoutOptions,
        canvas_obj: LabelCanvas,
    ) -> None:
        self.label_type = label_type
        self.options = options
        self.canvas = canvas_obj
        self.metrics = TextMetrics(canvas_obj)
        if options.font_path:
            canvas_obj.set_font(options.font_path)
        self._define_grid()

    def _define_grid(self) -> None:
        self.canvas.define_grid(
            columns=self.label_type.columns,
            rows=self.label_type.rows,
            column_gutter=self.label_type.column_gutter,
            row_gutter=self.label_type.row_gutter,
        )

    def render_records(self, records: Iterable[Any], draw: DrawCallback) -> int:
        count = 0
        for index, record in enumerate(records):
            self.render_record(index, record, draw)
            count += 1
        logger.info(
            "Placed %d labels on %d page(s) of %s",
            count,
            self.canvas.page_number,
            self.label_type.name,
        )
        return count

    def render_record(self, index: int, record: Any, draw: DrawCallback) -> None:
        placement = locate(
            index + self.options.skip,
            self.label_type.rows,
            self.label_type.columns,
        )
        if placement.page_break:
            self.canvas.start_new_page()
            self._define_grid()

        cell = self.canvas.grid_cell(placement.row, placement.column)
        text = record_text(record)
        override = record_vertical_override(record)
        vertical = self.options.vertical_text if override is None else override

        self.canvas.font_size = self._base_font_size(text, cell, vertical)
        logger.debug(
            "Record %d -> page %d row %d column %d (%s)",
            index,
            placement.page + 1,
            placement.row,
            placement.column,
            "vertical" if vertical else "horizontal",
        )

        if vertical:
            self._draw_vertical(cell, record, draw)
        else:
            self._draw_horizontal(cell, text, record, draw)

    def _base_font_size(self, text: str, cell: Cell, vertical: bool) -> float:
        # The explicit size only seeds the horizontal shrink loop; vertical
        # labels keep the shrink-to-fit estimate.
        if self.options.shrink_to_fit and (vertical or self.options.font_size is None):
            return shrink_to_fit_size(text, cell.height, self.options.min_font_size)
        if self.options.font_size is not None:
            return self.options.font_size
        return max(DEFAULT_FONT_SIZE, self.options.min_font_size)

    def _draw_vertical(self, cell: Cell, record: Any, draw: DrawCallback) -> None:
        with self.canvas.rotate(270, origin=cell.top_left):
            with self.canvas.translate(0, cell.width):
                with self.canvas.bounding_box(
                    cell.top_left, width=cell.height, height=cell.width
                ):
                    if self.options.draw_outline:
                        self.canvas.stroke_bounds()
                    draw(self.canvas, record)

    def _draw_horizontal(
        self,
        cell: Cell,
        text: str,
        record: Any,
        draw: DrawCallback,
    ) -> None:
        fitted = fit_text(
            self.metrics,
            text,
            cell,
            font_size=self.canvas.font_size,
            min_font_size=self.options.min_font_size,
        )
        self.canvas.font_size = fitted.font_size
        with self.canvas.bounding_box(cell.top_left, width=cell.width, height=cell.height):
            if self.options.draw_outline:
                self.canvas.stroke_bounds()
            with self.canvas.bounding_box(
                fitted.top_left, width=fitted.width, height=fitted.height
            ):
                draw(self.canvas, record)


def generate(
    records: Iterable[Any],
    options: Mapping[str, Any],
    draw: Optional[DrawCallback] = None,
    *,
    registry: Optional[TypeRegistry] = None,
    canvas_factory: CanvasFactory = LabelCanvas.for_label_type,
) -> LabelCanvas:
    """Lay out ``records`` on the sheet named by ``options["type"]``.

    ``draw(canvas, record)`` is called once per record inside the label's
    bounding box. Returns the canvas, ready to be rendered.
    """

    if "type" not in options:
        raise ConfigurationError("A label type is required")
    types = registry if registry is not None else default_registry()
    label_type = types[options["type"]]
    layout = resolve_options(options, label_type)

    canvas_obj = canvas_factory(label_type, options.get("document"))
    renderer = LabelRenderer(label_type, layout, canvas_obj)
    renderer.render_records(records, draw or draw_record_text)
    return canvas_obj


def render(
    records: Iterable[Any],
    options: Mapping[str, Any],
    draw: Optional[DrawCallback] = None,
    **kwargs: Any,
) -> bytes:
    """Return the PDF bytes for ``records``."""

    return generate(records, options, draw, **kwargs).render()


def render_file(
    output_path: Union[str, Path],
    records: Iterable[Any],
    options: Mapping[str, Any],
    draw: Optional[DrawCallback] = None,
    **kwargs: Any,
) -> str:
    """Write the PDF for ``records`` to ``output_path``."""

    return generate(records, options, draw, **kwargs).render_file(output_path)
