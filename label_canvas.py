"""ReportLab-backed canvas used by the label layout engine."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import BytesIO
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Union

from reportlab.pdfbase.pdfmetrics import getAscent, getDescent, stringWidth
from reportlab.pdfgen import canvas

from fonts import DEFAULT_FONT, resolve_font
from grid import Grid
from label_templates.utils import wrap_text_to_width
from label_types import DEFAULT_FONT_SIZE, Cell, LabelType

logger = logging.getLogger(__name__)

_INFO_SETTERS = {
    "title": "setTitle",
    "author": "setAuthor",
    "subject": "setSubject",
    "creator": "setCreator",
}


class LabelCanvas:
    """Draws into the printable area of a fixed-size page.

    User space has its origin at the bottom-left margin corner and y grows
    upward. Bounding boxes, rotations and translations are context managers
    that always restore the previous state on exit.
    """

    def __init__(
        self,
        page_size: tuple[float, float],
        *,
        top_margin: float,
        left_margin: float,
        bottom_margin: float,
        right_margin: float,
        document: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.page_size = page_size
        self.top_margin = top_margin
        self.left_margin = left_margin
        self.bottom_margin = bottom_margin
        self.right_margin = right_margin

        document_options = dict(document or {})
        info = {
            key: document_options.pop(key)
            for key in list(document_options)
            if key in _INFO_SETTERS
        }

        self._buffer = BytesIO()
        self._canvas = canvas.Canvas(
            self._buffer,
            pagesize=page_size,
            **document_options,
        )
        for key, value in info.items():
            getattr(self._canvas, _INFO_SETTERS[key])(str(value))

        self.font_name = DEFAULT_FONT
        self.font_size = DEFAULT_FONT_SIZE
        self.page_number = 1
        self._grid: Optional[Grid] = None
        self._bounds: list[Cell] = [self._margin_box()]
        self._rendered: Optional[bytes] = None
        self._begin_page()

    @classmethod
    def for_label_type(
        cls,
        label_type: LabelType,
        document: Optional[Mapping[str, Any]] = None,
    ) -> "LabelCanvas":
        return cls(
            label_type.page_size,
            top_margin=label_type.top_margin,
            left_margin=label_type.left_margin,
            bottom_margin=label_type.bottom_margin,
            right_margin=label_type.right_margin,
            document=document,
        )

    # -- geometry -----------------------------------------------------------

    @property
    def printable_width(self) -> float:
        return self.page_size[0] - self.left_margin - self.right_margin

    @property
    def printable_height(self) -> float:
        return self.page_size[1] - self.top_margin - self.bottom_margin

    @property
    def bounds(self) -> Cell:
        return self._bounds[-1]

    @property
    def grid(self) -> Grid:
        if self._grid is None:
            raise RuntimeError("define_grid() must be called before using the grid")
        return self._grid

    def define_grid(
        self,
        columns: int,
        rows: int,
        column_gutter: float = 0.0,
        row_gutter: float = 0.0,
    ) -> Grid:
        self._grid = Grid(
            columns=columns,
            rows=rows,
            column_gutter=column_gutter,
            row_gutter=row_gutter,
            width=self.printable_width,
            height=self.printable_height,
        )
        return self._grid

    def grid_cell(self, row: int, column: int) -> Cell:
        return self.grid.cell(row, column)

    # -- fonts and measurement ---------------------------------------------

    def set_font(self, name_or_path: Union[str, Path]) -> str:
        self.font_name = resolve_font(name_or_path)
        return self.font_name

    def width_of(self, text: str, font_size: Optional[float] = None) -> float:
        size = self.font_size if font_size is None else font_size
        return stringWidth(text, self.font_name, size)

    def line_height(self, font_size: Optional[float] = None) -> float:
        size = self.font_size if font_size is None else font_size
        ascent = getAscent(self.font_name) / 1000.0 * size
        descent = abs(getDescent(self.font_name)) / 1000.0 * size
        return ascent + descent

    def height_of(self, text: str, font_size: Optional[float] = None) -> float:
        lines = text.split("\n")
        while lines and not lines[-1]:
            lines.pop()
        return len(lines) * self.line_height(font_size)

    # -- scoped state -------------------------------------------------------

    @contextmanager
    def bounding_box(
        self,
        top_left: tuple[float, float],
        width: float,
        height: float,
    ) -> Iterator[Cell]:
        box = Cell(top_left[0], top_left[1], width, height)
        self._bounds.append(box)
        try:
            yield box
        finally:
            self._bounds.pop()

    @contextmanager
    def rotate(
        self,
        angle: float,
        origin: tuple[float, float] = (0.0, 0.0),
    ) -> Iterator[None]:
        ox, oy = origin
        self._canvas.saveState()
        try:
            self._canvas.translate(ox, oy)
            self._canvas.rotate(angle)
            self._canvas.translate(-ox, -oy)
            yield
        finally:
            self._canvas.restoreState()

    @contextmanager
    def translate(self, dx: float, dy: float) -> Iterator[None]:
        self._canvas.saveState()
        try:
            self._canvas.translate(dx, dy)
            yield
        finally:
            self._canvas.restoreState()

    # -- pages --------------------------------------------------------------

    def start_new_page(self) -> None:
        if len(self._bounds) > 1:
            raise RuntimeError("Cannot start a new page inside a bounding box")
        self._canvas.showPage()
        self.page_number += 1
        self._begin_page()
        logger.debug("Started page %d", self.page_number)

    def _begin_page(self) -> None:
        self._canvas.translate(self.left_margin, self.bottom_margin)
        self._canvas.setFont(self.font_name, self.font_size)

    def _margin_box(self) -> Cell:
        return Cell(0.0, self.printable_height, self.printable_width, self.printable_height)

    # -- drawing ------------------------------------------------------------

    def text(
        self,
        text: str,
        font_size: Optional[float] = None,
        align: str = "left",
    ) -> float:
        """Flow ``text`` from the top of the current bounds.

        Lines wider than the bounds are wrapped. Returns the y position below
        the last drawn line.
        """

        size = self.font_size if font_size is None else font_size
        box = self.bounds
        line_height = self.line_height(size)
        ascent = getAscent(self.font_name) / 1000.0 * size

        self._canvas.setFont(self.font_name, size)
        y = box.top
        for paragraph in text.split("\n"):
            lines = list(
                wrap_text_to_width(
                    text=paragraph,
                    font_name=self.font_name,
                    font_size=size,
                    max_width_pt=box.width,
                )
            ) or [""]
            for line in lines:
                baseline = y - ascent
                if align == "center":
                    self._canvas.drawCentredString(box.left + box.width / 2.0, baseline, line)
                elif align == "right":
                    self._canvas.drawRightString(box.right, baseline, line)
                else:
                    self._canvas.drawString(box.left, baseline, line)
                y -= line_height
        return y

    def page_point(self, x: float, y: float) -> tuple[float, float]:
        """Map a user-space point to page coordinates under the current transform."""

        a, b, c, d, e, f = self._canvas._currentMatrix
        return (a * x + c * y + e, b * x + d * y + f)

    def stroke_bounds(self, line_width: float = 0.5) -> None:
        box = self.bounds
        self._canvas.saveState()
        self._canvas.setLineWidth(line_width)
        self._canvas.rect(box.left, box.bottom, box.width, box.height)
        self._canvas.restoreState()

    # -- output -------------------------------------------------------------

    def render(self) -> bytes:
        """Finish the document and return the PDF bytes."""

        if self._rendered is None:
            self._canvas.showPage()
            self._canvas.save()
            self._rendered = self._buffer.getvalue()
        return self._rendered

    def render_file(self, path: Union[str, Path]) -> str:
        output = Path(path)
        output.write_bytes(self.render())
        return str(output)
