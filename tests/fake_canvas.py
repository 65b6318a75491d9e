"""Recording stand-in for LabelCanvas with predictable metrics."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from grid import Grid
from label_types import Cell, LabelType

# Every character is half the font size wide; every line is font size tall.
CHAR_WIDTH_RATIO = 0.5


class FakeCanvas:
    def __init__(self, width: float = 200.0, height: float = 300.0) -> None:
        self.width = width
        self.height = height
        self.font_size = 12.0
        self.font_name = "Fake"
        self.page_number = 1
        self.events: list[tuple[Any, ...]] = []
        self.drawn: list[tuple[int, Cell, float, Any]] = []
        self._bounds: list[Cell] = [Cell(0.0, height, width, height)]
        self._grid: Optional[Grid] = None

    @classmethod
    def factory(cls, created: list["FakeCanvas"]):
        def build(label_type: LabelType, document: Any = None) -> "FakeCanvas":
            canvas_obj = cls(label_type.printable_width, label_type.printable_height)
            created.append(canvas_obj)
            return canvas_obj

        return build

    @property
    def bounds(self) -> Cell:
        return self._bounds[-1]

    def width_of(self, text: str, font_size: Optional[float] = None) -> float:
        size = self.font_size if font_size is None else font_size
        return len(text) * size * CHAR_WIDTH_RATIO

    def height_of(self, text: str, font_size: Optional[float] = None) -> float:
        size = self.font_size if font_size is None else font_size
        lines = text.split("\n")
        while lines and not lines[-1]:
            lines.pop()
        return len(lines) * size

    def define_grid(self, columns, rows, column_gutter=0.0, row_gutter=0.0) -> Grid:
        self.events.append(("define_grid", columns, rows))
        self._grid = Grid(columns, rows, column_gutter, row_gutter, self.width, self.height)
        return self._grid

    def grid_cell(self, row: int, column: int) -> Cell:
        assert self._grid is not None
        return self._grid.cell(row, column)

    def set_font(self, name: str) -> str:
        self.events.append(("set_font", name))
        self.font_name = name
        return name

    def start_new_page(self) -> None:
        self.page_number += 1
        self.events.append(("start_new_page", self.page_number))

    @contextmanager
    def bounding_box(self, top_left, width, height) -> Iterator[Cell]:
        box = Cell(top_left[0], top_left[1], width, height)
        self.events.append(("enter_box", box))
        self._bounds.append(box)
        try:
            yield box
        finally:
            self._bounds.pop()
            self.events.append(("exit_box", box))

    @contextmanager
    def rotate(self, angle, origin=(0.0, 0.0)) -> Iterator[None]:
        self.events.append(("enter_rotate", angle, origin))
        try:
            yield
        finally:
            self.events.append(("exit_rotate", angle, origin))

    @contextmanager
    def translate(self, dx, dy) -> Iterator[None]:
        self.events.append(("enter_translate", dx, dy))
        try:
            yield
        finally:
            self.events.append(("exit_translate", dx, dy))

    def stroke_bounds(self) -> None:
        self.events.append(("stroke_bounds", self.bounds))

    def text(self, text: str, font_size=None, align="left") -> float:
        self.events.append(("text", text, align))
        return self.bounds.bottom

    def event_names(self) -> list[str]:
        return [event[0] for event in self.events]


def record_draw(canvas_obj: FakeCanvas, record: Any) -> None:
    """Drawing callback that remembers where each record went."""
    canvas_obj.events.append(("draw", record))
    canvas_obj.drawn.append(
        (canvas_obj.page_number, canvas_obj.bounds, canvas_obj.font_size, record)
    )
