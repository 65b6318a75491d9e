"""Grid geometry and index-to-cell pagination for label sheets."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from label_errors import ConfigurationError
from label_types import Cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grid:
    """Rows x columns partition of the printable area.

    ``width``/``height`` are the printable area; cells are equally sized and
    separated by the gutters.
    """

    columns: int
    rows: int
    column_gutter: float
    row_gutter: float
    width: float
    height: float

    def __post_init__(self) -> None:
        validate_grid_shape(self.columns, self.rows)
        if self.column_gutter < 0 or self.row_gutter < 0:
            raise ConfigurationError(
                f"Grid gutters must be non-negative, got "
                f"column_gutter={self.column_gutter} row_gutter={self.row_gutter}"
            )

    @property
    def column_width(self) -> float:
        return (self.width - (self.columns - 1) * self.column_gutter) / self.columns

    @property
    def row_height(self) -> float:
        return (self.height - (self.rows - 1) * self.row_gutter) / self.rows

    @property
    def cells_per_page(self) -> int:
        return self.rows * self.columns

    def cell(self, row: int, column: int) -> Cell:
        if not 0 <= row < self.rows or not 0 <= column < self.columns:
            raise IndexError(
                f"Cell ({row}, {column}) outside {self.rows}x{self.columns} grid"
            )
        left = column * (self.column_width + self.column_gutter)
        top = self.height - row * (self.row_height + self.row_gutter)
        return Cell(left, top, self.column_width, self.row_height)


@dataclass(frozen=True)
class Placement:
    page: int
    row: int
    column: int
    page_break: bool


def validate_grid_shape(columns: int, rows: int) -> None:
    if not isinstance(columns, int) or not isinstance(rows, int):
        raise ConfigurationError(
            f"Grid rows/columns must be integers, got rows={rows!r} columns={columns!r}"
        )
    if columns < 1 or rows < 1:
        raise ConfigurationError(
            f"Grid needs at least one row and one column, got rows={rows} columns={columns}"
        )


def locate(index: int, rows: int, columns: int) -> Placement:
    """Map a zero-based slot index onto ``(page, row, column)``.

    The first slot of every page after the first reports ``page_break`` so the
    caller starts a new page before placing into it. Indices must be visited
    in order for the page breaks to line up with the document.
    """

    validate_grid_shape(columns, rows)
    if index < 0:
        raise ValueError(f"Slot index must be non-negative, got {index}")

    page, offset = divmod(index, rows * columns)
    if offset == 0 and page > 0:
        logger.debug("Slot %d starts page %d", index, page + 1)
        return Placement(page, 0, 0, True)
    row, column = divmod(offset, columns)
    return Placement(page, row, column, False)
