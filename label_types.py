from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

DEFAULT_FONT_SIZE = 12.0
DEFAULT_MIN_FONT_SIZE = 4.0
DEFAULT_MARGIN = 36.0
DEFAULT_PAPER_SIZE = "A4"


@dataclass(frozen=True)
class LabelType:
    """Sheet description: paper, margins and the label grid."""

    name: str
    page_size: tuple[float, float]
    columns: int
    rows: int
    top_margin: float = DEFAULT_MARGIN
    left_margin: float = DEFAULT_MARGIN
    bottom_margin: float = DEFAULT_MARGIN
    right_margin: float = DEFAULT_MARGIN
    column_gutter: float = 0.0
    row_gutter: float = 0.0
    vertical_text: bool = False

    @property
    def labels_per_page(self) -> int:
        return self.rows * self.columns

    @property
    def printable_width(self) -> float:
        return self.page_size[0] - self.left_margin - self.right_margin

    @property
    def printable_height(self) -> float:
        return self.page_size[1] - self.top_margin - self.bottom_margin


@dataclass(frozen=True)
class Cell:
    """Rectangle addressed by its top-left corner, y grows upward."""

    left: float
    top: float
    width: float
    height: float

    @property
    def top_left(self) -> tuple[float, float]:
        return (self.left, self.top)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top - self.height


@dataclass(frozen=True)
class LayoutOptions:
    """Caller options merged with the label type."""

    font_path: Optional[str] = None
    font_size: Optional[float] = None
    min_font_size: float = DEFAULT_MIN_FONT_SIZE
    shrink_to_fit: bool = False
    vertical_text: bool = False
    skip: int = 0
    draw_outline: bool = False


@dataclass(frozen=True)
class FitResult:
    """Settled font size and the centred text box inside a cell."""

    font_size: float
    left: float
    top: float
    width: float
    height: float

    @property
    def top_left(self) -> tuple[float, float]:
        return (self.left, self.top)


@runtime_checkable
class VerticalTextOverride(Protocol):
    """Records that decide their own orientation."""

    vertical_text: Optional[bool]


@dataclass(frozen=True)
class LabelRecord:
    """Text payload with an optional per-label orientation override."""

    text: str
    vertical_text: Optional[bool] = None

    def __str__(self) -> str:
        return self.text


def record_text(record: Any) -> str:
    """Return the multi-line text carried by ``record``."""

    if isinstance(record, str):
        return record
    text = getattr(record, "text", None)
    if isinstance(text, str):
        return text
    return str(record)


def record_vertical_override(record: Any) -> Optional[bool]:
    if isinstance(record, str) or not isinstance(record, VerticalTextOverride):
        return None
    value = record.vertical_text
    return None if value is None else bool(value)
