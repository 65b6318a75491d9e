"""Font sizing and centring of a record inside a grid cell."""

from __future__ import annotations

import logging
import math

from label_errors import FitError
from label_types import DEFAULT_FONT_SIZE, DEFAULT_MIN_FONT_SIZE, Cell, FitResult
from text_metrics import TextMetrics, estimated_line_count

logger = logging.getLogger(__name__)

# Slack around the fitted text box so glyph overhang stays inside the cell.
WIDTH_BUFFER = 5.0
HEIGHT_BUFFER = 5.0
# Row height reserved for overflow by the shrink-to-fit estimate.
OVERFLOW_MARGIN = 10.0
# Lines of this size are assumed per row by the shrink-to-fit estimate.
ESTIMATE_LINE_HEIGHT = 12.0


def shrink_to_fit_size(
    text: str,
    cell_height: float,
    min_font_size: float = DEFAULT_MIN_FONT_SIZE,
) -> float:
    """One-shot font size estimate from the character-based line count."""

    line_count = estimated_line_count(text)
    row_height = cell_height - OVERFLOW_MARGIN
    if line_count <= math.floor(row_height / ESTIMATE_LINE_HEIGHT):
        return max(DEFAULT_FONT_SIZE, min_font_size)

    size = row_height / (line_count + 1)
    if size < min_font_size:
        raise FitError(
            f"{line_count} estimated lines need {size:.2f}pt text in a "
            f"{cell_height:.2f}pt row, below the {min_font_size:g}pt minimum"
        )
    return size


def fits(metrics: TextMetrics, text: str, cell: Cell, font_size: float) -> bool:
    return metrics.text_height(text, cell.width, font_size) <= cell.height


def fit_font_size(
    metrics: TextMetrics,
    text: str,
    cell: Cell,
    font_size: float = DEFAULT_FONT_SIZE,
    min_font_size: float = DEFAULT_MIN_FONT_SIZE,
) -> float:
    """Step the font size down by one point until the text height fits."""

    size = font_size
    while not fits(metrics, text, cell, size):
        if size - 1 < min_font_size:
            raise FitError(
                f"Text does not fit a {cell.width:.2f}x{cell.height:.2f}pt cell "
                f"at the {min_font_size:g}pt minimum font size"
            )
        size -= 1
    if size != font_size:
        logger.debug("Shrunk font from %gpt to %gpt", font_size, size)
    return size


def center_text_box(
    metrics: TextMetrics,
    text: str,
    cell: Cell,
    font_size: float,
) -> FitResult:
    """Place the measured text block in the middle of ``cell``."""

    text_width = metrics.text_width(text, cell.width, font_size)
    text_height = metrics.text_height(text, cell.width, font_size)
    left = cell.left + (cell.width - text_width) / 2 - WIDTH_BUFFER
    top = cell.top - (cell.height - text_height) / 2 - HEIGHT_BUFFER
    return FitResult(
        font_size=font_size,
        left=left,
        top=top,
        width=text_width + WIDTH_BUFFER,
        height=text_height,
    )


def fit_text(
    metrics: TextMetrics,
    text: str,
    cell: Cell,
    font_size: float = DEFAULT_FONT_SIZE,
    min_font_size: float = DEFAULT_MIN_FONT_SIZE,
) -> FitResult:
    size = fit_font_size(metrics, text, cell, font_size, min_font_size)
    return center_text_box(metrics, text, cell, size)
