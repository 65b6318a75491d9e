"""Text measurement against a target box.

The line counts here are deliberately coarse estimates rather than a word
wrap simulation; label sizing depends on them as they are.
"""

from __future__ import annotations

from typing import Callable, List, Protocol, TypeVar

from label_errors import MeasurementError

T = TypeVar("T")

# Characters assumed to fit on one printed line by the shrink-to-fit estimate.
CHARS_PER_LINE = 30
PLACEHOLDER_LINE = "Fake"


class MeasuringCanvas(Protocol):
    def width_of(self, text: str, font_size: float | None = None) -> float: ...

    def height_of(self, text: str, font_size: float | None = None) -> float: ...


def split_lines(text: str) -> List[str]:
    """Split on line breaks, dropping trailing empty lines."""

    lines = text.split("\n")
    while lines and not lines[-1]:
        lines.pop()
    return lines


def estimated_line_count(text: str) -> int:
    """Line count guessed from character counts alone.

    Each line adds one extra line per ``CHARS_PER_LINE`` characters,
    independent of the font or the box width.
    """

    lines = split_lines(text)
    return len(lines) + sum(len(line) // CHARS_PER_LINE for line in lines)


class TextMetrics:
    """Answers width/height/line-count questions through a canvas."""

    def __init__(self, canvas: MeasuringCanvas) -> None:
        self.canvas = canvas

    def width_of(self, line: str, font_size: float) -> float:
        return self._measure(lambda: self.canvas.width_of(line, font_size), line)

    def number_of_lines(self, text: str, box_width: float, font_size: float) -> int:
        """Count lines, adding one for every line wider than ``box_width``."""

        lines = split_lines(text)
        overflow = sum(
            1 for line in lines if self.width_of(line, font_size) > box_width
        )
        return len(lines) + overflow

    def text_height(self, text: str, box_width: float, font_size: float) -> float:
        line_count = self.number_of_lines(text, box_width, font_size)
        placeholder = "\n".join([PLACEHOLDER_LINE] * line_count)
        return self._measure(
            lambda: self.canvas.height_of(placeholder, font_size),
            placeholder,
        )

    def text_width(self, text: str, box_width: float, font_size: float) -> float:
        """Width of the longest line once overlong lines are cut at spaces."""

        widest = 0.0
        for line in split_lines(text):
            width = self.width_of(line, font_size)
            while width > box_width:
                cut = line.rfind(" ")
                if cut < 0:
                    raise MeasurementError(
                        f"Cannot fit {line!r} into {box_width:.2f}pt at "
                        f"{font_size:g}pt: no space left to break at"
                    )
                line = line[:cut]
                width = self.width_of(line, font_size)
            widest = max(widest, width)
        return widest

    def _measure(self, measure: Callable[[], T], text: str) -> T:
        try:
            return measure()
        except MeasurementError:
            raise
        except Exception as exc:
            raise MeasurementError(f"Canvas failed to measure {text!r}: {exc}") from exc
