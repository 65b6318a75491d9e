"""Text wrapping helpers shared by label drawing code."""

from __future__ import annotations

from typing import Iterable, List

from reportlab.pdfbase.pdfmetrics import stringWidth


def wrap_text_to_width(
    text: str,
    font_name: str,
    font_size: float,
    max_width_pt: float,
) -> Iterable[str]:
    """Wrap text into lines that fit within the specified width.

    Words are kept whole where possible; a single word wider than the
    line is broken between characters.
    """

    if not text or max_width_pt <= 0:
        return []

    words = text.split()
    if not words:
        return []

    lines: List[str] = []
    current: List[str] = []
    for word in words:
        tentative = " ".join(current + [word]) if current else word
        if stringWidth(tentative, font_name, font_size) <= max_width_pt:
            current.append(word)
            continue

        if current:
            lines.append(" ".join(current))
            current = []

        if stringWidth(word, font_name, font_size) <= max_width_pt:
            current = [word]
            continue

        # single word exceeds width; perform character-level wrap
        partial = ""
        for ch in word:
            candidate = partial + ch
            if stringWidth(candidate, font_name, font_size) > max_width_pt and partial:
                lines.append(partial)
                partial = ch
            else:
                partial = candidate
        if partial:
            current = [partial]

    if current:
        lines.append(" ".join(current))
    return lines
