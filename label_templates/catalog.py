"""Built-in label sheet types, dimensions in points."""

from __future__ import annotations

from typing import Any

from reportlab.lib.units import inch, mm

BUILTIN_TYPES: dict[str, dict[str, Any]] = {
    "Avery5160": {
        "paper_size": "LETTER",
        "top_margin": 0.50 * inch,
        "bottom_margin": 0.50 * inch,
        "left_margin": 0.1875 * inch,
        "right_margin": 0.1875 * inch,
        "columns": 3,
        "rows": 10,
        "column_gutter": 0.125 * inch,
        "row_gutter": 0,
    },
    "Avery5260": {
        "paper_size": "LETTER",
        "top_margin": 0.50 * inch,
        "bottom_margin": 0.50 * inch,
        "left_margin": 0.1875 * inch,
        "right_margin": 0.1875 * inch,
        "columns": 3,
        "rows": 10,
        "column_gutter": 0.125 * inch,
        "row_gutter": 0,
    },
    "Avery5161": {
        "paper_size": "LETTER",
        "top_margin": 0.50 * inch,
        "bottom_margin": 0.50 * inch,
        "left_margin": 0.15625 * inch,
        "right_margin": 0.15625 * inch,
        "columns": 2,
        "rows": 10,
        "column_gutter": 0.1875 * inch,
        "row_gutter": 0,
    },
    "Avery5162": {
        "paper_size": "LETTER",
        "top_margin": 0.8333 * inch,
        "bottom_margin": 0.8333 * inch,
        "left_margin": 0.15625 * inch,
        "right_margin": 0.15625 * inch,
        "columns": 2,
        "rows": 7,
        "column_gutter": 0.1875 * inch,
        "row_gutter": 0,
    },
    "Avery5163": {
        "paper_size": "LETTER",
        "top_margin": 0.50 * inch,
        "bottom_margin": 0.50 * inch,
        "left_margin": 0.17 * inch,
        "right_margin": 0.17 * inch,
        "columns": 2,
        "rows": 5,
        "column_gutter": 0.16 * inch,
        "row_gutter": 0,
    },
    "Avery5163Vertical": {
        "paper_size": "LETTER",
        "top_margin": 0.50 * inch,
        "bottom_margin": 0.50 * inch,
        "left_margin": 0.17 * inch,
        "right_margin": 0.17 * inch,
        "columns": 2,
        "rows": 5,
        "column_gutter": 0.16 * inch,
        "row_gutter": 0,
        "vertical_text": True,
    },
    "Avery5164": {
        "paper_size": "LETTER",
        "top_margin": 0.50 * inch,
        "bottom_margin": 0.50 * inch,
        "left_margin": 0.17 * inch,
        "right_margin": 0.17 * inch,
        "columns": 2,
        "rows": 3,
        "column_gutter": 0.16 * inch,
        "row_gutter": 0,
    },
    "Avery5167": {
        "paper_size": "LETTER",
        "top_margin": 0.50 * inch,
        "bottom_margin": 0.50 * inch,
        "left_margin": 0.30 * inch,
        "right_margin": 0.30 * inch,
        "columns": 4,
        "rows": 20,
        "column_gutter": 0.30 * inch,
        "row_gutter": 0,
    },
    "Avery7160": {
        "paper_size": "A4",
        "top_margin": 15.15 * mm,
        "bottom_margin": 15.15 * mm,
        "left_margin": 7.25 * mm,
        "right_margin": 7.25 * mm,
        "columns": 3,
        "rows": 7,
        "column_gutter": 2.5 * mm,
        "row_gutter": 0,
    },
    "Avery7163": {
        "paper_size": "A4",
        "top_margin": 15.15 * mm,
        "bottom_margin": 15.15 * mm,
        "left_margin": 4.65 * mm,
        "right_margin": 4.65 * mm,
        "columns": 2,
        "rows": 7,
        "column_gutter": 2.5 * mm,
        "row_gutter": 0,
    },
    "QuarterSheet": {
        "paper_size": "LETTER",
        "top_margin": 0.50 * inch,
        "bottom_margin": 0.50 * inch,
        "left_margin": 0.50 * inch,
        "right_margin": 0.50 * inch,
        "columns": 2,
        "rows": 2,
        "column_gutter": 0,
        "row_gutter": 0,
    },
}
