# pyright: reportUnknownVariableType=false, reportUnknownMemberType=false
# pyright: reportUnknownArgumentType=false, reportAttributeAccessIssue=false
# pyright: reportMissingTypeStubs=false

"""Font file registration for the label canvas."""

from __future__ import annotations

import logging
import re
from io import BytesIO
from pathlib import Path
from typing import Union

from fontTools.ttLib import TTFont as FontToolsTTFont
from fontTools.ttLib import TTLibError
from fontTools.varLib import instancer
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont as ReportLabTTFont

from label_errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_FONT = "Helvetica"
FONT_SUFFIXES = {".ttf", ".otf", ".ttc"}


def is_font_file(name: Union[str, Path]) -> bool:
    return Path(name).suffix.lower() in FONT_SUFFIXES


class FontFileRegistry:
    """Register TrueType/OpenType files with ReportLab once per path."""

    def __init__(self) -> None:
        self._registered: dict[Path, str] = {}

    def register(self, path: Union[str, Path]) -> str:
        font_path = Path(path).expanduser().resolve()
        cached = self._registered.get(font_path)
        if cached:
            return cached
        if not font_path.is_file():
            raise ConfigurationError(f"Font file '{font_path}' is missing.")

        font_bytes = font_path.read_bytes()
        try:
            font = FontToolsTTFont(BytesIO(font_bytes))
            font_name = self._font_name(font, font_path)
            if "fvar" in font:
                source: Union[Path, BytesIO] = self._instantiate_default(font)
            else:
                source = font_path
            pdfmetrics.registerFont(ReportLabTTFont(font_name, source))
        except (TTLibError, KeyError, ValueError) as exc:
            raise ConfigurationError(
                f"Font file '{font_path}' could not be loaded: {exc}"
            ) from exc

        logger.debug("Registered font %s from %s", font_name, font_path)
        self._registered[font_path] = font_name
        return font_name

    def _font_name(self, font: FontToolsTTFont, font_path: Path) -> str:
        names = font["name"]
        record = names.getName(6, 3, 1, 0x409) or names.getName(6, 1, 0, 0)
        raw = record.toUnicode() if record else font_path.stem
        return self._safe_ps_name(raw) or self._safe_ps_name(font_path.stem)

    def _instantiate_default(self, font: FontToolsTTFont) -> BytesIO:
        """Pin every variation axis at its default value."""
        axes = {axis.axisTag: axis.defaultValue for axis in font["fvar"].axes}
        instancer.instantiateVariableFont(font, axes, inplace=True)
        buffer = BytesIO()
        font.save(buffer)
        buffer.seek(0)
        return buffer

    def _safe_ps_name(self, s: str) -> str:
        return re.sub(r"[^A-Za-z0-9-]", "", s)[:63]


_REGISTRY = FontFileRegistry()


def register_font_file(path: Union[str, Path]) -> str:
    """Register a TrueType/OpenType file and return its ReportLab name."""

    return _REGISTRY.register(path)


def resolve_font(name_or_path: Union[str, Path]) -> str:
    """Return a ReportLab font name for a font file or a registered name."""

    if is_font_file(name_or_path):
        return register_font_file(name_or_path)

    font_name = str(name_or_path)
    try:
        pdfmetrics.getFont(font_name)
    except KeyError as exc:
        raise ConfigurationError(f"Unknown font '{font_name}'.") from exc
    return font_name


__all__ = [
    "DEFAULT_FONT",
    "FontFileRegistry",
    "is_font_file",
    "register_font_file",
    "resolve_font",
]
