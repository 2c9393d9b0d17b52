"""
Module: output.metrics

Purpose:
    Font measurement collaborator. Reports glyph-space widths and
    bounding-box heights; callers scale by size / 1000 to get points.

Key Classes:
    - FontMetrics: Protocol the layout package measures through
    - ReportLabFontMetrics: Implementation backed by ReportLab's AFM tables

Dependencies:
    - reportlab.pdfbase.pdfmetrics: Standard font widths
    - core.fonts: PdfFont catalog

Used By:
    - layout.wrapper: Segment width measurement
    - layout.cursor: Line height
    - layout.engine: Default metrics
"""

from __future__ import annotations

from typing import Protocol

from reportlab.pdfbase import pdfmetrics

from plainpdf.core.fonts import PdfFont

# Glyph metrics are expressed in thousandths of the point size
GLYPH_UNITS_PER_EM = 1000


class FontMetrics(Protocol):
    """Measures text in glyph units for a catalog font."""

    def string_width(self, font: PdfFont, text: str) -> float:
        """Width of text in glyph units (linear sum, no kerning)."""
        ...

    def bounding_box_height(self, font: PdfFont) -> float:
        """Height of the font's bounding box in glyph units."""
        ...


class ReportLabFontMetrics:
    """
    FontMetrics backed by the standard font tables shipped with ReportLab.

    Widths come from ``pdfmetrics.stringWidth`` evaluated at a size of
    1000, which yields glyph units directly. Heights come from the
    catalog's FontBBox data, since ReportLab only exposes ascent and
    descent for the built-in fonts.

    Example:
        >>> metrics = ReportLabFontMetrics()
        >>> metrics.string_width(PdfFont.COURIER, "abc")
        1800.0
    """

    def string_width(self, font: PdfFont, text: str) -> float:
        return float(pdfmetrics.stringWidth(text, font.postscript_name, GLYPH_UNITS_PER_EM))

    def bounding_box_height(self, font: PdfFont) -> float:
        return float(font.bbox_height)


def to_points(glyph_units: float, size: int) -> float:
    """
    Convert a glyph-space measurement to document units (points).

    Args:
        glyph_units: Measurement in thousandths of the point size
        size: Font size in points

    Returns:
        Measurement in points
    """
    # Multiply first so integral metrics scale without rounding error
    return glyph_units * size / GLYPH_UNITS_PER_EM
