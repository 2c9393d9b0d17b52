"""
Module: output

Purpose:
    Collaborators the layout engine draws and measures through,
    implemented with ReportLab.

Key Classes:
    - ReportLabFontMetrics: Glyph widths and bounding-box heights
    - ReportLabDocumentSink: Pages, content streams and serialization

Dependencies:
    - reportlab: PDF generation and standard font metrics
"""

from .metrics import FontMetrics, ReportLabFontMetrics, GLYPH_UNITS_PER_EM, to_points
from .sink import (
    ContentStream,
    Document,
    DocumentSink,
    ReportLabContentStream,
    ReportLabDocument,
    ReportLabDocumentSink,
    ReportLabPage,
)

__all__ = [
    # Metrics
    "FontMetrics",
    "ReportLabFontMetrics",
    "GLYPH_UNITS_PER_EM",
    "to_points",
    # Sink
    "ContentStream",
    "Document",
    "DocumentSink",
    "ReportLabContentStream",
    "ReportLabDocument",
    "ReportLabDocumentSink",
    "ReportLabPage",
]
