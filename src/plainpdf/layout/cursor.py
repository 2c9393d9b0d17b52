"""
Module: layout.cursor

Purpose:
    Track the write position on the current page and decide when the
    page is full.

Key Classes:
    - CursorState: Snapshot of the write position
    - PageCursor: Mutable cursor owned by one layout engine

Key Functions:
    - line_height(): Vertical advance for a font at a size

Used By:
    - layout.engine: Positioning and page breaks
"""

from __future__ import annotations

from dataclasses import dataclass

from plainpdf.core.fonts import PdfFont
from plainpdf.output.metrics import FontMetrics, to_points

from .config import PageGeometry


@dataclass(frozen=True)
class CursorState:
    """
    Write position (immutable snapshot).

    Attributes:
        x: Left edge of text, always the side margin
        y: Baseline of the most recently advanced line
    """
    x: float
    y: float


def line_height(metrics: FontMetrics, font: PdfFont, size: int) -> float:
    """
    Vertical advance of one line of text, in points.

    Derived from the font's bounding-box height scaled by size.

    Example:
        >>> round(line_height(ReportLabFontMetrics(), PdfFont.HELVETICA, 12), 3)
        13.872
    """
    return to_points(metrics.bounding_box_height(font), size)


class PageCursor:
    """
    Write position on the current page.

    y decreases as lines are written (PDF origin is bottom-left and text
    flows down from the top margin). The page is full once y drops below
    twice the bottom margin, which leaves a line's worth of headroom so
    the next line is never drawn under the margin.

    Example:
        >>> cursor = PageCursor(PageGeometry())
        >>> cursor.y
        712.0
        >>> cursor.advance(-14)
        >>> cursor.y
        698.0
    """

    def __init__(self, geometry: PageGeometry):
        self.geometry = geometry
        self.x = 0.0
        self.y = 0.0
        self.reset_to_top()

    def reset_to_top(self) -> None:
        """Move to the first line position of a fresh page."""
        self.x = self.geometry.side_margin
        self.y = self.geometry.top

    def advance(self, offset: float) -> None:
        """Apply a vertical offset; negative moves down the page."""
        self.y += offset

    def needs_new_page(self) -> bool:
        """True once the cursor is below the page-break threshold."""
        return self.y < self.geometry.break_threshold

    @property
    def state(self) -> CursorState:
        return CursorState(x=self.x, y=self.y)
