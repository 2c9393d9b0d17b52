"""
Module: layout.config

Purpose:
    Page geometry for the layout engine.
    Defines page dimensions, margins and the derived writable region.

Key Classes:
    - PageGeometry: Immutable geometry configuration

Dependencies:
    - reportlab.lib.pagesizes: Standard page sizes

Used By:
    - layout.wrapper: Usable width
    - layout.cursor: Top position and page-break threshold
    - layout.engine: Sink page size
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import LETTER

# US Letter in points, the default page of the document container
DEFAULT_PAGE_WIDTH_PT, DEFAULT_PAGE_HEIGHT_PT = LETTER

DEFAULT_SIDE_MARGIN = 70
DEFAULT_TOP_BOTTOM_MARGIN = 80


@dataclass(frozen=True)
class PageGeometry:
    """
    Page geometry (immutable).

    Coordinates follow PDF convention: origin at the bottom-left corner,
    y increasing upwards, units in points.

    Attributes:
        page_width: Page width in points
        page_height: Page height in points
        side_margin: Left and right margin in points
        top_bottom_margin: Top and bottom margin in points

    Example:
        >>> geometry = PageGeometry()
        >>> geometry.usable_width
        472.0  # 612 - 2 * 70
        >>> geometry.break_threshold
        160  # 2 * 80
    """

    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT
    side_margin: float = DEFAULT_SIDE_MARGIN
    top_bottom_margin: float = DEFAULT_TOP_BOTTOM_MARGIN

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.side_margin < 0:
            raise ValueError(f"side_margin must be >= 0: {self.side_margin}")
        if self.top_bottom_margin < 0:
            raise ValueError(f"top_bottom_margin must be >= 0: {self.top_bottom_margin}")
        if self.usable_width <= 0:
            raise ValueError("Side margins exceed page width")
        if self.page_height <= self.break_threshold:
            raise ValueError("Top and bottom margins leave no writable height")

    @property
    def usable_width(self) -> float:
        """Width available to a line of text (excluding side margins)."""
        return self.page_width - 2 * self.side_margin

    @property
    def top(self) -> float:
        """Y coordinate of the first line position on a fresh page."""
        return self.page_height - self.top_bottom_margin

    @property
    def break_threshold(self) -> float:
        """A page is full once the cursor drops below this y coordinate."""
        return 2 * self.top_bottom_margin

    @property
    def page_size(self) -> tuple[float, float]:
        """(width, height) as expected by the document sink."""
        return (self.page_width, self.page_height)
