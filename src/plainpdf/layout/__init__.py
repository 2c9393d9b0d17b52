"""
Module: layout

Purpose:
    Text layout and pagination.
    Wraps lines to the usable width and flows them down the page,
    starting new pages as they fill.

Key Classes:
    - PageGeometry: Page dimensions and margins
    - LineWrapper: Greedy word wrapping
    - Segment: One wrapped run of words
    - PageCursor: Write position and page-break decision
    - LayoutEngine: Orchestrator and public surface

Dependencies:
    - output: Font metrics and document sink collaborators
"""

from .config import PageGeometry
from .wrapper import LineWrapper, Segment, SegmentSequence
from .cursor import CursorState, PageCursor, line_height
from .engine import LayoutEngine

__all__ = [
    # Config
    "PageGeometry",
    # Wrapping
    "LineWrapper",
    "Segment",
    "SegmentSequence",
    # Cursor
    "CursorState",
    "PageCursor",
    "line_height",
    # Engine
    "LayoutEngine",
]
