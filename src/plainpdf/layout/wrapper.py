"""
Module: layout.wrapper

Purpose:
    Break a line of text into word-bounded segments that each fit the
    usable page width.

Key Classes:
    - Segment: One fitted run of words
    - SegmentSequence: Lazy, restartable sequence of segments for a line
    - LineWrapper: Greedy word-fitting wrapper

Algorithm:
    Greedy, left to right:
    1. Trim the line and scan its words (runs of non-whitespace)
    2. Measure the slice of the line from the candidate's first word up
       to and including the next word
    3. If that overflows and the candidate already has words, emit the
       candidate and start a new one holding only the next word
    4. Otherwise extend the candidate
    5. Emit the last candidate

    A width equal to the usable width fits. A single word wider than the
    usable width is emitted alone and flagged as overflowing; words are
    never split.

Dependencies:
    - output.metrics: FontMetrics protocol, glyph unit scaling
    - core.fonts: Font/size validation

Used By:
    - layout.engine: render_line()
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Tuple

from plainpdf.core.errors import PlainPdfError, RenderFailure
from plainpdf.core.fonts import PdfFont, validate_font, validate_size
from plainpdf.output.metrics import FontMetrics, to_points

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class Segment:
    """
    A run of whole words from one input line (immutable).

    Attributes:
        text: Slice of the trimmed line spanning the words, internal
            whitespace preserved
        words: The words in order
        width: Measured width in points
        overflow: True for a lone word wider than the usable width

    Example:
        >>> seg = Segment(text="quick brown", words=("quick", "brown"), width=61.3)
        >>> seg.word_count
        2
    """

    text: str
    words: Tuple[str, ...]
    width: float
    overflow: bool = False

    @property
    def word_count(self) -> int:
        return len(self.words)


class SegmentSequence:
    """
    Segments of one line, computed on demand.

    Every iteration rescans the line from the start, so the sequence can
    be consumed any number of times.
    """

    def __init__(self, wrapper: LineWrapper, line: str, font: PdfFont, size: int):
        self._wrapper = wrapper
        self._line = line
        self._font = font
        self._size = size

    def __iter__(self) -> Iterator[Segment]:
        return self._wrapper._iter_segments(self._line, self._font, self._size)

    def __repr__(self) -> str:
        return f"SegmentSequence(line={self._line!r}, font={self._font}, size={self._size})"


class LineWrapper:
    """
    Splits lines into segments no wider than the usable width.

    Pure with respect to layout state: it only consults the metrics
    collaborator.

    Args:
        metrics: Font measurement collaborator
        usable_width: Maximum segment width in points

    Example:
        >>> wrapper = LineWrapper(ReportLabFontMetrics(), usable_width=100)
        >>> [s.text for s in wrapper.split("one two three four five", PdfFont.HELVETICA, 12)]
        ['one two three four', 'five']
    """

    def __init__(self, metrics: FontMetrics, usable_width: float):
        if usable_width <= 0:
            raise ValueError(f"usable_width must be positive: {usable_width}")
        self.metrics = metrics
        self.usable_width = usable_width

    def split(self, line: str, font: PdfFont, size: int) -> SegmentSequence:
        """
        Wrap a line into segments.

        Args:
            line: Text with arbitrary internal whitespace
            font: Catalog font
            size: Point size

        Returns:
            Lazy sequence of segments; empty for a blank line

        Raises:
            InvalidArgument: If font or size is invalid
        """
        validate_font(font)
        validate_size(size)
        return SegmentSequence(self, line, font, size)

    def measure(self, text: str, font: PdfFont, size: int) -> float:
        """
        Width of text in points.

        Raises:
            RenderFailure: If the metrics collaborator fails
        """
        try:
            units = self.metrics.string_width(font, text)
        except PlainPdfError:
            raise
        except Exception as e:
            raise RenderFailure(
                f"Failed to measure text: {e}", text=text, font=font, size=size
            ) from e
        return to_points(units, size)

    def _iter_segments(self, line: str, font: PdfFont, size: int) -> Iterator[Segment]:
        trimmed = line.strip()

        words: list[str] = []
        start = 0
        end = 0
        width = 0.0

        for match in _WORD_RE.finditer(trimmed):
            if not words:
                start = match.start()

            candidate_width = self.measure(trimmed[start:match.end()], font, size)

            if candidate_width > self.usable_width and words:
                yield self._make_segment(trimmed[start:end], words, width)

                # Fresh candidate holding only this word
                words = [match.group()]
                start, end = match.start(), match.end()
                width = self.measure(match.group(), font, size)
            else:
                words.append(match.group())
                end = match.end()
                width = candidate_width

        if words:
            yield self._make_segment(trimmed[start:end], words, width)

    def _make_segment(self, text: str, words: list[str], width: float) -> Segment:
        overflow = width > self.usable_width
        if overflow:
            logger.warning(
                f"Word overflows line: {width:.1f}pt needed, "
                f"{self.usable_width:.1f}pt available ({text[:40]!r})"
            )
        return Segment(text=text, words=tuple(words), width=width, overflow=overflow)
