"""
Module: layout.engine

Purpose:
    Lay text out line by line onto the pages of a document.
    Wrap → Advance → Draw → Break page when full

Key Classes:
    - LayoutEngine: Public surface of the library

State Machine:
    Open --render/insert--> Open --page full--> Open (fresh page)
    Open --save/close/fatal failure--> Closed (terminal)

    Every operation on a closed engine raises EngineClosedError.

Dependencies:
    - layout.wrapper: LineWrapper
    - layout.cursor: PageCursor, line_height
    - output: ReportLab metrics and sink (defaults)

Used By:
    - Library callers
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Union

from plainpdf.core.errors import (
    EngineClosedError,
    InvalidArgument,
    PlainPdfError,
    RenderFailure,
)
from plainpdf.core.fonts import DEFAULT_FONT, DEFAULT_FONT_SIZE, FontSpec, PdfFont
from plainpdf.output.metrics import FontMetrics, ReportLabFontMetrics
from plainpdf.output.sink import ContentStream, DocumentSink, ReportLabDocumentSink

from .config import PageGeometry
from .cursor import CursorState, PageCursor, line_height
from .wrapper import LineWrapper, Segment

logger = logging.getLogger(__name__)

# Distinguishes an omitted font (use the default) from an explicit None
_UNSET: Any = object()


class LayoutEngine:
    """
    Flows plain text onto the pages of one document.

    Owns the document, the current page's content stream and the cursor
    exclusively. Not thread-safe; use one engine per document.

    Args:
        default_font: Font for calls that do not name one
        default_size: Size for calls that do not give one
        geometry: Page geometry (default: US Letter, 70pt sides, 80pt top/bottom)
        metrics: Font measurement collaborator (default: ReportLab)
        sink: Document collaborator (default: ReportLab, sized to geometry)

    Raises:
        InvalidArgument: If the default font or size is invalid
        RenderFailure: If the document cannot be created

    Example:
        >>> engine = LayoutEngine()
        >>> engine.render_line("Here is a line, 24pt.", PdfFont.COURIER, 24)
        1
        >>> engine.insert_blank_line()
        >>> engine.render_line("Back to the default font.")
        1
        >>> engine.save("output/file.pdf")
    """

    def __init__(
        self,
        default_font: PdfFont = DEFAULT_FONT,
        default_size: int = DEFAULT_FONT_SIZE,
        *,
        geometry: Optional[PageGeometry] = None,
        metrics: Optional[FontMetrics] = None,
        sink: Optional[DocumentSink] = None,
    ):
        self._default = FontSpec(default_font, default_size)
        self.geometry = geometry if geometry is not None else PageGeometry()
        self.metrics = metrics if metrics is not None else ReportLabFontMetrics()
        self.sink = sink if sink is not None else ReportLabDocumentSink(self.geometry.page_size)

        self._wrapper = LineWrapper(self.metrics, self.geometry.usable_width)
        self._cursor = PageCursor(self.geometry)
        self._closed = False
        self._page_count = 0
        self._stream: Optional[ContentStream] = None

        with self._fatal_on_error("create document"):
            self._doc, first_page = self.sink.new_document()
            self._page_count = 1
            self._stream = self._open_stream(first_page)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def default_spec(self) -> FontSpec:
        return self._default

    @property
    def default_font(self) -> PdfFont:
        return self._default.font

    @property
    def default_size(self) -> int:
        return self._default.size

    @property
    def cursor(self) -> CursorState:
        """Snapshot of the current write position."""
        return self._cursor.state

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def closed(self) -> bool:
        return self._closed

    # ─────────────────────────────────────────────────────────────────────────
    # Configuration
    # ─────────────────────────────────────────────────────────────────────────

    def set_default_font(self, font: PdfFont) -> None:
        """
        Change the font used by calls that do not name one.

        Raises:
            InvalidArgument: If font is None or not a PdfFont
            EngineClosedError: If the engine is closed
        """
        self._require_open("set default font")
        self._default = replace(self._default, font=font)

    def set_default_size(self, size: int) -> None:
        """
        Change the size used by calls that do not give one.

        Raises:
            InvalidArgument: If size is not a positive int
            EngineClosedError: If the engine is closed
        """
        self._require_open("set default size")
        self._default = replace(self._default, size=size)

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def render_line(self, text: str, font: PdfFont = _UNSET, size: Optional[int] = None) -> int:
        """
        Render one line of text, wrapping it as often as needed.

        Each segment is drawn one line-height below the previous one. The
        page-break check runs after every segment, so a long line may
        continue on following pages.

        Args:
            text: Line to render; surrounding whitespace is trimmed
            font: Font to use (default: engine default; None is rejected)
            size: Point size (default: engine default)

        Returns:
            Number of segments drawn (0 for a blank line, which only
            runs the page-break check)

        Raises:
            InvalidArgument: Bad text, font or size (no state changed)
            EngineClosedError: If the engine is closed
            RenderFailure: If measuring or drawing fails (engine closed)
        """
        self._require_open("render line")
        spec = self._resolve(font, size)
        if not isinstance(text, str):
            raise InvalidArgument(f"Text must be a string, got {type(text).__name__}")

        drawn = 0
        with self._fatal_on_error("render line", text=text, spec=spec):
            height = line_height(self.metrics, spec.font, spec.size)
            for segment in self._wrapper.split(text, spec.font, spec.size):
                self._write_segment(segment, spec, height)
                drawn += 1
            # Nothing to draw, but a cursor left below the threshold by
            # blank lines still moves to a fresh page
            if drawn == 0 and self._cursor.needs_new_page():
                self._start_new_page()
        return drawn

    def render_lines(
        self,
        lines: Iterable[str],
        font: PdfFont = _UNSET,
        size: Optional[int] = None,
    ) -> int:
        """
        Render lines in order; blank lines become vertical spacing.

        Args:
            lines: Lines of text
            font: Font for every line (default: engine default)
            size: Point size for every line (default: engine default)

        Returns:
            Total number of segments drawn
        """
        self._require_open("render lines")
        spec = self._resolve(font, size)

        total = 0
        for line in lines:
            if isinstance(line, str) and not line.strip():
                self.insert_blank_line(spec.font, spec.size)
            else:
                total += self.render_line(line, spec.font, spec.size)
        return total

    def render_text(self, text: str, font: PdfFont = _UNSET, size: Optional[int] = None) -> int:
        """
        Render a block of text split on line breaks.

        Returns:
            Total number of segments drawn
        """
        if not isinstance(text, str):
            raise InvalidArgument(f"Text must be a string, got {type(text).__name__}")
        return self.render_lines(text.splitlines(), font, size)

    def insert_blank_line(self, font: PdfFont = _UNSET, size: Optional[int] = None) -> None:
        """
        Move down one line-height without drawing.

        Blank lines never trigger a page break themselves; the next
        rendered line does if the page is full.

        Raises:
            InvalidArgument: Bad font or size (no state changed)
            EngineClosedError: If the engine is closed
            RenderFailure: If the collaborator fails (engine closed)
        """
        self._require_open("insert blank line")
        spec = self._resolve(font, size)

        with self._fatal_on_error("insert blank line", spec=spec):
            height = line_height(self.metrics, spec.font, spec.size)
            self._cursor.advance(-height)
            self._stream.move_cursor_by(0, -height)

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def save(self, path: Union[str, Path]) -> None:
        """
        Finish the document and write it to path. Consumes the engine.

        Raises:
            EngineClosedError: If the engine is already closed
            RenderFailure: If the document cannot be written
        """
        self._require_open("save")

        with self._fatal_on_error("save document"):
            self._stream.end_text_block()
            self._stream.close()
            self._doc.save(path)

        self._release()
        logger.info(f"Saved {self._page_count} page(s) to {path}")

    def close(self) -> None:
        """Discard the engine without saving. Safe to call repeatedly."""
        if self._closed:
            return
        self._release()
        logger.debug("Closed layout engine without saving")

    def __enter__(self) -> LayoutEngine:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _resolve(self, font: Any, size: Optional[int]) -> FontSpec:
        """Combine call arguments with defaults into a validated FontSpec."""
        return FontSpec(
            font=self._default.font if font is _UNSET else font,
            size=self._default.size if size is None else size,
        )

    def _write_segment(self, segment: Segment, spec: FontSpec, height: float) -> None:
        self._stream.set_font(spec.font, spec.size)
        self._cursor.advance(-height)
        self._stream.move_cursor_by(0, -height)
        self._stream.draw(segment.text)

        if self._cursor.needs_new_page():
            self._start_new_page()

    def _start_new_page(self) -> None:
        self._stream.end_text_block()
        self._stream.close()

        page = self.sink.new_page(self._doc)
        self._page_count += 1
        self._cursor.reset_to_top()
        self._stream = self._open_stream(page)

        logger.debug(f"Started page {self._page_count - 1}")

    def _open_stream(self, page: object) -> ContentStream:
        """Open a stream on page with a text block positioned at the cursor."""
        stream = self.sink.open_stream(self._doc, page)
        stream.begin_text_block()
        stream.move_cursor_by(self._cursor.x, self._cursor.y)
        return stream

    def _require_open(self, operation: str) -> None:
        if self._closed:
            raise EngineClosedError(operation)

    def _current_page_index(self) -> Optional[int]:
        return self._page_count - 1 if self._page_count else None

    def _release(self) -> None:
        self._closed = True
        self._stream = None
        self._doc = None

    @contextmanager
    def _fatal_on_error(
        self,
        action: str,
        *,
        text: Optional[str] = None,
        spec: Optional[FontSpec] = None,
    ) -> Iterator[None]:
        """
        Close the engine on any collaborator failure.

        Foreign exceptions are wrapped in RenderFailure with the text,
        font and page context; the original is chained as __cause__.
        """
        try:
            yield
        except RenderFailure as e:
            page_index = self._current_page_index()
            self._release()
            if e.page_index is not None:
                raise
            # Failures raised below the engine lack the page being written
            raise RenderFailure(
                e.reason,
                text=e.text,
                font=e.font,
                size=e.size,
                page_index=page_index,
            ) from (e.__cause__ or e)
        except PlainPdfError:
            self._release()
            raise
        except Exception as e:
            page_index = self._current_page_index()
            self._release()
            raise RenderFailure(
                f"Failed to {action}: {e}",
                text=text,
                font=spec.font if spec is not None else None,
                size=spec.size if spec is not None else None,
                page_index=page_index,
            ) from e
