"""
Module: output.sink

Purpose:
    Document construction collaborator. Owns page creation, content
    streams and binary serialization so the layout engine only deals in
    cursor moves and strings.

Key Classes:
    - DocumentSink / Document / ContentStream: Protocols used by the engine
    - ReportLabDocumentSink: Sink drawing onto a ReportLab canvas
    - ReportLabDocument: One in-memory PDF under construction
    - ReportLabPage: Handle for a page of a ReportLabDocument
    - ReportLabContentStream: Text drawing on the current page

Dependencies:
    - reportlab.pdfgen.canvas: PDF generation
    - reportlab.lib.pagesizes: Default page size
    - core.fonts: PdfFont catalog

Used By:
    - layout.engine: Default sink
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Tuple, Union

from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas
from reportlab.pdfgen.textobject import PDFTextObject

from plainpdf.core.fonts import PdfFont

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ─────────────────────────────────────────────────────────────────────────────
# Protocols
# ─────────────────────────────────────────────────────────────────────────────

class ContentStream(Protocol):
    """Content stream of a single page."""

    def begin_text_block(self) -> None: ...

    def set_font(self, font: PdfFont, size: int) -> None: ...

    def move_cursor_by(self, dx: float, dy: float) -> None: ...

    def draw(self, text: str) -> None: ...

    def end_text_block(self) -> None: ...

    def close(self) -> None: ...


class Document(Protocol):
    """A document under construction."""

    def save(self, path: PathLike) -> None: ...


class DocumentSink(Protocol):
    """Factory for documents, pages and content streams."""

    def new_document(self) -> Tuple[Document, object]: ...

    def new_page(self, doc: Document) -> object: ...

    def open_stream(self, doc: Document, page: object) -> ContentStream: ...


# ─────────────────────────────────────────────────────────────────────────────
# ReportLab implementation
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ReportLabPage:
    """
    Handle for one page of a ReportLabDocument.

    Attributes:
        index: Page number (0-indexed)
    """
    index: int


class ReportLabContentStream:
    """
    Text-only content stream on the canvas's current page.

    Positions are tracked in absolute text space and applied with
    ``setTextOrigin``, so relative moves accumulate exactly as the
    engine issues them. A text block begins at the page origin.
    """

    def __init__(self, c: canvas.Canvas, page: ReportLabPage):
        self._canvas = c
        self.page = page
        self._text: Optional[PDFTextObject] = None
        self._x = 0.0
        self._y = 0.0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def position(self) -> Tuple[float, float]:
        """Current text origin relative to the start of the text block."""
        return self._x, self._y

    def begin_text_block(self) -> None:
        self._require_open()
        if self._text is not None:
            raise RuntimeError("Text block already open")
        self._text = self._canvas.beginText(0, 0)
        self._x = 0.0
        self._y = 0.0

    def set_font(self, font: PdfFont, size: int) -> None:
        self._require_text().setFont(font.postscript_name, size)

    def move_cursor_by(self, dx: float, dy: float) -> None:
        text = self._require_text()
        self._x += dx
        self._y += dy
        text.setTextOrigin(self._x, self._y)

    def draw(self, text: str) -> None:
        self._require_text().textOut(text)

    def end_text_block(self) -> None:
        text = self._require_text()
        self._canvas.drawText(text)
        self._text = None

    def close(self) -> None:
        if self._closed:
            return
        if self._text is not None:
            self.end_text_block()
        self._closed = True
        logger.debug(f"Closed content stream for page {self.page.index}")

    def _require_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"Content stream for page {self.page.index} is closed")

    def _require_text(self) -> PDFTextObject:
        self._require_open()
        if self._text is None:
            raise RuntimeError("No text block is open")
        return self._text


class ReportLabDocument:
    """
    PDF document rendered into an in-memory buffer.

    ReportLab canvases are strictly sequential: only the most recently
    added page can be drawn on. Bytes reach the filesystem on save().
    """

    def __init__(self, pagesize: Tuple[float, float]):
        self._buffer = io.BytesIO()
        self.canvas = canvas.Canvas(self._buffer, pagesize=pagesize)
        self.pagesize = pagesize
        self.page_count = 1
        self.saved = False

    @property
    def current_page(self) -> ReportLabPage:
        return ReportLabPage(index=self.page_count - 1)

    def add_page(self) -> ReportLabPage:
        """Finish the current page and start the next one."""
        self._require_unsaved()
        self.canvas.showPage()
        self.page_count += 1
        return self.current_page

    def save(self, path: PathLike) -> None:
        """
        Serialize the document and write it to path.

        Parent directories are created as needed. ReportLab only emits
        the last page if something was drawn on it; streams always draw
        their text block when closed, so pages opened through the sink
        are kept even when no text was written.

        Raises:
            OSError: If the file cannot be written
        """
        self._require_unsaved()
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        self.canvas.save()
        output_path.write_bytes(self._buffer.getvalue())
        self.saved = True

        logger.info(f"Saved {self.page_count} pages to {output_path}")

    def _require_unsaved(self) -> None:
        if self.saved:
            raise RuntimeError("Document has already been saved")


class ReportLabDocumentSink:
    """
    DocumentSink producing PDFs with ReportLab.

    Args:
        pagesize: (width, height) in points for every page

    Example:
        >>> sink = ReportLabDocumentSink()
        >>> doc, page = sink.new_document()
        >>> stream = sink.open_stream(doc, page)
    """

    def __init__(self, pagesize: Tuple[float, float] = LETTER):
        self.pagesize = (float(pagesize[0]), float(pagesize[1]))

    def new_document(self) -> Tuple[ReportLabDocument, ReportLabPage]:
        doc = ReportLabDocument(self.pagesize)
        return doc, doc.current_page

    def new_page(self, doc: ReportLabDocument) -> ReportLabPage:
        page = doc.add_page()
        logger.debug(f"Added page {page.index}")
        return page

    def open_stream(self, doc: ReportLabDocument, page: ReportLabPage) -> ReportLabContentStream:
        if page != doc.current_page:
            raise ValueError(
                f"Cannot open a stream on page {page.index}; "
                f"current page is {doc.current_page.index}"
            )
        return ReportLabContentStream(doc.canvas, page)
