"""
Module: core.errors

Purpose:
    Exception hierarchy for plainpdf. Catching PlainPdfError catches
    every error the library raises on its own behalf.

Key Classes:
    - PlainPdfError: Root of the hierarchy
    - InvalidArgument: Bad font or font size at the API boundary
    - RenderFailure: Document or metrics collaborator fault (fatal)
    - EngineClosedError: Operation attempted on a consumed engine

Used By:
    - core.fonts: FontSpec validation
    - layout.wrapper: Metric lookup failures
    - layout.engine: Validation, failure wrapping, state machine
"""

from __future__ import annotations

from typing import Any, Optional


class PlainPdfError(Exception):
    """Base exception for all plainpdf errors."""
    pass


class InvalidArgument(PlainPdfError, ValueError):
    """
    Raised when a font or font size fails validation.

    Detected synchronously before any engine state is touched.
    """
    pass


class RenderFailure(PlainPdfError):
    """
    Raised when a collaborator faults while measuring, drawing,
    opening a page or saving.

    The underlying stream is left in an indeterminate state, so the
    engine that raised this is closed and must not be reused. The
    original exception is chained as ``__cause__``.

    Attributes:
        text: Text being measured or drawn, if any
        font: Font in use when the failure occurred
        size: Font size in use when the failure occurred
        page_index: Zero-based index of the page being written
        reason: Message without the appended context
    """

    def __init__(
        self,
        message: str,
        *,
        text: Optional[str] = None,
        font: Any = None,
        size: Optional[int] = None,
        page_index: Optional[int] = None,
    ):
        self.text = text
        self.font = font
        self.size = size
        self.page_index = page_index
        self.reason = message
        context = []
        if text is not None:
            context.append(f"text={text!r}")
        if font is not None:
            context.append(f"font={font}")
        if size is not None:
            context.append(f"size={size}")
        if page_index is not None:
            context.append(f"page={page_index}")
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


class EngineClosedError(PlainPdfError):
    """Raised when an engine is used after save, close or a fatal failure."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot {operation}: layout engine is closed")
