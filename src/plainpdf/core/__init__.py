"""
plainpdf Core Package

Shared value types used by the layout and output packages.

All values here are immutable: FontSpec is a frozen dataclass and the
font catalog is a closed enumeration backed by static data.
"""

from .errors import PlainPdfError, InvalidArgument, RenderFailure, EngineClosedError
from .fonts import (
    DEFAULT_FONT,
    DEFAULT_FONT_SIZE,
    FontFamily,
    FontSpec,
    PdfFont,
    lookup_font,
    validate_font,
    validate_size,
)

__all__ = [
    # Errors
    "PlainPdfError",
    "InvalidArgument",
    "RenderFailure",
    "EngineClosedError",
    # Fonts
    "DEFAULT_FONT",
    "DEFAULT_FONT_SIZE",
    "FontFamily",
    "FontSpec",
    "PdfFont",
    "lookup_font",
    "validate_font",
    "validate_size",
]
