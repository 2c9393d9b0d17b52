"""
Module: core.fonts

Purpose:
    Closed catalog of the fonts the engine can lay text out in, and the
    FontSpec value pairing a font with a point size.

Key Classes:
    - FontFamily: Helvetica, Courier or Times
    - PdfFont: One of the twelve family/weight/slant combinations
    - FontSpec: Validated (font, size) pair

Key Functions:
    - lookup_font(): Resolve a family plus bold/italic flags to a PdfFont
    - validate_font() / validate_size(): Boundary checks raising InvalidArgument

Dependencies:
    - core.errors: InvalidArgument

Used By:
    - output.metrics: Glyph widths and bounding boxes per font
    - output.sink: Font selection on a content stream
    - layout.engine: Default font configuration

Design Note:
    Members carry no live font objects. Each maps to a standard Type 1
    PostScript name understood by the document sink, and to the height
    of its FontBBox from the Adobe core AFM files. Both are static data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidArgument


class FontFamily(str, Enum):
    """Typeface family of a catalog font."""
    HELVETICA = "Helvetica"
    COURIER = "Courier"
    TIMES = "Times"

    def __str__(self) -> str:
        return self.value


class PdfFont(str, Enum):
    """
    Standard Type 1 fonts available to the layout engine.

    The value is the PostScript name of the font program.

    Example:
        >>> PdfFont.TIMES_ITALIC.postscript_name
        'Times-Italic'
        >>> PdfFont.COURIER_BOLD.family
        <FontFamily.COURIER: 'Courier'>
    """

    # Helvetica-based fonts
    HELVETICA = "Helvetica"
    HELVETICA_BOLD = "Helvetica-Bold"
    HELVETICA_ITALIC = "Helvetica-Oblique"
    HELVETICA_BOLD_ITALIC = "Helvetica-BoldOblique"

    # Courier-based fonts
    COURIER = "Courier"
    COURIER_BOLD = "Courier-Bold"
    COURIER_ITALIC = "Courier-Oblique"
    COURIER_BOLD_ITALIC = "Courier-BoldOblique"

    # Times-based fonts
    TIMES = "Times-Roman"
    TIMES_BOLD = "Times-Bold"
    TIMES_ITALIC = "Times-Italic"
    TIMES_BOLD_ITALIC = "Times-BoldItalic"

    def __str__(self) -> str:
        return self.value

    @property
    def postscript_name(self) -> str:
        """Name of the standard font program."""
        return self.value

    @property
    def family(self) -> FontFamily:
        return _CATALOG[self][0]

    @property
    def is_bold(self) -> bool:
        return _CATALOG[self][1]

    @property
    def is_italic(self) -> bool:
        return _CATALOG[self][2]

    @property
    def bbox_height(self) -> int:
        """FontBBox height in glyph units (thousandths of the point size)."""
        return _CATALOG[self][3]


# font -> (family, bold, italic, FontBBox height)
_CATALOG: dict[PdfFont, tuple[FontFamily, bool, bool, int]] = {
    PdfFont.HELVETICA: (FontFamily.HELVETICA, False, False, 1156),             # -166 -225 1000 931
    PdfFont.HELVETICA_BOLD: (FontFamily.HELVETICA, True, False, 1190),         # -170 -228 1003 962
    PdfFont.HELVETICA_ITALIC: (FontFamily.HELVETICA, False, True, 1156),       # -170 -225 1116 931
    PdfFont.HELVETICA_BOLD_ITALIC: (FontFamily.HELVETICA, True, True, 1190),   # -174 -228 1114 962
    PdfFont.COURIER: (FontFamily.COURIER, False, False, 1055),                 # -23 -250 715 805
    PdfFont.COURIER_BOLD: (FontFamily.COURIER, True, False, 1051),             # -113 -250 749 801
    PdfFont.COURIER_ITALIC: (FontFamily.COURIER, False, True, 1055),           # -27 -250 849 805
    PdfFont.COURIER_BOLD_ITALIC: (FontFamily.COURIER, True, True, 1051),       # -57 -250 869 801
    PdfFont.TIMES: (FontFamily.TIMES, False, False, 1116),                     # -168 -218 1000 898
    PdfFont.TIMES_BOLD: (FontFamily.TIMES, True, False, 1153),                 # -168 -218 1000 935
    PdfFont.TIMES_ITALIC: (FontFamily.TIMES, False, True, 1100),               # -169 -217 1010 883
    PdfFont.TIMES_BOLD_ITALIC: (FontFamily.TIMES, True, True, 1139),           # -200 -218 996 921
}

DEFAULT_FONT = PdfFont.HELVETICA
DEFAULT_FONT_SIZE = 12


def lookup_font(family: FontFamily, *, bold: bool = False, italic: bool = False) -> PdfFont:
    """
    Resolve a family and weight/slant flags to a catalog font.

    Args:
        family: Typeface family
        bold: Whether the bold weight is wanted
        italic: Whether the italic (oblique) slant is wanted

    Returns:
        Matching PdfFont

    Raises:
        InvalidArgument: If family is not a FontFamily
    """
    if not isinstance(family, FontFamily):
        raise InvalidArgument(f"Unknown font family: {family!r}")
    for font, (fam, is_bold, is_italic, _) in _CATALOG.items():
        if fam is family and is_bold == bold and is_italic == italic:
            return font
    # Every combination is catalogued
    raise AssertionError(f"Font catalog is missing {family} bold={bold} italic={italic}")


def validate_font(font: Any) -> PdfFont:
    """Return font unchanged if it is a catalog font, else raise InvalidArgument."""
    if font is None:
        raise InvalidArgument("Font must not be None")
    if not isinstance(font, PdfFont):
        raise InvalidArgument(f"Font must be a PdfFont, got {type(font).__name__}: {font!r}")
    return font


def validate_size(size: Any) -> int:
    """Return size unchanged if it is a positive int, else raise InvalidArgument."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArgument(f"Font size must be an integer, got {type(size).__name__}: {size!r}")
    if size <= 0:
        raise InvalidArgument(f"Font size must be positive: {size}")
    return size


@dataclass(frozen=True)
class FontSpec:
    """
    Font and point size pair (immutable).

    Attributes:
        font: Catalog font
        size: Point size, a positive integer

    Example:
        >>> FontSpec(PdfFont.COURIER, 10).size
        10
        >>> FontSpec(PdfFont.COURIER, 0)  # raises InvalidArgument
    """

    font: PdfFont = DEFAULT_FONT
    size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        """Validate on construction."""
        validate_font(self.font)
        validate_size(self.size)

    @property
    def family(self) -> FontFamily:
        return self.font.family
