"""Top-level package for plainpdf.

Lays plain text onto the pages of a generated PDF: word wrapping,
vertical pagination and font-metric measurement.

Provides subpackages:
- plainpdf.core – font catalog, FontSpec and the error hierarchy
- plainpdf.layout – page geometry, line wrapping, cursor and the layout engine
- plainpdf.output – ReportLab-backed font metrics and document sink
"""

def _get_version() -> str:
    """Get the installed distribution version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("plainpdf")
    except PackageNotFoundError:
        # Imported from a source checkout without installing
        return "0.0.0"


__version__ = _get_version()

from .core import (  # noqa: E402
    PdfFont,
    FontSpec,
    PlainPdfError,
    InvalidArgument,
    RenderFailure,
    EngineClosedError,
)
from .layout import PageGeometry, LayoutEngine, LineWrapper, Segment  # noqa: E402

__all__: list[str] = [
    "__version__",
    "PdfFont",
    "FontSpec",
    "PlainPdfError",
    "InvalidArgument",
    "RenderFailure",
    "EngineClosedError",
    "PageGeometry",
    "LayoutEngine",
    "LineWrapper",
    "Segment",
]
