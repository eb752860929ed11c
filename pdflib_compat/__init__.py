"""
pdflib-compat - PDFlib-style procedural drawing API backed by pypdf and reportlab.

Code written against the procedural PDFlib calling convention (``begin_page``,
``set_font``, ``show_xy``, ``rect``/``moveto``/``lineto`` then ``fill``,
``stroke`` or ``clip``, ``end_page``, ``close``) can run unchanged on top of
pure Python PDF libraries.

Quick Start:
    >>> from pdflib_compat import PDF
    >>> pdf = PDF.open_file('output.pdf')
    >>> pdf.begin_page(595, 842)
    >>> pdf.rect(50, 50, 100, 100)
    >>> pdf.fill()
    >>> pdf.end_page()
    >>> pdf.close()

Main Classes:
    - PDF: The procedural facade
    - PathState: Pending shape and current point of a page
    - ShimOptions: Facade configuration

Data Classes:
    - Rectangle, Segment: Pending path geometry
    - OperationResult: Boolean-compatible result with a PathError reason
    - DocumentInfo: Information about a written PDF

For CLI usage, use the 'pdflib-compat' command after installation.
"""

__version__ = "1.0.0"

# Core classes
from pdflib_compat.pdf import PDF
from pdflib_compat.path_state import PathState
from pdflib_compat.page import PageContext
from pdflib_compat.config import ShimOptions

# Data types
from pdflib_compat.types import (
    DocumentInfo,
    OperationResult,
    PathError,
    Rectangle,
    Segment,
    ShapeDrawMode,
)

# Exceptions
from pdflib_compat.exceptions import (
    PDFLibCompatException,
    InvalidPDFError,
    DocumentWriteError,
    UnknownFontError,
    NoActivePageError,
    ScriptError,
)

# Utility functions
from pdflib_compat.utils import get_pdf_info, format_file_size

__author__ = "pdflib-compat Contributors"
__license__ = "MIT"

__all__ = [
    # Main classes
    "PDF",
    "PathState",
    "PageContext",
    "ShimOptions",
    # Data types
    "DocumentInfo",
    "OperationResult",
    "PathError",
    "Rectangle",
    "Segment",
    "ShapeDrawMode",
    # Exceptions
    "PDFLibCompatException",
    "InvalidPDFError",
    "DocumentWriteError",
    "UnknownFontError",
    "NoActivePageError",
    "ScriptError",
    # Utility functions
    "get_pdf_info",
    "format_file_size",
    # Version info
    "__version__",
]
