"""
Custom exceptions for pdflib-compat.

These are raised by the backends only. The procedural :class:`~pdflib_compat.pdf.PDF`
facade catches them and reports a boolean failure instead.
"""


class PDFLibCompatException(Exception):
    """Base exception for all pdflib-compat errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown pdflib-compat error occurred."


class InvalidPDFError(PDFLibCompatException):
    """Raised when an existing PDF file cannot be read."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class DocumentWriteError(PDFLibCompatException):
    """Raised when the document cannot be written to its destination."""

    @property
    def default_message(self) -> str:
        return "Unable to write PDF document."


class UnknownFontError(PDFLibCompatException):
    """Raised when a font name is not one of the standard PDF fonts."""

    @property
    def default_message(self) -> str:
        return "Unknown font name."


class NoActivePageError(PDFLibCompatException):
    """Raised when a page operation is requested while no page is open."""

    @property
    def default_message(self) -> str:
        return "No page is currently open."


class ScriptError(PDFLibCompatException):
    """Raised when a drawing script cannot be parsed."""

    def __init__(self, message: str = "", line_number: int = 0) -> None:
        super().__init__(message)
        self.line_number = line_number

    @property
    def default_message(self) -> str:
        return "Invalid drawing script."
